"""Tests pour les règles de guillemets et d'échappement."""

import pytest

from ini_codec.codec.escaping import (
    escape_value,
    format_value,
    needs_quoting,
    parse_value,
    unescape_value,
)


class TestNeedsQuoting:
    """Tests pour needs_quoting."""

    def test_plain_value(self):
        """Une valeur simple s'écrit sans guillemets."""
        assert needs_quoting("value1") is False

    def test_empty_value(self):
        """La chaîne vide s'écrit sans guillemets."""
        assert needs_quoting("") is False

    @pytest.mark.parametrize(
        "char", [" ", "\t", "\n", "\r", '"', "'", "\\", "=", ";", "#", "[", "]"]
    )
    def test_reserved_characters(self, char):
        """Chaque caractère réservé impose des guillemets."""
        assert needs_quoting(f"a{char}b") is True

    def test_other_unicode_whitespace(self):
        """Les autres espaces blancs imposent aussi des guillemets."""
        assert needs_quoting("a\u00a0") is True


class TestEscapeValue:
    """Tests pour escape_value et format_value."""

    def test_escapes(self):
        """Guillemet, barre oblique et contrôles sont échappés."""
        assert escape_value('a"b\\c\nd\re\tf') == '"a\\"b\\\\c\\nd\\re\\tf"'

    def test_single_quote_not_escaped(self):
        """Le guillemet simple passe tel quel entre guillemets doubles."""
        assert escape_value("it's") == "\"it's\""

    def test_format_bare(self):
        """format_value laisse une valeur simple intacte."""
        assert format_value("simple") == "simple"

    def test_format_quoted(self):
        """format_value met entre guillemets une valeur avec espace."""
        assert format_value("with space") == '"with space"'


class TestUnescapeValue:
    """Tests pour unescape_value."""

    def test_known_sequences(self):
        """Les séquences connues sont décodées."""
        assert unescape_value("a\\nb\\rc\\td\\\\e", '"') == "a\nb\rc\td\\e"

    def test_double_quote_in_double_quoted(self):
        """\\" est décodé dans une valeur entre guillemets doubles."""
        assert unescape_value('say \\"hi\\"', '"') == 'say "hi"'

    def test_double_quote_in_single_quoted(self):
        """\\" reste littéral dans une valeur entre guillemets simples."""
        assert unescape_value('say \\"hi\\"', "'") == 'say \\"hi\\"'

    def test_single_quote_in_single_quoted(self):
        """\\' est décodé dans une valeur entre guillemets simples."""
        assert unescape_value("it\\'s", "'") == "it's"

    def test_single_quote_in_double_quoted(self):
        """\\' reste littéral dans une valeur entre guillemets doubles."""
        assert unescape_value("it\\'s", '"') == "it\\'s"

    def test_unknown_sequence_kept(self):
        """Une séquence inconnue est conservée, barre oblique comprise."""
        assert unescape_value("C:\\path\\x", '"') == "C:\\path\\x"

    def test_trailing_backslash_kept(self):
        """Une barre oblique finale isolée reste littérale."""
        assert unescape_value("end\\", '"') == "end\\"


class TestParseValue:
    """Tests pour parse_value."""

    def test_double_quoted(self):
        """Les guillemets doubles sont retirés."""
        assert parse_value('"quoted value"') == "quoted value"

    def test_single_quoted(self):
        """Les guillemets simples sont retirés."""
        assert parse_value("'single quoted'") == "single quoted"

    def test_mismatched_quotes_verbatim(self):
        """Des guillemets différents aux extrémités laissent la valeur brute."""
        assert parse_value("\"mixed'") == "\"mixed'"

    def test_single_quote_char_verbatim(self):
        """Un guillemet isolé n'est pas une valeur entre guillemets."""
        assert parse_value('"') == '"'

    def test_empty_quotes(self):
        """Deux guillemets donnent la chaîne vide."""
        assert parse_value('""') == ""

    def test_unquoted_no_decoding(self):
        """Une valeur non entourée n'est pas décodée."""
        assert parse_value("a\\nb") == "a\\nb"

    def test_format_then_parse(self):
        """Une valeur écrite puis relue est identique."""
        value = " \"q\" 'x' \\ \t\n\r = ; # [ ] "
        assert parse_value(format_value(value)) == value
