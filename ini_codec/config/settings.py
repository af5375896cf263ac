"""Réglages de la bibliothèque, validés par Pydantic.

Exemple de fichier ``ini_codec.toml`` :

    encoding = "utf-8"
    sort_sections = true

    [logging]
    level = "DEBUG"
"""

import codecs
import json
import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ValidationError, field_validator

from ini_codec.errors.exceptions import ConfigurationError


class LoggingSettings(BaseModel):
    """Section ``logging`` : niveau et format des messages."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    model_config = {"extra": "forbid"}

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class IniSettings(BaseModel):
    """Réglages de lecture/écriture des fichiers INI.

    Attributes:
        encoding: Encodage des fichiers et des flux binaires.
        sort_sections: Écrire les sections par ordre alphabétique.
        logging: Réglages de journalisation.
    """

    encoding: str = "utf-8"
    sort_sections: bool = False
    logging: LoggingSettings = LoggingSettings()

    model_config = {"extra": "forbid"}

    @field_validator("encoding")
    @classmethod
    def known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Encodage inconnu : {v}")
        return v

def _read_settings_file(path: Path) -> dict:
    """Retourne le contenu brut d'un fichier de réglages TOML ou JSON."""
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f)
    if suffix == ".json":
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    raise ConfigurationError(
        f"Format de réglages non supporté pour {path} : "
        "utilisez un fichier .toml ou .json"
    )


def load_settings(config_path: str | Path) -> IniSettings:
    """Charge et valide les réglages depuis un fichier TOML ou JSON.

    Le format est déduit de l'extension du fichier.

    Args:
        config_path: Chemin du fichier de réglages.

    Returns:
        Réglages validés.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ConfigurationError: Si le fichier est illisible, d'un format
            non supporté ou si son contenu ne décrit pas des réglages
            valides.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Fichier de réglages non trouvé : {path}")

    try:
        raw_settings = _read_settings_file(path)
    except ValueError as error:
        raise ConfigurationError(
            f"Fichier de réglages illisible {path} : {error}"
        ) from error

    if not isinstance(raw_settings, dict):
        raise ConfigurationError(
            f"Réglages invalides dans {path} : un objet clé/valeur est attendu"
        )

    try:
        return IniSettings.model_validate(raw_settings)
    except ValidationError as error:
        raise ConfigurationError(
            f"Réglages invalides dans {path} : {error}"
        ) from error
