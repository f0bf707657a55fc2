"""
Configuration du logging de Marquee via loguru.

Deux sorties :
- Console (stderr) : colorée, pour suivre la pagination en temps réel
- Fichier optionnel : JSON sérialisé avec rotation, pour l'analyse après coup

Les clés API présentes dans les URL journalisées sont masquées par un patch
appliqué à chaque message.
"""

import re
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_APIKEY_PATTERN = re.compile(r"(apikey=)[^&\s]+")

# Niveaux console selon la verbosité de la CLI (-v, -vv)
_VERBOSITY_LEVELS = {0: "INFO", 1: "DEBUG", 2: "TRACE"}


def level_for_verbosity(verbose: int = 0, quiet: bool = False) -> str:
    """Traduit les options -v/-q de la CLI en niveau loguru."""
    if quiet:
        return "ERROR"
    return _VERBOSITY_LEVELS.get(verbose, "TRACE")


def _mask_api_key(record: dict) -> None:
    record["message"] = _APIKEY_PATTERN.sub(r"\1***", record["message"])


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/marquee.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (TRACE, DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, ou None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()
    logger.configure(patcher=_mask_api_key)

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Chaque cycle de pagination est journalisé en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        enqueue=True,
    )

    logger.debug(f"Logging configuré (fichier: {log_file}, rotation: {rotation_size})")
