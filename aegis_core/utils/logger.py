import sys
from pathlib import Path

from loguru import logger

from aegis_core.config import SETTINGS

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)


def configure_logging(level: str | None = None, to_file: bool | None = None) -> None:
    """
    Konfiguruje sinki loguru (stderr + opcjonalnie plik z rotacją).

    Wywoływane jawnie przez aplikację hosta - import pakietu nie zmienia
    istniejących sinków.

    Args:
        level: Poziom logowania (domyślnie SETTINGS.LOG_LEVEL)
        to_file: Czy logować do pliku (domyślnie SETTINGS.LOG_TO_FILE)
    """
    level = level or SETTINGS.LOG_LEVEL
    to_file = SETTINGS.LOG_TO_FILE if to_file is None else to_file

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)

    if to_file:
        # Upewniamy się, że katalog na logi istnieje
        log_dir = Path(SETTINGS.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(log_dir / "aegis.log", level=level, rotation="10 MB")


def get_logger(name: str):
    """Zwraca logger z podaną nazwą."""
    return logger.bind(name=name)
