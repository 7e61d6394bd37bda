"""
Configuración central del registro de cambios de atributos.
"""
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Configuración global del sistema."""

    # Logging
    LOG_LEVEL = os.getenv("ATTRS_LOG_LEVEL", "WARNING")
    LOG_FILE = Path(os.getenv("ATTRS_LOG_FILE")) if os.getenv("ATTRS_LOG_FILE") else None

    # Ciclo de vida: si es True, operar sobre un registro destruido lanza error
    STRICT_LIFECYCLE = _env_flag("ATTRS_STRICT_LIFECYCLE")

    @classmethod
    def get_log_level(cls) -> int:
        """
        Resuelve el nombre del nivel de logging configurado.

        Returns:
            Nivel numérico de logging (WARNING si el nombre no es válido)
        """
        level = logging.getLevelName(str(cls.LOG_LEVEL).upper())
        return level if isinstance(level, int) else logging.WARNING
