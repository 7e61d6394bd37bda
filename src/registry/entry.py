"""
Estructuras de datos del registro de cambios.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


class _Missing:
    """Marca de ausencia, distinta de cualquier valor real (incluido None)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class RegistryState(Enum):
    """Estados del ciclo de vida de un registro."""

    ACTIVE = "active"
    DESTROYED = "destroyed"


@dataclass
class RegistryEntry:
    """Representa una clave observada con su callback y último valor."""

    key: str
    callback: Optional[Callable[[Any], Any]]
    trigger_value: Any = MISSING
    last_value: Any = MISSING

    @property
    def has_trigger(self) -> bool:
        """True si se especificó un valor disparador (aunque sea None)."""
        return self.trigger_value is not MISSING

    def release(self):
        """Suelta las referencias al callback, disparador y último valor."""
        self.callback = None
        self.trigger_value = MISSING
        self.last_value = MISSING
