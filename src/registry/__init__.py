"""
Registro de callbacks por cambio de atributos.
"""
from .change_registry import ChangeRegistry
from .comparison import strict_equals, unwrap_value
from .entry import MISSING, RegistryEntry, RegistryState
from .exceptions import (
    InvalidRegistrationError,
    RegistryDestroyedError,
    RegistryError,
)

__all__ = [
    "ChangeRegistry",
    "RegistryEntry",
    "RegistryState",
    "MISSING",
    "strict_equals",
    "unwrap_value",
    "RegistryError",
    "InvalidRegistrationError",
    "RegistryDestroyedError",
]
