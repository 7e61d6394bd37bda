"""
Excepciones del registro de cambios.
"""


class RegistryError(Exception):
    """Error base del registro de cambios."""


class InvalidRegistrationError(RegistryError, ValueError):
    """La clave no es un string no vacío o el callback no es invocable."""


class RegistryDestroyedError(RegistryError, RuntimeError):
    """Operación sobre un registro ya destruido (modo estricto)."""
