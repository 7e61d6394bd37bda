"""
Reglas de desenvolvimiento y comparación estricta de valores de atributos.
"""
import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .entry import MISSING

_PRIMITIVES = (str, bytes, int, float, bool, complex, Enum)


def unwrap_value(prop: Any) -> Any:
    """
    Extrae el valor interno de un atributo envuelto.

    El host a veces entrega un descriptor con el valor dentro (por ejemplo
    ``{"value": 7}`` o un objeto con atributo ``value``) y a veces el valor
    directamente.

    Args:
        prop: Valor recibido en el snapshot

    Returns:
        Valor interno si ``prop`` es un contenedor, o ``prop`` tal cual
    """
    if prop is None or prop is MISSING or isinstance(prop, _PRIMITIVES):
        return prop

    if isinstance(prop, Mapping):
        return prop["value"] if "value" in prop else prop

    inner = getattr(prop, "value", MISSING)
    return prop if inner is MISSING else inner


def strict_equals(a: Any, b: Any) -> bool:
    """
    Igualdad estricta: primitivos por tipo y valor, el resto por identidad.

    No hay comparación profunda: dos listas con el mismo contenido son
    distintas si no son el mismo objeto.

    Args:
        a: Primer valor
        b: Segundo valor

    Returns:
        True si ambos valores se consideran el mismo
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if _is_number(a) and _is_number(b):
        if _is_nan(a) or _is_nan(b):
            return False
        return a == b

    if isinstance(a, (str, bytes)) or isinstance(b, (str, bytes)):
        return type(a) is type(b) and a == b

    return a is b


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, complex)) and not isinstance(value, bool)


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)
