"""
Integración del registro con el ciclo de vida de componentes.
"""
from .attrs_mixin import DidUpdateAttrsMixin

__all__ = ["DidUpdateAttrsMixin"]
