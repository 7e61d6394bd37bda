"""
Mixin para componentes que necesitan callbacks por cambio de atributo.

Uso:

    class MyComponent(DidUpdateAttrsMixin):
        def __init__(self):
            self.init_did_update_attrs()
            # solo cuando my_key pase a valer 3
            self.register_did_update_attrs_callback("my_key", self.on_my_key, 3)
            # cada vez que cambie key_a o key_b, mismo callback
            self.register_did_update_attrs_callback("key_a", self.on_a_or_b)
            self.register_did_update_attrs_callback("key_b", self.on_a_or_b)

        def on_my_key(self, new_value): ...
        def on_a_or_b(self, new_value): ...

El host llama a ``did_update_attrs`` en cada re-render y a ``will_destroy``
al destruirse.
"""
import functools
from typing import Any, Callable, Mapping, Optional

from ..registry import MISSING, ChangeRegistry


class DidUpdateAttrsMixin:
    """Conecta el ciclo de vida de un componente con un ChangeRegistry."""

    _did_update_attrs_registry: Optional[ChangeRegistry] = None
    _skip_next_update: bool = False

    def init_did_update_attrs(self, skip_initial_render: bool = False, strict: Optional[bool] = None):
        """
        Crea el registro propio del componente.

        Args:
            skip_initial_render: Ignorar el primer snapshot, para frameworks
                que también lo entregan en el render inicial
            strict: Política de ciclo de vida del registro (ver ChangeRegistry)
        """
        self._did_update_attrs_registry = ChangeRegistry(strict=strict)
        self._skip_next_update = skip_initial_render

    @property
    def did_update_attrs_registry(self) -> Optional[ChangeRegistry]:
        return self._did_update_attrs_registry

    def register_did_update_attrs_callback(
        self,
        key: str,
        callback: Callable,
        *trigger_on_value: Any,
        bind_context: bool = False
    ):
        """
        Registra un callback para cuando cambie el atributo ``key``.

        Args:
            key: Nombre del atributo
            callback: Función llamada con el nuevo valor
            trigger_on_value: Opcional, un único valor; si se pasa, el callback
                solo se llama cuando el atributo cambia a ese valor
            bind_context: Pasar el componente como primer argumento del
                callback (para funciones que no son métodos ligados)
        """
        if len(trigger_on_value) > 1:
            raise TypeError("Solo se admite un valor disparador")
        # solo si el componente nunca tuvo registro
        if self._did_update_attrs_registry is None:
            self.init_did_update_attrs()

        trigger = trigger_on_value[0] if trigger_on_value else MISSING
        if bind_context and callable(callback):
            callback = functools.partial(callback, self)

        self._did_update_attrs_registry.register(key, callback, trigger)

    def did_update_attrs(self, attrs: Mapping[str, Any]):
        """
        Procesa los atributos del re-render actual.

        Args:
            attrs: Atributos nuevos, crudos o envueltos con ``value``
        """
        if self._skip_next_update:
            self._skip_next_update = False
            return
        if self._did_update_attrs_registry is not None:
            self._did_update_attrs_registry.process_snapshot(attrs)

    def get_previous_attr(self, key: str, default: Any = None) -> Any:
        """Último valor observado de un atributo registrado."""
        if self._did_update_attrs_registry is None:
            return default
        return self._did_update_attrs_registry.get_last_value(key, default)

    def will_destroy(self):
        """
        Libera los callbacks y valores guardados del componente.

        El registro destruido se conserva: registrar o procesar atributos
        después no lo reactiva (se ignora con aviso, o lanza
        RegistryDestroyedError en modo estricto).
        """
        self._skip_next_update = False
        if self._did_update_attrs_registry is not None:
            self._did_update_attrs_registry.teardown()
