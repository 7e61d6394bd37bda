"""
Registro de callbacks por cambio de atributo.

Recibe snapshots completos de atributos, detecta qué claves registradas
cambiaron respecto al snapshot anterior y llama a sus callbacks.
"""
from typing import Any, Callable, Dict, List, Mapping, Optional

from config import Config
from .comparison import strict_equals, unwrap_value
from .entry import MISSING, RegistryEntry, RegistryState
from .exceptions import InvalidRegistrationError, RegistryDestroyedError
from ..utils.logger import setup_logger


class ChangeRegistry:
    """Detecta cambios de atributos entre snapshots y despacha callbacks."""

    def __init__(self, strict: Optional[bool] = None, log_level: Optional[int] = None):
        """
        Inicializa un registro vacío en estado activo.

        Args:
            strict: Si es True, operar tras ``teardown`` lanza
                RegistryDestroyedError (por defecto Config.STRICT_LIFECYCLE)
            log_level: Nivel de logging (por defecto Config.LOG_LEVEL)
        """
        self.strict = Config.STRICT_LIFECYCLE if strict is None else strict
        self.entries: Optional[Dict[str, RegistryEntry]] = {}
        self._state = RegistryState.ACTIVE

        self.logger = setup_logger(
            __name__,
            level=Config.get_log_level() if log_level is None else log_level,
            log_file=Config.LOG_FILE,
        )

        self.metrics = {
            "snapshots_processed": 0,
            "changes_detected": 0,
            "callbacks_dispatched": 0,
            "callbacks_gated": 0,
        }

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.teardown()

    def __contains__(self, key: str) -> bool:
        return self.is_registered(key)

    def __len__(self) -> int:
        return len(self.entries) if self.entries else 0

    @property
    def state(self) -> RegistryState:
        return self._state

    @property
    def is_destroyed(self) -> bool:
        return self._state is RegistryState.DESTROYED

    def register(
        self,
        key: str,
        callback: Callable[[Any], Any],
        trigger_value: Any = MISSING
    ):
        """
        Registra un callback para cuando cambie el valor de ``key``.

        Si la clave ya estaba registrada se reemplazan callback y disparador,
        pero se conserva el último valor observado.

        Args:
            key: Nombre del atributo a observar
            callback: Función llamada con el nuevo valor
            trigger_value: Opcional. Si se pasa (aunque sea None), el
                callback solo se llama cuando el nuevo valor es este

        Raises:
            InvalidRegistrationError: Si la clave o el callback no son válidos
            RegistryDestroyedError: Si el registro fue destruido (modo estricto)
        """
        if not isinstance(key, str) or not key:
            raise InvalidRegistrationError(
                f"La clave debe ser un string no vacío, se recibió {key!r}"
            )
        if not callable(callback):
            raise InvalidRegistrationError(
                f"El callback para '{key}' no es invocable: {callback!r}"
            )
        if not self._ensure_active("register"):
            return

        entry = self.entries.get(key)
        if entry is None:
            self.entries[key] = RegistryEntry(
                key=key, callback=callback, trigger_value=trigger_value
            )
        else:
            entry.callback = callback
            entry.trigger_value = trigger_value

        self.logger.debug(
            f"Callback registrado para '{key}'"
            + (f" (disparador={trigger_value!r})" if trigger_value is not MISSING else "")
        )

    def process_snapshot(self, attributes: Optional[Mapping[str, Any]]):
        """
        Compara un snapshot con los últimos valores y despacha callbacks.

        Las claves no registradas se ignoran. El último valor se actualiza
        siempre que haya cambio, aunque el disparador impida la llamada.
        Las excepciones de un callback se propagan sin capturar y las claves
        restantes del snapshot quedan sin procesar.

        Args:
            attributes: Mapeo clave -> valor crudo o envuelto
        """
        if not self._ensure_active("process_snapshot"):
            return

        self.metrics["snapshots_processed"] += 1

        for key, prop in (attributes or {}).items():
            # un callback puede haber destruido el registro
            if self.is_destroyed:
                break

            entry = self.entries.get(key)
            if entry is None:
                continue

            new_value = unwrap_value(prop)
            if strict_equals(new_value, entry.last_value):
                continue

            entry.last_value = new_value
            self.metrics["changes_detected"] += 1

            if entry.has_trigger and not strict_equals(new_value, entry.trigger_value):
                self.metrics["callbacks_gated"] += 1
                self.logger.debug(f"'{key}' cambió a {new_value!r}, disparador no coincide")
                continue

            self.logger.debug(f"'{key}' cambió a {new_value!r}, llamando callback")
            self.metrics["callbacks_dispatched"] += 1
            entry.callback(new_value)

    def teardown(self):
        """Libera todas las entradas y deja el registro destruido."""
        if self.is_destroyed:
            return

        for entry in self.entries.values():
            entry.release()
        released = len(self.entries)
        self.entries.clear()
        self.entries = None
        self._state = RegistryState.DESTROYED

        self.logger.debug(f"Registro destruido, {released} entradas liberadas")

    def is_registered(self, key: str) -> bool:
        """Indica si hay un callback registrado para ``key``."""
        return bool(self.entries) and key in self.entries

    def registered_keys(self) -> List[str]:
        """Retorna las claves registradas en orden de registro."""
        return list(self.entries) if self.entries else []

    def get_last_value(self, key: str, default: Any = None) -> Any:
        """
        Obtiene el último valor observado para ``key``.

        Args:
            key: Clave registrada
            default: Valor a retornar si la clave no existe o no tiene valor

        Returns:
            Último valor observado o ``default``
        """
        entry = self.entries.get(key) if self.entries else None
        if entry is None or entry.last_value is MISSING:
            return default
        return entry.last_value

    def _ensure_active(self, operation: str) -> bool:
        """
        Verifica que el registro siga activo.

        Returns:
            True si la operación puede continuar
        """
        if not self.is_destroyed:
            return True
        if self.strict:
            raise RegistryDestroyedError(
                f"No se puede llamar a {operation}() en un registro destruido"
            )
        self.logger.warning(f"{operation}() ignorado: el registro ya fue destruido")
        return False
