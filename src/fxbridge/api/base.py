import logging
from pathlib import Path
from typing import Any, Callable

from fxbridge.core.environment import HostEnvironment
from fxbridge.core.fallback import Outcome
from fxbridge.core.models import ClipSelection, HostKind
from fxbridge.settings import DEFAULT_SETTINGS, BridgeSettings

logger = logging.getLogger(__name__)


class HostAPIError(Exception):
    """A user-facing failure inside one host strategy (no sequence, no selection, ...)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class HostAPI:
    """Shared surface of the per-host adapters.

    Public methods never raise: user-facing failures keep their message and
    any other exception from the host object model becomes
    ``"<label> error: <message>"``.
    """

    kind: HostKind = HostKind.UNKNOWN
    label: str = "Host"

    def __init__(self, env: HostEnvironment, settings: BridgeSettings = DEFAULT_SETTINGS):
        self.env = env
        self.settings = settings

    def locate(self) -> Outcome:
        return self._guarded(self._locate)

    def import_and_place(self, output_path: str, selection: ClipSelection) -> Outcome:
        return self._guarded(self._import_and_place, output_path, selection)

    def import_standalone(self, output_path: str) -> Outcome:
        return self._guarded(self._import_standalone, output_path)

    def _locate(self) -> ClipSelection:
        raise NotImplementedError

    def _import_and_place(self, output_path: str, selection: ClipSelection):
        raise NotImplementedError

    def _import_standalone(self, output_path: str):
        raise NotImplementedError

    def _app(self) -> Any:
        return self.env.lookup("app")

    @staticmethod
    def _require_output(output_path: str) -> None:
        if not output_path or not Path(output_path).is_file():
            raise HostAPIError("NOT_FOUND", f"Output file not found: {output_path}")

    def _guarded(self, fn: Callable[..., Any], *args: Any) -> Outcome:
        try:
            return Outcome.success(fn(*args))
        except HostAPIError as exc:
            return Outcome.failure(exc.message, exc.code)
        except Exception as exc:
            logger.info("%s raised during %s: %s", self.label, fn.__name__, exc)
            return Outcome.failure(f"{self.label} error: {exc}", "HOST_ERROR")
