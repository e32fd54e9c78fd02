import builtins
import sys
from typing import Any, Dict, Iterable, Mapping, Optional

HOST_GLOBALS = (
    "BridgeTalk",
    "app",
    "qe",
    "$",
    "CompItem",
    "FootageItem",
    "ImportOptions",
    "File",
)


class HostGlobalMissing(LookupError):
    def __init__(self, name: str):
        super().__init__(f"Host global '{name}' is not defined")
        self.name = name


class HostEnvironment:
    """Read-only view of the globals a host scripting runtime publishes."""

    def __init__(self, host_globals: Optional[Mapping[str, Any]] = None):
        self._globals: Dict[str, Any] = dict(host_globals or {})

    @classmethod
    def from_runtime(cls, names: Iterable[str] = HOST_GLOBALS) -> "HostEnvironment":
        main = sys.modules.get("__main__")
        namespaces = [vars(main)] if main is not None else []
        namespaces.append(vars(builtins))
        found: Dict[str, Any] = {}
        for name in names:
            for namespace in namespaces:
                if name in namespace:
                    found[name] = namespace[name]
                    break
        return cls(found)

    def has(self, name: str) -> bool:
        return name in self._globals

    def lookup(self, name: str) -> Any:
        try:
            return self._globals[name]
        except KeyError as exc:
            raise HostGlobalMissing(name) from exc

    def names(self) -> list:
        return sorted(self._globals)
