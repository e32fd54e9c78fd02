from typing import Any, Dict

from fxbridge.core.detector import HostDetector
from fxbridge.core.environment import HostEnvironment
from fxbridge.settings import DEFAULT_SETTINGS, BridgeSettings

NOT_AVAILABLE = "N/A"


class Diagnostics:
    """Raw values of every detection signal, for error messages and debugging."""

    def __init__(self, env: HostEnvironment, settings: BridgeSettings = DEFAULT_SETTINGS):
        self.env = env
        self.settings = settings

    def snapshot(self) -> Dict[str, Any]:
        info: Dict[str, Any] = {"detected": "UNKNOWN"}
        info["appDefined"] = self.env.has("app")
        try:
            info["appName"] = str(self.env.lookup("app").name) if self.env.has("app") else NOT_AVAILABLE
        except Exception as exc:
            info["appName"] = f"error: {exc}"
        try:
            info["btAppName"] = (
                str(self.env.lookup("BridgeTalk").appName) if self.env.has("BridgeTalk") else NOT_AVAILABLE
            )
        except Exception:
            info["btAppName"] = "error"
        try:
            dollar_name = self.env.lookup("$").appName if self.env.has("$") else None
            info["dollarAppName"] = str(dollar_name) if dollar_name else NOT_AVAILABLE
        except Exception:
            info["dollarAppName"] = "error"
        info["qeDefined"] = self.env.has("qe")
        info["detected"] = HostDetector(self.env, self.settings).detect().value
        return info
