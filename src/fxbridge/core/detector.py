import logging
from typing import Callable, List, Optional, Sequence, Tuple

from fxbridge.core.environment import HostEnvironment
from fxbridge.core.fallback import probe
from fxbridge.core.models import HostKind
from fxbridge.settings import DEFAULT_SETTINGS, BridgeSettings

logger = logging.getLogger(__name__)


def _match_name(raw: object, ae_tokens: Sequence[str], premiere_tokens: Sequence[str]) -> Optional[HostKind]:
    if not raw:
        return None
    name = str(raw).lower()
    if any(token in name for token in premiere_tokens):
        return HostKind.PREMIERE
    if any(token in name for token in ae_tokens):
        return HostKind.AFTER_EFFECTS
    return None


class HostDetector:
    """Identify the hosting application from the globals it publishes.

    Signals are tried in a fixed order and the first definitive answer wins:
    the BridgeTalk application name, ``app.name``, the Premiere-only ``qe``
    global, then the scripting engine's ``$.appName``. A signal that raises
    or whose global is missing counts as absent.
    """

    def __init__(self, env: HostEnvironment, settings: BridgeSettings = DEFAULT_SETTINGS):
        self.env = env
        self.settings = settings

    def signals(self) -> List[Tuple[str, Callable[[], Optional[HostKind]]]]:
        return [
            ("BridgeTalk.appName", self._bridge_talk),
            ("app.name", self._app_name),
            ("qe", self._qe),
            ("$.appName", self._dollar),
        ]

    def detect(self) -> HostKind:
        for label, signal in self.signals():
            kind = probe(signal)
            if kind is not None:
                logger.debug("host detected via %s: %s", label, kind.value)
                return kind
        logger.debug("no detection signal matched")
        return HostKind.UNKNOWN

    def _bridge_talk(self) -> Optional[HostKind]:
        raw = self.env.lookup("BridgeTalk").appName
        return _match_name(raw, self.settings.bridge_talk_ae_tokens, self.settings.premiere_tokens)

    def _app_name(self) -> Optional[HostKind]:
        raw = self.env.lookup("app").name
        return _match_name(raw, self.settings.app_name_ae_tokens, self.settings.premiere_tokens)

    def _qe(self) -> Optional[HostKind]:
        return HostKind.PREMIERE if self.env.has("qe") else None

    def _dollar(self) -> Optional[HostKind]:
        raw = self.env.lookup("$").appName
        return _match_name(raw, self.settings.dollar_ae_tokens, self.settings.premiere_tokens)
