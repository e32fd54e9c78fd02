import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from fxbridge import __version__
from fxbridge.api.after_effects import AfterEffectsHost
from fxbridge.api.base import HostAPI
from fxbridge.api.premiere import PremiereHost
from fxbridge.bridge.protocol import PROTOCOL_VERSION
from fxbridge.core.detector import HostDetector
from fxbridge.core.diagnostics import Diagnostics
from fxbridge.core.environment import HostEnvironment
from fxbridge.core.fallback import Outcome, first_success
from fxbridge.core.models import ClipSelection, HostKind
from fxbridge.core.resolver import MediaResolver
from fxbridge.settings import BridgeSettings

logger = logging.getLogger(__name__)


class BridgeOperationError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


ACTION_METHODS = [
    "system.version",
    "system.actions",
    "host.detect",
    "host.info",
    "clip.selected",
    "clip.export",
    "clip.import_replace",
    "clip.import_motion",
]

# failures that mean the host answered, so trying the next host would mislead
CONCLUSIVE_CODES = frozenset({"NO_CONTEXT", "NO_SELECTION"})


def _adapters(env: HostEnvironment, settings: BridgeSettings) -> Dict[HostKind, HostAPI]:
    return {
        HostKind.PREMIERE: PremiereHost(env, settings),
        HostKind.AFTER_EFFECTS: AfterEffectsHost(env, settings),
    }


def _raise_for(outcome: Outcome) -> Any:
    if not outcome.ok:
        raise BridgeOperationError(outcome.code or "ERROR", outcome.error or "Unknown error")
    return outcome.value


def _selection_param(params: Dict[str, Any]) -> ClipSelection:
    raw = params.get("clip")
    if raw is None:
        raise BridgeOperationError("INVALID_INPUT", "clip info is required")
    data = json.loads(raw) if isinstance(raw, str) else raw
    return ClipSelection.from_dict(data)


def _require_output(params: Dict[str, Any]) -> str:
    output = str(params.get("output") or "")
    if not output or not Path(output).is_file():
        raise BridgeOperationError("NOT_FOUND", f"Output file not found: {output}")
    return output


def _dispatch(
    host: HostKind,
    action: Callable[[HostAPI], Outcome],
    env: HostEnvironment,
    settings: BridgeSettings,
    diagnose: bool = False,
) -> Outcome:
    """Run ``action`` on the detected host's adapter.

    A definitive host runs only its own adapter and surfaces its failure.
    An unknown host tries the timeline adapter, then the composition one.
    A strategy that reached its project but found no sequence or selection
    ends the fallback with its own message.
    """
    adapters = _adapters(env, settings)
    if host is not HostKind.UNKNOWN:
        return action(adapters[host])
    ordered: List[HostAPI] = [adapters[HostKind.PREMIERE], adapters[HostKind.AFTER_EFFECTS]]
    outcome = first_success(
        ((adapter.label, lambda adapter=adapter: action(adapter)) for adapter in ordered),
        stop=lambda failed: failed.code in CONCLUSIVE_CODES,
    )
    if outcome.ok or not diagnose or outcome.code in CONCLUSIVE_CODES:
        return outcome
    info = json.dumps(Diagnostics(env, settings).snapshot())
    return Outcome.failure(f"Could not access host application. Host info: {info}", "UNKNOWN_HOST")


def execute(
    method: str,
    params: Optional[Dict[str, Any]] = None,
    env: Optional[HostEnvironment] = None,
    settings: Optional[BridgeSettings] = None,
) -> Dict[str, Any]:
    params = params or {}
    env = env if env is not None else HostEnvironment.from_runtime()
    settings = settings or BridgeSettings()
    try:
        if method == "system.version":
            return {"version": __version__, "protocolVersion": PROTOCOL_VERSION}
        if method == "system.actions":
            return {"methods": list(ACTION_METHODS)}
        if method == "host.detect":
            return {"detected": HostDetector(env, settings).detect().value}
        if method == "host.info":
            return Diagnostics(env, settings).snapshot()
        if method == "clip.selected":
            host = HostDetector(env, settings).detect()
            selection = _raise_for(_dispatch(host, lambda adapter: adapter.locate(), env, settings, diagnose=True))
            return selection.to_dict()
        if method == "clip.export":
            selection = _selection_param(params)
            return _raise_for(MediaResolver().resolve_export_path(selection))
        if method == "clip.import_replace":
            output = _require_output(params)
            selection = _selection_param(params)
            if selection.host is HostKind.UNKNOWN:
                raise BridgeOperationError("UNKNOWN_HOST", "Unknown application")
            adapter = _adapters(env, settings)[selection.host]
            return _raise_for(adapter.import_and_place(output, selection)).to_dict()
        if method == "clip.import_motion":
            output = _require_output(params)
            host = HostDetector(env, settings).detect()
            outcome = _dispatch(host, lambda adapter: adapter.import_standalone(output), env, settings)
            return _raise_for(outcome).to_dict()
        raise BridgeOperationError("INVALID_INPUT", f"Unknown method: {method}")
    except ValueError as exc:
        raise BridgeOperationError("INVALID_INPUT", str(exc)) from exc


def _respond(label: str, method: str, params: Dict[str, Any], env: Optional[HostEnvironment]) -> str:
    try:
        data = execute(method, params, env=env)
    except BridgeOperationError as exc:
        logger.info("%s failed [%s]: %s", method, exc.code, exc.message)
        data = {"error": exc.message}
    except Exception as exc:
        logger.exception("%s raised", method)
        data = {"error": f"{label} error: {exc}"}
    return json.dumps(data)


def detect_host(env: Optional[HostEnvironment] = None) -> str:
    return _respond("Detection", "host.detect", {}, env)


def get_host_info(env: Optional[HostEnvironment] = None) -> str:
    return _respond("Host info", "host.info", {}, env)


def get_selected_clip(env: Optional[HostEnvironment] = None) -> str:
    return _respond("Selection", "clip.selected", {}, env)


def export_clip_to_temp(clip_info_json: str, env: Optional[HostEnvironment] = None) -> str:
    return _respond("Export", "clip.export", {"clip": clip_info_json}, env)


def import_and_replace_clip(output_path: str, clip_info_json: str, env: Optional[HostEnvironment] = None) -> str:
    return _respond("Import", "clip.import_replace", {"output": output_path, "clip": clip_info_json}, env)


def import_motion_graphic(output_path: str, env: Optional[HostEnvironment] = None) -> str:
    return _respond("Motion import", "clip.import_motion", {"output": output_path}, env)
