import json
import os
from typing import Any, Dict

import typer

from fxbridge.bridge.operations import BridgeOperationError, execute
from fxbridge.bridge.protocol import ERROR_CODES, PROTOCOL_VERSION
from fxbridge.core.environment import HostEnvironment
from fxbridge.logging_config import setup_logging
from fxbridge.settings import BridgeSettings

app = typer.Typer(add_completion=False, help="Clip exchange bridge for Premiere Pro and After Effects")


def _print(payload: Dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


def _ok(command: str, data: Dict[str, Any]) -> None:
    _print({"ok": True, "protocolVersion": PROTOCOL_VERSION, "command": command, "data": data})


def _fail(command: str, code: str, message: str) -> None:
    _print(
        {
            "ok": False,
            "protocolVersion": PROTOCOL_VERSION,
            "command": command,
            "error": {"code": code, "message": message},
        }
    )
    raise SystemExit(ERROR_CODES.get(code, 1))


def _run(command: str, method: str, params: Dict[str, Any]) -> None:
    try:
        settings = BridgeSettings.from_env()
        data = execute(method, params, env=HostEnvironment.from_runtime(), settings=settings)
    except BridgeOperationError as exc:
        _fail(command, exc.code, exc.message)
    except Exception as exc:
        _fail(command, "ERROR", str(exc))
    else:
        _ok(command, data)


@app.callback()
def configure(
    log_level: str = typer.Option(
        os.getenv("FXBRIDGE_LOG_LEVEL", "WARNING"), "--log-level", help="Log level for stderr output"
    ),
) -> None:
    setup_logging(log_level)


@app.command("detect")
def detect() -> None:
    _run("detect", "host.detect", {})


@app.command("info")
def info() -> None:
    _run("info", "host.info", {})


@app.command("selected-clip")
def selected_clip() -> None:
    _run("selected-clip", "clip.selected", {})


@app.command("export-clip")
def export_clip(clip_json: str) -> None:
    _run("export-clip", "clip.export", {"clip": clip_json})


@app.command("import-replace")
def import_replace(output: str, clip_json: str) -> None:
    _run("import-replace", "clip.import_replace", {"output": output, "clip": clip_json})


@app.command("import-motion")
def import_motion(output: str) -> None:
    _run("import-motion", "clip.import_motion", {"output": output})


@app.command("actions")
def actions() -> None:
    _run("actions", "system.actions", {})


@app.command("version")
def version() -> None:
    _run("version", "system.version", {})


def main() -> None:
    app()
