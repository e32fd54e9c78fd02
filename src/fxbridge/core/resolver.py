from pathlib import Path
from typing import Dict

from fxbridge.core.fallback import Outcome
from fxbridge.core.models import ClipSelection, HostKind


class MediaResolver:
    """Resolve a selection to a readable media file on disk.

    The clip's own source file is used directly; nothing is transcoded.
    """

    def resolve_export_path(self, selection: ClipSelection) -> Outcome:
        if selection.host is HostKind.UNKNOWN:
            return Outcome.failure(f"Unknown application: {selection.host.value}", "UNKNOWN_HOST")
        media_path = selection.media_path
        if media_path and Path(media_path).is_file():
            payload: Dict[str, str] = {"path": media_path, "method": "direct"}
            return Outcome.success(payload)
        return Outcome.failure(f"Could not access media file. Media path: {media_path}", "NOT_FOUND")
