"""Host bridge between an AI video generator and Premiere Pro / After Effects projects."""

__version__ = "0.4.0"

from fxbridge.core.environment import HostEnvironment
from fxbridge.core.models import ClipSelection, HostKind, ImportResult

__all__ = ["ClipSelection", "HostEnvironment", "HostKind", "ImportResult"]
