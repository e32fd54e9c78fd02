from fxbridge.core.detector import HostDetector
from fxbridge.core.diagnostics import Diagnostics
from fxbridge.core.environment import HostEnvironment
from fxbridge.core.resolver import MediaResolver

__all__ = ["HostDetector", "Diagnostics", "HostEnvironment", "MediaResolver"]
