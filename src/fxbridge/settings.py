import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional, Tuple

ENV_PREFIX = "FXBRIDGE_"


@dataclass(frozen=True)
class BridgeSettings:
    audio_match_tolerance: float = 0.1
    motion_component_name: str = "Motion"
    scale_property_name: str = "Scale"
    premiere_tokens: Tuple[str, ...] = ("premiere",)
    bridge_talk_ae_tokens: Tuple[str, ...] = ("aftereffects",)
    app_name_ae_tokens: Tuple[str, ...] = ("after effect",)
    dollar_ae_tokens: Tuple[str, ...] = ("aftereffect",)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BridgeSettings":
        env = os.environ if environ is None else environ
        settings = cls()
        raw = env.get(f"{ENV_PREFIX}AUDIO_TOLERANCE")
        if raw:
            tolerance = float(raw)
            if tolerance <= 0:
                raise ValueError(f"{ENV_PREFIX}AUDIO_TOLERANCE must be > 0")
            settings = replace(settings, audio_match_tolerance=tolerance)
        return settings


DEFAULT_SETTINGS = BridgeSettings()
