from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class HostKind(str, Enum):
    PREMIERE = "PPRO"
    AFTER_EFFECTS = "AEFT"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: Any) -> "HostKind":
        try:
            return cls(str(raw).upper())
        except ValueError:
            return cls.UNKNOWN


@dataclass
class MediaDimensions:
    width: int
    height: int

    def matches(self, width: int, height: int) -> bool:
        return self.width == width and self.height == height


@dataclass
class ClipSelection:
    """A selected timeline clip or composition layer, normalized across hosts.

    Timeline selections carry ``track_index``/``clip_index``; composition
    selections carry ``layer_index``. Exactly one shape is set and it must
    agree with ``host``.
    """

    name: str
    duration: float
    in_point: float
    out_point: float
    start_time: float
    end_time: float
    playhead_time: float
    host: HostKind
    media_path: str = ""
    track_index: Optional[int] = None
    clip_index: Optional[int] = None
    layer_index: Optional[int] = None

    def __post_init__(self) -> None:
        timeline_shape = self.track_index is not None and self.clip_index is not None
        composition_shape = self.layer_index is not None
        if self.host is HostKind.PREMIERE:
            if not timeline_shape or composition_shape:
                raise ValueError("Premiere selection requires trackIndex and clipIndex only")
        elif self.host is HostKind.AFTER_EFFECTS:
            if not composition_shape or self.track_index is not None or self.clip_index is not None:
                raise ValueError("After Effects selection requires layerIndex only")
        elif timeline_shape == composition_shape:
            raise ValueError("selection must carry exactly one of trackIndex/clipIndex or layerIndex")
        if self.out_point <= self.in_point:
            raise ValueError("outPoint must be greater than inPoint")
        if self.end_time < self.start_time:
            raise ValueError("endTime must be >= startTime")

    @property
    def is_timeline(self) -> bool:
        return self.track_index is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "duration": self.duration,
            "inPoint": self.in_point,
            "outPoint": self.out_point,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "playheadTime": self.playhead_time,
        }
        if self.is_timeline:
            data["trackIndex"] = self.track_index
            data["clipIndex"] = self.clip_index
        else:
            data["layerIndex"] = self.layer_index
        data["mediaPath"] = self.media_path
        data["host"] = self.host.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClipSelection":
        if not isinstance(data, dict):
            raise ValueError("clip info must be a JSON object")
        host = HostKind.parse(data.get("host", data.get("app", "")))

        def seconds(key: str, default: Optional[float] = None) -> float:
            value = data.get(key, default)
            if value is None:
                raise ValueError(f"clip info is missing '{key}'")
            return float(value)

        def index(key: str) -> Optional[int]:
            value = data.get(key)
            return int(value) if value is not None else None

        in_point = seconds("inPoint")
        out_point = seconds("outPoint")
        return cls(
            name=str(data.get("name", "")),
            duration=seconds("duration", out_point - in_point),
            in_point=in_point,
            out_point=out_point,
            start_time=seconds("startTime"),
            end_time=seconds("endTime"),
            playhead_time=seconds("playheadTime", in_point),
            host=host,
            media_path=str(data.get("mediaPath") or ""),
            track_index=index("trackIndex"),
            clip_index=index("clipIndex"),
            layer_index=index("layerIndex"),
        )


@dataclass
class Placement:
    insert_time: float
    track_index: Optional[int] = None
    layer_index: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.track_index is not None:
            return {"trackIndex": self.track_index, "insertTime": self.insert_time}
        return {"layerIndex": self.layer_index, "insertTime": self.insert_time}


@dataclass
class ImportResult:
    success: bool
    host: HostKind = HostKind.UNKNOWN
    imported_name: Optional[str] = None
    placement: Optional[Placement] = None
    error: Optional[str] = None
    warnings: list = field(default_factory=list)

    @classmethod
    def placed(cls, host: HostKind, imported_name: str, placement: Placement, warnings=None) -> "ImportResult":
        return cls(
            success=True,
            host=host,
            imported_name=imported_name,
            placement=placement,
            warnings=list(warnings or []),
        )

    @classmethod
    def failed(cls, error: str) -> "ImportResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"error": self.error or "Import failed"}
        data: Dict[str, Any] = {
            "success": True,
            "host": self.host.value,
            "importedName": self.imported_name,
            "placement": self.placement.to_dict() if self.placement else None,
        }
        if self.warnings:
            data["warnings"] = list(self.warnings)
        return data
