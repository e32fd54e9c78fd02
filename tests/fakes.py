"""In-memory stand-ins for the Premiere Pro and After Effects object models."""
import os
from types import SimpleNamespace
from typing import List, Optional


class Time:
    def __init__(self, seconds: float):
        self.seconds = seconds


class ItemList(list):
    @property
    def numItems(self) -> int:
        return len(self)


class TrackList(list):
    @property
    def numTracks(self) -> int:
        return len(self)


class FakeProperty:
    def __init__(self, displayName: str):
        self.displayName = displayName
        self.values: List[float] = []

    def setValue(self, value, update_ui):
        self.values.append(value)


class FakeComponent:
    def __init__(self, displayName: str, properties: Optional[List[FakeProperty]] = None):
        self.displayName = displayName
        self.properties = ItemList(properties or [])


def motion_components() -> ItemList:
    return ItemList(
        [
            FakeComponent("Opacity", [FakeProperty("Opacity")]),
            FakeComponent("Motion", [FakeProperty("Position"), FakeProperty("Scale")]),
        ]
    )


class FakeProjectItem:
    def __init__(self, name: str, media_path: str = "", project_metadata: str = "", xmp: str = ""):
        self.name = name
        self.media_path = media_path
        self.project_metadata = project_metadata
        self.xmp = xmp

    def getMediaPath(self) -> str:
        return self.media_path

    def getProjectMetadata(self) -> str:
        return self.project_metadata

    def getXMPMetadata(self) -> str:
        return self.xmp


class FakeTrackItem:
    def __init__(
        self,
        name: str,
        start: float,
        end: float,
        in_point: float = 0.0,
        out_point: Optional[float] = None,
        selected: bool = False,
        project_item: Optional[FakeProjectItem] = None,
        components: Optional[ItemList] = None,
    ):
        self.name = name
        self.start = Time(start)
        self.end = Time(end)
        self.inPoint = Time(in_point)
        self.outPoint = Time(out_point if out_point is not None else in_point + (end - start))
        self.duration = Time(end - start)
        self.projectItem = project_item
        self.components = components if components is not None else motion_components()
        self._selected = selected
        self.owner: Optional[ItemList] = None
        self.removed = False

    def isSelected(self) -> bool:
        return self._selected

    def remove(self, ripple, align_to_video):
        self.removed = True
        self.owner.remove(self)


class FakeTrack:
    def __init__(self, sequence: "FakeSequence", clips: Optional[List[FakeTrackItem]] = None):
        self.sequence = sequence
        self.clips = ItemList()
        for clip in clips or []:
            self.add(clip)
        self.inserted: List[tuple] = []

    def add(self, clip: FakeTrackItem) -> FakeTrackItem:
        clip.owner = self.clips
        self.clips.append(clip)
        return clip

    def insertClip(self, item: FakeProjectItem, time: float) -> None:
        self.inserted.append((item.name, time))
        self.add(FakeTrackItem(item.name, time, time + 5.0, project_item=item))
        if self.sequence.auto_audio and len(self.sequence.audioTracks):
            self.sequence.audioTracks[0].add(
                FakeTrackItem(item.name, time, time + 5.0, project_item=item, components=ItemList())
            )


class FakeSequence:
    def __init__(
        self,
        video_tracks: int = 3,
        audio_tracks: int = 2,
        width: int = 1920,
        height: int = 1080,
        player_position: Optional[float] = 12.0,
        auto_audio: bool = True,
    ):
        self.videoTracks = TrackList(FakeTrack(self) for _ in range(video_tracks))
        self.audioTracks = TrackList(FakeTrack(self) for _ in range(audio_tracks))
        self.frameSizeHorizontal = str(width)
        self.frameSizeVertical = str(height)
        self.player_position = player_position
        self.auto_audio = auto_audio

    def getPlayerPosition(self):
        if self.player_position is None:
            return None
        return Time(self.player_position)


class FakeBin:
    def __init__(self):
        self.children = ItemList()


class FakePremiereProject:
    def __init__(self, sequence: Optional[FakeSequence] = None):
        self.activeSequence = sequence
        self.rootItem = FakeBin()
        self.import_succeeds = True
        self.next_project_metadata = ""
        self.next_xmp = ""
        self.imported: List[str] = []

    def importFiles(self, paths, suppress_ui, target_bin, as_numbered_stills):
        if not self.import_succeeds:
            return False
        for path in paths:
            self.imported.append(path)
            target_bin.children.append(
                FakeProjectItem(
                    os.path.basename(path),
                    media_path=path,
                    project_metadata=self.next_project_metadata,
                    xmp=self.next_xmp,
                )
            )
        return True


class FakeFile:
    def __init__(self, path: str):
        self.fsName = path


class FakeImportOptions:
    def __init__(self, file: FakeFile):
        self.file = file


class FakeFootage:
    typeName = "Footage"

    def __init__(self, name: str, path: Optional[str] = None):
        self.name = name
        self.file = FakeFile(path) if path else None


class FakeSolid:
    typeName = "Solid"

    def __init__(self, name: str):
        self.name = name


class FakeLayer:
    def __init__(self, name: str, in_point: float = 0.0, out_point: float = 10.0, start_time: float = 0.0, source=None):
        self.name = name
        self.inPoint = in_point
        self.outPoint = out_point
        self.startTime = start_time
        self.source = source
        self.index = 0
        self.collection: Optional["FakeLayerCollection"] = None

    def moveAfter(self, other: "FakeLayer") -> None:
        self.collection.move_after(self, other)


class FakeLayerCollection:
    """1-based like the host; add() inserts at the top (index 1)."""

    def __init__(self, layers: Optional[List[FakeLayer]] = None):
        self._layers: List[FakeLayer] = []
        for layer in layers or []:
            layer.collection = self
            self._layers.append(layer)
        self._reindex()

    def _reindex(self) -> None:
        for position, layer in enumerate(self._layers, start=1):
            layer.index = position

    def add(self, item) -> FakeLayer:
        layer = FakeLayer(item.name, source=item)
        layer.collection = self
        self._layers.insert(0, layer)
        self._reindex()
        return layer

    def move_after(self, layer: FakeLayer, other: FakeLayer) -> None:
        self._layers.remove(layer)
        self._layers.insert(self._layers.index(other) + 1, layer)
        self._reindex()

    def names(self) -> List[str]:
        return [layer.name for layer in self._layers]

    def __getitem__(self, index: int) -> FakeLayer:
        if index < 1:
            raise IndexError("layer indices start at 1")
        return self._layers[index - 1]

    def __len__(self) -> int:
        return len(self._layers)


class FakeComp:
    typeName = "Composition"

    def __init__(self, layers: Optional[List[FakeLayer]] = None, time: float = 4.0):
        self.layers = FakeLayerCollection(layers)
        self.time = time
        self.selectedLayers: List[FakeLayer] = []

    @property
    def numLayers(self) -> int:
        return len(self.layers)


class FakeAEProject:
    def __init__(self, active_item=None):
        self.activeItem = active_item
        self.imported: List[str] = []
        self.import_succeeds = True

    def importFile(self, options: FakeImportOptions):
        if not self.import_succeeds:
            return None
        path = options.file.fsName
        self.imported.append(path)
        return FakeFootage(os.path.basename(path), path)


class Raising:
    """Any attribute access raises, like a host object from the wrong application."""

    def __init__(self, message: str = "object is invalid"):
        self._message = message

    def __getattr__(self, name):
        raise RuntimeError(self._message)


def premiere_app(project=None, name: str = "Adobe Premiere Pro"):
    return SimpleNamespace(name=name, project=project)


def ae_app(project=None, name: str = "Adobe After Effects"):
    return SimpleNamespace(name=name, project=project)
