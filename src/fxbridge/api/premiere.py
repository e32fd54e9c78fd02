import logging
from typing import Any, List, Optional, Tuple

from fxbridge.api.base import HostAPI, HostAPIError
from fxbridge.core.fallback import probe
from fxbridge.core.metadata import resolve_dimensions
from fxbridge.core.models import ClipSelection, HostKind, ImportResult, Placement
from fxbridge.core.placer import (
    cover_scale,
    matches_insertion,
    replace_target_track,
    standalone_target_track,
)

logger = logging.getLogger(__name__)


class PremiereHost(HostAPI):
    """Timeline host: sequences, video/audio tracks, clips."""

    kind = HostKind.PREMIERE
    label = "Premiere Pro"

    def _active_sequence(self, message: str = "No active sequence") -> Tuple[Any, Any]:
        project = self._app().project
        if not project:
            raise HostAPIError("NO_PROJECT", "No active project")
        sequence = project.activeSequence
        if not sequence:
            raise HostAPIError("NO_CONTEXT", message)
        return project, sequence

    def _locate(self) -> ClipSelection:
        _, sequence = self._active_sequence()
        video_tracks = sequence.videoTracks
        for t in range(video_tracks.numTracks):
            clips = video_tracks[t].clips
            for c in range(clips.numItems):
                clip = clips[c]
                if clip.isSelected():
                    return self._selection(sequence, clip, t, c)
        raise HostAPIError("NO_SELECTION", "No clip selected. Please select a clip in the timeline.")

    def _selection(self, sequence: Any, clip: Any, track_index: int, clip_index: int) -> ClipSelection:
        in_point = float(clip.inPoint.seconds)
        playhead = probe(lambda: sequence.getPlayerPosition().seconds)
        project_item = clip.projectItem
        media_path = probe(lambda: project_item.getMediaPath(), "") if project_item else ""
        return ClipSelection(
            name=str(clip.name),
            duration=float(clip.duration.seconds),
            in_point=in_point,
            out_point=float(clip.outPoint.seconds),
            start_time=float(clip.start.seconds),
            end_time=float(clip.end.seconds),
            playhead_time=float(playhead) if playhead is not None else in_point,
            host=self.kind,
            media_path=str(media_path or ""),
            track_index=track_index,
            clip_index=clip_index,
        )

    def _import_item(self, project: Any, output_path: str) -> Any:
        imported = project.importFiles([output_path], True, project.rootItem, False)
        if not imported:
            raise HostAPIError("HOST_ERROR", "Failed to import file into project")
        if not isinstance(imported, bool) and hasattr(imported, "name"):
            return imported
        # importFiles only reports success; new items are appended to the root bin.
        children = project.rootItem.children
        item = children[children.numItems - 1] if children.numItems > 0 else None
        if not item:
            raise HostAPIError("HOST_ERROR", "Could not find imported item in project")
        return item

    def _import_and_place(self, output_path: str, selection: ClipSelection) -> ImportResult:
        self._require_output(output_path)
        project, sequence = self._active_sequence()
        item = self._import_item(project, output_path)
        target = replace_target_track(selection.track_index or 0, sequence.videoTracks.numTracks)
        insert_time = selection.start_time
        warnings = self._insert(sequence, item, target, insert_time)
        try:
            scale = self._fit_to_frame(sequence, item, target, insert_time)
            if scale is not None:
                logger.info("scaled %s to %.2f%%", item.name, scale)
        except Exception as exc:
            logger.warning("scale-to-frame skipped for %s: %s", item.name, exc)
            warnings.append(f"Scaling skipped: {exc}")
        return ImportResult.placed(
            self.kind,
            str(item.name),
            Placement(track_index=target, insert_time=insert_time),
            warnings,
        )

    def _import_standalone(self, output_path: str) -> ImportResult:
        self._require_output(output_path)
        project, sequence = self._active_sequence("No active sequence. Open a sequence first.")
        item = self._import_item(project, output_path)
        insert_time = float(sequence.getPlayerPosition().seconds)
        video_tracks = sequence.videoTracks
        counts = [video_tracks[t].clips.numItems for t in range(video_tracks.numTracks)]
        target = standalone_target_track(counts)
        warnings = self._insert(sequence, item, target, insert_time)
        return ImportResult.placed(
            self.kind,
            str(item.name),
            Placement(track_index=target, insert_time=insert_time),
            warnings,
        )

    def _insert(self, sequence: Any, item: Any, track_index: int, insert_time: float) -> List[str]:
        sequence.videoTracks[track_index].insertClip(item, insert_time)
        logger.debug("inserted %s on V%d at %.3fs", item.name, track_index, insert_time)
        try:
            removed = self._remove_auto_audio(sequence, str(item.name), insert_time)
            logger.debug("removed %d auto-placed audio clip(s)", removed)
        except Exception as exc:
            logger.warning("audio cleanup skipped for %s: %s", item.name, exc)
            return [f"Audio cleanup skipped: {exc}"]
        return []

    def _remove_auto_audio(self, sequence: Any, imported_name: str, insert_time: float) -> int:
        removed = 0
        audio_tracks = sequence.audioTracks
        for a in range(audio_tracks.numTracks):
            clips = audio_tracks[a].clips
            # reverse: remove() shrinks the collection being scanned
            for c in range(clips.numItems - 1, -1, -1):
                clip = clips[c]
                if matches_insertion(
                    str(clip.name),
                    float(clip.start.seconds),
                    imported_name,
                    insert_time,
                    self.settings.audio_match_tolerance,
                ):
                    clip.remove(False, False)
                    removed += 1
        return removed

    def _fit_to_frame(self, sequence: Any, item: Any, track_index: int, insert_time: float) -> Optional[float]:
        scale = cover_scale(
            resolve_dimensions(item),
            int(sequence.frameSizeHorizontal),
            int(sequence.frameSizeVertical),
        )
        if scale is None:
            return None
        clip = self._find_inserted_clip(sequence.videoTracks[track_index], str(item.name), insert_time)
        if clip is None:
            return None
        scale_property = self._scale_property(clip)
        if scale_property is None:
            return None
        scale_property.setValue(scale, True)
        return scale

    def _find_inserted_clip(self, track: Any, imported_name: str, insert_time: float) -> Optional[Any]:
        clips = track.clips
        for c in range(clips.numItems - 1, -1, -1):
            clip = clips[c]
            if matches_insertion(
                str(clip.name),
                float(clip.start.seconds),
                imported_name,
                insert_time,
                self.settings.audio_match_tolerance,
            ):
                return clip
        return None

    def _scale_property(self, clip: Any) -> Optional[Any]:
        components = clip.components
        for ci in range(components.numItems):
            component = components[ci]
            if component.displayName != self.settings.motion_component_name:
                continue
            properties = component.properties
            for pi in range(properties.numItems):
                if properties[pi].displayName == self.settings.scale_property_name:
                    return properties[pi]
            return None
        return None
