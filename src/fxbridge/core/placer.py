from typing import Optional, Sequence

from fxbridge.core.models import MediaDimensions


def replace_target_track(track_index: int, num_video_tracks: int) -> int:
    """One track above the original clip, clamped to the topmost video track."""
    if num_video_tracks <= 0:
        raise ValueError("sequence has no video tracks")
    return max(0, min(track_index + 1, num_video_tracks - 1))


def standalone_target_track(clip_counts: Sequence[int]) -> int:
    """One track above the topmost non-empty video track, or track 0 if all are empty."""
    if not clip_counts:
        raise ValueError("sequence has no video tracks")
    last = len(clip_counts) - 1
    for index in range(last, -1, -1):
        if clip_counts[index] > 0:
            return min(index + 1, last)
    return 0


def matches_insertion(
    clip_name: str,
    clip_start: float,
    imported_name: str,
    insert_time: float,
    tolerance: float = 0.1,
) -> bool:
    """True for the clip the host placed for an import: same name, start strictly within tolerance."""
    # 12.1 - 12.0 is 0.09999999999999964 unrounded
    return clip_name == imported_name and round(abs(clip_start - insert_time), 9) < tolerance


def cover_scale(media: Optional[MediaDimensions], frame_width: int, frame_height: int) -> Optional[float]:
    """Scale percentage that fills the frame without bars, or None when no scaling applies."""
    if media is None or media.width <= 0 or media.height <= 0:
        return None
    if frame_width <= 0 or frame_height <= 0:
        return None
    if media.matches(frame_width, frame_height):
        return None
    return 100.0 * max(frame_width / media.width, frame_height / media.height)
