"""
Materialize the final frame list from a Sequence.

Each entry contributes its tag's full frame run, `repetitions` times in a
row, in entry order. Placeholders for undrawn frames are kept so that the
exporter still emits a blank frame for them.
"""

from .exceptions import UnknownTagError
from .models import FrameImage, Sequence, TagFrames


def _resolve(sequence: Sequence, tag_frames: TagFrames) -> list[tuple[tuple[FrameImage, ...], int]]:
    # Resolve every entry first so a bad tag fails before any output exists
    runs = []
    for entry in sequence.entries:
        if entry.tag_name not in tag_frames:
            raise UnknownTagError(entry.tag_name)
        runs.append((tag_frames[entry.tag_name], entry.repetitions))
    return runs


def build(sequence: Sequence, tag_frames: TagFrames) -> tuple[FrameImage, ...]:
    """
    Build the ordered output frames.

    Args:
        sequence: Entries to play, in order
        tag_frames: Frames extracted from the document

    Returns:
        Tuple of FrameImage in playback order

    Raises:
        UnknownTagError: An entry names a tag missing from tag_frames
    """
    output: list[FrameImage] = []
    for images, repetitions in _resolve(sequence, tag_frames):
        for _ in range(repetitions):
            output.extend(images)
    return tuple(output)


def expected_length(sequence: Sequence, tag_frames: TagFrames) -> int:
    """Number of frames build() will produce for these inputs."""
    return sum(
        len(images) * repetitions for images, repetitions in _resolve(sequence, tag_frames)
    )
