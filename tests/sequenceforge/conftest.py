"""
Pytest fixtures for Sequenceforge tests
"""

import pytest

from sequenceforge import (
    Cel,
    FrameImage,
    MemoryPresetBackend,
    PresetStore,
    Sequence,
    SequenceEntry,
    SpriteDocument,
    Tag,
    TagFrames,
)


def _make_sequence(*entries: tuple[str, int], preset_name: str = 'None') -> Sequence:
    return Sequence(
        preset_name=preset_name,
        entries=tuple(SequenceEntry(tag_name=tag, repetitions=reps) for tag, reps in entries),
    )


@pytest.fixture
def make_sequence():
    """Factory building a Sequence from (tag, repetitions) pairs."""
    return _make_sequence


@pytest.fixture
def frames() -> dict[str, FrameImage]:
    """
    Three distinct drawn frames.
    :return: Mapping of label to FrameImage
    """
    return {
        'F1': FrameImage(pixels=b'frame-1', position=(0, 0)),
        'F2': FrameImage(pixels=b'frame-2', position=(4, 2)),
        'F3': FrameImage(pixels=b'frame-3', position=(1, 1)),
    }


@pytest.fixture
def tag_frames(frames) -> TagFrames:
    return TagFrames({
        'idle': [frames['F1'], frames['F2']],
        'walk': [frames['F3']],
    })


@pytest.fixture
def sprite() -> SpriteDocument:
    """
    Sprite with tags idle (0-1), walk (2-4) and jump (5).
    Frame 3 has nothing drawn.
    """
    return SpriteDocument(
        name='hero',
        filename='/art/hero.aseprite',
        tags=[
            Tag(name='idle', from_frame=0, to_frame=1),
            Tag(name='walk', from_frame=2, to_frame=4),
            Tag(name='jump', from_frame=5, to_frame=5),
        ],
        cels={
            0: Cel(pixels='idle-0', position=(0, 0)),
            1: Cel(pixels='idle-1', position=(0, 1)),
            2: Cel(pixels='walk-0', position=(2, 0)),
            4: Cel(pixels='walk-2', position=(2, 2)),
            5: Cel(pixels='jump-0', position=(0, -3)),
        },
        layer_groups=['body', 'weapon'],
    )


@pytest.fixture
def backend() -> MemoryPresetBackend:
    return MemoryPresetBackend()


@pytest.fixture
def store(backend) -> PresetStore:
    return PresetStore(backend)
