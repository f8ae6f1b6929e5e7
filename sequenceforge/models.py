"""
Value types for tag sequencing.

- Tag: a named, inclusive range of frame indices in a source document
- FrameImage: one frame's drawn content (pixels + position), or a placeholder
- TagFrames: tag name -> ordered FrameImages, read once from a document
- SequenceEntry: one tag played a number of times in a row
- Sequence: ordered entries plus the preset name they were loaded from

All models are frozen. Editing happens through the functions in
sequenceforge.editing, which return new values.

Uses Pydantic v2 with camelCase aliases for the persisted preset format.
"""

from collections.abc import Iterator, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import InvalidRepetitionError

# Name shown for "no preset selected"; never stored as a preset.
NO_PRESET = 'None'


class Tag(BaseModel):
    """
    A named, contiguous run of frames.

    Serialization format:
    {
        "name": "idle",
        "fromFrame": 0,
        "toFrame": 3
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    name: str
    from_frame: int = Field(alias='fromFrame', ge=0)
    to_frame: int = Field(alias='toFrame', ge=0)

    @model_validator(mode='after')
    def _check_range(self) -> 'Tag':
        if self.to_frame < self.from_frame:
            raise ValueError(
                f'Tag {self.name!r} ends before it starts '
                f'({self.from_frame}..{self.to_frame})'
            )
        return self

    @property
    def frame_range(self) -> tuple[int, int]:
        """Inclusive (start, end) frame indices."""
        return self.from_frame, self.to_frame

    @property
    def frame_count(self) -> int:
        return self.to_frame - self.from_frame + 1

    def frame_indices(self) -> range:
        return range(self.from_frame, self.to_frame + 1)


class FrameImage(BaseModel):
    """
    Drawn content of one frame.

    `pixels` is an opaque payload owned by the host document; it is copied
    by reference and never inspected. A frame with nothing drawn keeps both
    fields as None so that it still occupies its slot in the output.
    """

    model_config = ConfigDict(frozen=True)

    pixels: Optional[Any] = None
    position: Optional[tuple[int, int]] = None

    @classmethod
    def empty(cls) -> 'FrameImage':
        """Placeholder for a frame without a cel."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.pixels is None


class TagFrames(Mapping):
    """
    Read-only mapping of tag name to that tag's frames in frame order.

    Built once per document read by the extractor.
    """

    def __init__(self, frames: Optional[Mapping[str, Any]] = None):
        self._frames: dict[str, tuple[FrameImage, ...]] = {
            name: tuple(images) for name, images in (frames or {}).items()
        }

    def __getitem__(self, tag_name: str) -> tuple[FrameImage, ...]:
        return self._frames[tag_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._frames)

    def __len__(self) -> int:
        return len(self._frames)

    def __repr__(self) -> str:
        counts = ', '.join(f'{name}={len(images)}' for name, images in self._frames.items())
        return f'TagFrames({counts})'

    def names(self) -> tuple[str, ...]:
        return tuple(self._frames)

    def frame_count(self, tag_name: str) -> int:
        return len(self[tag_name])


class SequenceEntry(BaseModel):
    """
    One tag played `repetitions` times in a row.

    Serialization format:
    {
        "tagName": "walk",
        "repetitions": 2
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    tag_name: str = Field(alias='tagName')
    repetitions: int = Field(default=1, ge=1)

    def __init__(self, **data: Any) -> None:
        # Numeric strings and floats are checked by their integer value
        repetitions = data.get('repetitions', 1)
        try:
            count = int(repetitions)
        except (TypeError, ValueError, OverflowError):
            count = None
        if count is not None and count < 1:
            raise InvalidRepetitionError(repetitions)
        super().__init__(**data)

    def __str__(self) -> str:
        return f'{self.tag_name} x{self.repetitions}'


class Sequence(BaseModel):
    """
    Ordered plan of which tags to play and how often.

    Serialization format (also the persisted preset record):
    {
        "presetName": "None",
        "entries": [{"tagName": "idle", "repetitions": 2}, ...]
    }
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
        extra='ignore',
    )

    preset_name: str = Field(default=NO_PRESET, alias='presetName')
    entries: tuple[SequenceEntry, ...] = Field(default_factory=tuple)

    @classmethod
    def empty(cls) -> 'Sequence':
        """Unsaved sequence with no entries."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def tag_names(self) -> tuple[str, ...]:
        """Distinct referenced tag names in first-occurrence order."""
        return tuple(dict.fromkeys(entry.tag_name for entry in self.entries))

    def to_api_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode='json')

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'Sequence':
        return cls.model_validate(data)


# A preset is a Sequence stored under its preset_name.
Preset = Sequence


__all__ = [
    'NO_PRESET',
    'Tag',
    'FrameImage',
    'TagFrames',
    'SequenceEntry',
    'Sequence',
    'Preset',
]
