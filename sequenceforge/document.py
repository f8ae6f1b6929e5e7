"""
Source documents for tag extraction.

A document contains:
- Tags (named inclusive frame ranges, in timeline order)
- Cels of the single working layer (flattened by the host before extraction)
- Layer group names (used to name the exported file)
- The filename of the document on disk

TaggedDocument is the structural contract the extractor relies on; any host
document exposing `tags` and `cel()` works. SpriteDocument is a concrete,
serializable implementation used by the CLI and in tests.
"""

import json
from pathlib import Path
from typing import Any, ClassVar, Optional, Protocol, Sequence, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .models import Tag


class Cel(BaseModel):
    """Drawn content attached to one frame of the working layer."""

    model_config = ConfigDict(frozen=True)

    pixels: Any
    position: tuple[int, int] = (0, 0)


@runtime_checkable
class TaggedDocument(Protocol):
    """What the extractor needs from a host document."""

    @property
    def tags(self) -> Sequence[Tag]:
        ...

    def cel(self, frame_index: int) -> Optional[Cel]:
        ...


class SpriteDocument(BaseModel):
    """
    Flattened sprite with tags.

    Serialization format:
    {
        "_version": 1,
        "name": "hero",
        "filename": "/art/hero.aseprite",
        "frameCount": 4,
        "tags": [{"name": "idle", "fromFrame": 0, "toFrame": 1}, ...],
        "cels": {"0": {"pixels": "...", "position": [0, 0]}, ...},
        "layerGroups": ["body", "weapon"]
    }

    Frames listed in `tags` but missing from `cels` have nothing drawn.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=False,
        extra='ignore',
    )

    VERSION: ClassVar[int] = 1

    version: int = Field(default=1, alias='_version')
    name: str = Field(default='Untitled')
    filename: str = Field(default='')
    frame_count: int = Field(default=0, alias='frameCount', ge=0)
    tags: list[Tag] = Field(default_factory=list)
    cels: dict[int, Cel] = Field(default_factory=dict)
    layer_groups: list[str] = Field(default_factory=list, alias='layerGroups')

    @model_validator(mode='after')
    def _fit_frame_count(self) -> 'SpriteDocument':
        # Frame count covers every tagged or drawn frame
        last = max(
            [tag.to_frame for tag in self.tags] + list(self.cels),
            default=-1,
        )
        if self.frame_count <= last:
            self.frame_count = last + 1
        return self

    def cel(self, frame_index: int) -> Optional[Cel]:
        """Cel at a frame index, or None if nothing is drawn there."""
        return self.cels.get(frame_index)

    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]

    def get_tag(self, name: str) -> Optional[Tag]:
        """
        Get a tag by name.

        Args:
            name: Tag name to find

        Returns:
            Tag or None if not found
        """
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None

    def to_api_dict(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True, mode='json')
        data['_version'] = self.VERSION
        return data

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'SpriteDocument':
        return cls.model_validate(data)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'SpriteDocument':
        """
        Load a document from a JSON file.

        Args:
            path: Path to the JSON document

        Returns:
            SpriteDocument instance
        """
        path = Path(path)
        document = cls.model_validate_json(path.read_text(encoding='utf-8'))
        if not document.filename:
            document.filename = str(path)
        return document

    def save(self, path: Union[str, Path]) -> None:
        """Write the document as JSON."""
        Path(path).write_text(json.dumps(self.to_api_dict(), indent=2), encoding='utf-8')
