"""Storage backends for the preset library."""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol, Union

from ..exceptions import PresetStorageError
from .library import PresetLibrary

logger = logging.getLogger(__name__)


class PresetBackend(Protocol):
    """Load/save boundary used by PresetStore."""

    def load(self) -> PresetLibrary:
        ...

    def save(self, library: PresetLibrary) -> None:
        ...


class MemoryPresetBackend:
    """Keeps the library in memory; nothing survives the process."""

    def __init__(self, library: Optional[PresetLibrary] = None):
        self._data = (library or PresetLibrary()).to_api_dict()

    def load(self) -> PresetLibrary:
        return PresetLibrary.from_api_dict(copy.deepcopy(self._data))

    def save(self, library: PresetLibrary) -> None:
        self._data = library.to_api_dict()

    @property
    def data(self) -> dict:
        """Serialized form of the last saved library."""
        return copy.deepcopy(self._data)


class JsonFilePresetBackend:
    """
    Stores the library as a JSON file.

    A missing file loads as an empty library. Saves go through a temporary
    file in the same directory which then replaces the target.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> PresetLibrary:
        if not self.path.exists():
            logger.debug(f"No preset file at {self.path}, starting empty")
            return PresetLibrary()
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
            return PresetLibrary.from_api_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise PresetStorageError(f"Failed to read presets from {self.path}: {e}") from e

    def save(self, library: PresetLibrary) -> None:
        tmp_path = self.path.with_name(self.path.name + '.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(library.to_api_dict(), indent=2), encoding='utf-8')
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PresetStorageError(f"Failed to write presets to {self.path}: {e}") from e
        logger.debug(f"Saved {len(library.presets)} presets to {self.path}")
