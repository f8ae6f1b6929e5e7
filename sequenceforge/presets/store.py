"""Named preset collection with validation against a document's tags."""

import logging
from collections.abc import Iterable, Iterator
from typing import NamedTuple, Optional

from ..exceptions import (
    InvalidPresetNameError,
    MissingTagsError,
    NotFoundError,
)
from ..models import NO_PRESET, Sequence
from .backends import MemoryPresetBackend, PresetBackend
from .library import PresetLibrary

logger = logging.getLogger(__name__)


class ValidationResult(NamedTuple):
    """Outcome of checking a sequence against available tags."""

    ok: bool
    missing_tags: tuple[str, ...]


def validate(sequence: Optional[Sequence], available_tag_names: Iterable[str]) -> ValidationResult:
    """
    Check that every tag a sequence references is available.

    Args:
        sequence: Sequence to check; None counts as empty
        available_tag_names: Tag names of the current document

    Returns:
        ValidationResult; missing_tags lists each missing name once,
        in order of first use
    """
    if sequence is None:
        return ValidationResult(True, ())
    available = set(available_tag_names)
    missing = tuple(name for name in sequence.tag_names() if name not in available)
    return ValidationResult(not missing, missing)


class PresetStore:
    """
    Ordered collection of presets, persisted through a backend.

    Names are matched exactly (case-sensitive). Presets keep the order they
    were first saved in; overwriting a preset keeps its position. Every
    mutation is written to the backend; if that fails, the in-memory state
    is rolled back and the error propagates.
    """

    def __init__(self, backend: Optional[PresetBackend] = None):
        self._backend = backend if backend is not None else MemoryPresetBackend()
        library = self._backend.load()

        self._presets: dict[str, Sequence] = {}
        for preset in library.presets:
            if not preset.preset_name.strip() or preset.preset_name == NO_PRESET:
                logger.warning(f"Skipping stored preset with reserved name {preset.preset_name!r}")
                continue
            if preset.preset_name in self._presets:
                logger.warning(f"Duplicate preset {preset.preset_name!r} in storage; keeping the last one")
            self._presets[preset.preset_name] = preset
        self._last_used: Optional[Sequence] = library.last_used

    # --- Queries ---

    def __contains__(self, name: object) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)

    def __iter__(self) -> Iterator[Sequence]:
        return iter(list(self._presets.values()))

    def list_names(self) -> tuple[str, ...]:
        """Preset names for display, led by the "None" entry."""
        return (NO_PRESET, *self._presets)

    def get(self, name: str) -> Sequence:
        """
        Get a copy of a preset.

        Args:
            name: Preset name, or "None" for an empty sequence

        Returns:
            Sequence copy

        Raises:
            NotFoundError: No preset with that name
        """
        if name == NO_PRESET:
            return Sequence.empty()
        try:
            return self._presets[name].model_copy(deep=True)
        except KeyError:
            raise NotFoundError(name) from None

    @staticmethod
    def validate(sequence: Optional[Sequence], available_tag_names: Iterable[str]) -> ValidationResult:
        return validate(sequence, available_tag_names)

    def select(self, name: str, available_tag_names: Iterable[str]) -> Sequence:
        """
        Get a preset for use with the current document.

        Raises:
            NotFoundError: No preset with that name
            MissingTagsError: The preset needs tags the document lacks
        """
        sequence = self.get(name)
        ok, missing = validate(sequence, available_tag_names)
        if not ok:
            raise MissingTagsError(name, missing)
        return sequence

    # --- Mutations ---

    def save(self, name: str, sequence: Sequence) -> Sequence:
        """
        Store a sequence under a name.

        An existing preset with the same name is overwritten in place;
        otherwise the preset is appended.

        Returns:
            The stored sequence (its preset_name set to `name`)
        """
        if not name or not name.strip() or name == NO_PRESET:
            raise InvalidPresetNameError(name)

        stored = sequence.model_copy(update={'preset_name': name}, deep=True)
        snapshot = dict(self._presets)
        self._presets[name] = stored
        self._commit(snapshot)
        logger.info(f"Saved preset {name!r} ({len(stored.entries)} entries)")
        return stored.model_copy(deep=True)

    def delete(self, name: str) -> None:
        """Remove a preset, keeping the order of the others."""
        if name not in self._presets:
            raise NotFoundError(name)
        snapshot = dict(self._presets)
        del self._presets[name]
        self._commit(snapshot)
        logger.info(f"Deleted preset {name!r}")

    # --- Last used snapshot ---

    @property
    def last_used(self) -> Optional[Sequence]:
        if self._last_used is None:
            return None
        return self._last_used.model_copy(deep=True)

    def remember(self, sequence: Optional[Sequence]) -> None:
        """Record the sequence a session ended with (None clears it)."""
        previous = self._last_used
        self._last_used = sequence.model_copy(deep=True) if sequence is not None else None
        try:
            self._backend.save(self._library())
        except Exception:
            self._last_used = previous
            raise

    def restore(self, available_tag_names: Iterable[str]) -> Sequence:
        """
        Starting sequence for a new session.

        Returns the last-used snapshot when all its tags are available,
        otherwise an empty sequence.
        """
        if self._last_used is None:
            return Sequence.empty()
        ok, missing = validate(self._last_used, available_tag_names)
        if not ok:
            logger.info(f"Last used sequence needs missing tags {list(missing)}; starting empty")
            return Sequence.empty()
        return self._last_used.model_copy(deep=True)

    # --- Persistence ---

    def _library(self) -> PresetLibrary:
        return PresetLibrary(
            presets=list(self._presets.values()),
            last_used=self._last_used,
        )

    def _commit(self, snapshot: dict[str, Sequence]) -> None:
        try:
            self._backend.save(self._library())
        except Exception:
            self._presets = snapshot
            raise
