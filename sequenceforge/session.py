"""
SequenceSession - one user-driven editing session over one document.

The session owns the current Sequence value. Edits replace it with the
value returned by the functions in sequenceforge.editing, so a failed edit
leaves the previous value in place. Presets are committed to the store only
on explicit save.
"""

import logging
from typing import Optional

from . import editing
from .builder import build
from .document import TaggedDocument
from .exceptions import NotFoundError, UnknownLayerGroupError, UnknownTagError
from .export import Exporter, ExportPlan, export_filename
from .extractor import TagFrameExtractor, require_tags
from .models import NO_PRESET, Sequence, SequenceEntry, TagFrames
from .presets import PresetStore

logger = logging.getLogger(__name__)


class SequenceSession:
    """Edits a Sequence against a document and exports the result."""

    def __init__(
        self,
        document: TaggedDocument,
        store: PresetStore,
        sequence: Optional[Sequence] = None,
        extractor: Optional[TagFrameExtractor] = None,
    ):
        self.document = document
        self.store = store
        self.sequence = sequence if sequence is not None else Sequence.empty()
        self._extractor = extractor or TagFrameExtractor()
        self._tag_frames: Optional[TagFrames] = None
        self.exported = False

    @classmethod
    def start(
        cls,
        document: TaggedDocument,
        store: PresetStore,
        extractor: Optional[TagFrameExtractor] = None,
    ) -> 'SequenceSession':
        """
        Open a session, resuming the last-used sequence when it still fits.

        Raises:
            NoTagsError: The document has no tags
        """
        require_tags(document)
        tag_names = [tag.name for tag in document.tags]
        session = cls(document, store, store.restore(tag_names), extractor)
        logger.debug(f"Session started with {len(session.sequence)} entries")
        return session

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.document.tags]

    def _entry(self, tag_name: str, repetitions: int) -> SequenceEntry:
        if tag_name not in self.tag_names:
            raise UnknownTagError(tag_name)
        return SequenceEntry(tag_name=tag_name, repetitions=repetitions)

    # --- Editing ---

    def add(self, tag_name: str, repetitions: int = 1) -> Sequence:
        self.sequence = editing.append_entry(self.sequence, self._entry(tag_name, repetitions))
        return self.sequence

    def edit(self, index: int, tag_name: str, repetitions: int) -> Sequence:
        self.sequence = editing.replace_entry(
            self.sequence, index, self._entry(tag_name, repetitions)
        )
        return self.sequence

    def move(self, from_index: int, to_index: int) -> Sequence:
        self.sequence = editing.move_entry(self.sequence, from_index, to_index)
        return self.sequence

    def remove(self, index: int) -> Sequence:
        self.sequence = editing.remove_entry(self.sequence, index)
        return self.sequence

    def clear(self) -> Sequence:
        self.sequence = editing.clear_entries(self.sequence)
        return self.sequence

    # --- Presets ---

    def select_preset(self, name: str) -> Sequence:
        """
        Replace the current sequence with a stored preset.

        Raises:
            NotFoundError: No preset with that name
            MissingTagsError: The preset needs tags this document lacks
        """
        self.sequence = self.store.select(name, self.tag_names)
        return self.sequence

    def save_preset(self, name: str) -> Sequence:
        self.sequence = self.store.save(name, self.sequence)
        return self.sequence

    def delete_preset(self) -> Sequence:
        """Delete the currently selected preset and start over empty."""
        name = self.sequence.preset_name
        if name == NO_PRESET:
            raise NotFoundError(name)
        self.store.delete(name)
        self.sequence = Sequence.empty()
        return self.sequence

    # --- Building ---

    @property
    def tag_frames(self) -> TagFrames:
        """Frames read from the document, extracted once per session."""
        if self._tag_frames is None:
            self._tag_frames = self._extractor.extract(self.document)
        return self._tag_frames

    def plan(self, layer_group: Optional[str] = None) -> ExportPlan:
        """
        Build the frames and the output filename.

        Raises:
            UnknownLayerGroupError: layer_group is not one of the document's groups
            UnknownTagError: The sequence names a tag the document lacks
        """
        if layer_group and layer_group not in getattr(self.document, 'layer_groups', ()):
            raise UnknownLayerGroupError(layer_group)
        frames = build(self.sequence, self.tag_frames)
        filename = export_filename(getattr(self.document, 'filename', ''), layer_group)
        return ExportPlan(frames=frames, filename=filename)

    def export(self, exporter: Exporter, layer_group: Optional[str] = None) -> ExportPlan:
        """Build the frames, hand them to the exporter and remember the sequence."""
        plan = self.plan(layer_group)
        exporter.export(plan)
        self.exported = True
        self.store.remember(self.sequence)
        logger.info(f"Exported {len(plan)} frames ({plan.blank_frame_count} blank) to {plan.filename!r}")
        return plan

    def close(self) -> None:
        """End the session; without an export the last-used sequence is cleared."""
        if not self.exported:
            self.store.remember(None)
