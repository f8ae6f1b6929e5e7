"""
Sequenceforge

Re-order and repeat the tagged frame groups of an animation into a custom
frame sequence for export.

Pipeline:
    PresetStore  -> validates and loads a Sequence
    editing      -> pure edits producing new Sequence values
    extractor    -> reads the document's tags and cels once (TagFrames)
    builder      -> Sequence + TagFrames -> ordered FrameImages
    export       -> ExportPlan handed to an Exporter

SequenceSession wires these together for one document.
"""

from .builder import build, expected_length
from .document import Cel, SpriteDocument, TaggedDocument
from .editing import (
    append_entry,
    clear_entries,
    move_entry,
    remove_entry,
    rename,
    replace_entry,
)
from .exceptions import (
    InvalidPresetNameError,
    InvalidRepetitionError,
    MissingTagsError,
    NoTagsError,
    NotFoundError,
    PresetStorageError,
    SequenceForgeError,
    UnknownLayerGroupError,
    UnknownTagError,
)
from .export import Exporter, ExportPlan, RecordingExporter, export_filename
from .extractor import TagFrameExtractor, extract, require_tags
from .models import (
    NO_PRESET,
    FrameImage,
    Preset,
    Sequence,
    SequenceEntry,
    Tag,
    TagFrames,
)
from .presets import (
    JsonFilePresetBackend,
    MemoryPresetBackend,
    PresetBackend,
    PresetLibrary,
    PresetStore,
    ValidationResult,
    validate,
)
from .session import SequenceSession

__all__ = [
    # Models
    'NO_PRESET',
    'Tag',
    'FrameImage',
    'TagFrames',
    'SequenceEntry',
    'Sequence',
    'Preset',
    # Documents
    'Cel',
    'SpriteDocument',
    'TaggedDocument',
    # Extraction and building
    'TagFrameExtractor',
    'extract',
    'require_tags',
    'build',
    'expected_length',
    # Editing
    'move_entry',
    'replace_entry',
    'remove_entry',
    'append_entry',
    'clear_entries',
    'rename',
    # Presets
    'PresetStore',
    'PresetLibrary',
    'PresetBackend',
    'MemoryPresetBackend',
    'JsonFilePresetBackend',
    'ValidationResult',
    'validate',
    # Export
    'ExportPlan',
    'Exporter',
    'RecordingExporter',
    'export_filename',
    # Session
    'SequenceSession',
    # Errors
    'SequenceForgeError',
    'NoTagsError',
    'MissingTagsError',
    'UnknownTagError',
    'UnknownLayerGroupError',
    'InvalidRepetitionError',
    'NotFoundError',
    'InvalidPresetNameError',
    'PresetStorageError',
]
