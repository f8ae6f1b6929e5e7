"""Preset storage for sequences."""

from .backends import JsonFilePresetBackend, MemoryPresetBackend, PresetBackend
from .library import PresetLibrary
from .store import PresetStore, ValidationResult, validate

__all__ = [
    "PresetStore",
    "ValidationResult",
    "validate",
    "PresetLibrary",
    "PresetBackend",
    "MemoryPresetBackend",
    "JsonFilePresetBackend",
]
