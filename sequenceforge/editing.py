"""
Pure edit operations on a Sequence.

Every function returns a new Sequence and leaves its argument untouched,
so a failed edit leaves the caller's current value as it was. Indices are
0-based and must lie in [0, len); negative indices are rejected.
"""

from .exceptions import InvalidRepetitionError
from .models import Sequence, SequenceEntry


def _check_index(sequence: Sequence, index: int, name: str = 'index') -> None:
    if not 0 <= index < len(sequence.entries):
        raise IndexError(
            f'{name} {index} out of range for sequence with {len(sequence.entries)} entries'
        )


def _with_entries(sequence: Sequence, entries) -> Sequence:
    return sequence.model_copy(update={'entries': tuple(entries)})


def move_entry(sequence: Sequence, from_index: int, to_index: int) -> Sequence:
    """
    Move one entry to a new position.

    The entry at `from_index` is removed and reinserted at `to_index`;
    entries in between shift by one.

    Example:
        [A, B, C] with (0, 2) -> [B, C, A]
    """
    _check_index(sequence, from_index, 'from_index')
    _check_index(sequence, to_index, 'to_index')
    entries = list(sequence.entries)
    entry = entries.pop(from_index)
    entries.insert(to_index, entry)
    return _with_entries(sequence, entries)


def replace_entry(sequence: Sequence, index: int, new_entry: SequenceEntry) -> Sequence:
    """Replace the entry at `index`, keeping every other entry in place."""
    _check_index(sequence, index)
    if new_entry.repetitions < 1:
        raise InvalidRepetitionError(new_entry.repetitions)
    entries = list(sequence.entries)
    entries[index] = new_entry
    return _with_entries(sequence, entries)


def remove_entry(sequence: Sequence, index: int) -> Sequence:
    _check_index(sequence, index)
    entries = list(sequence.entries)
    del entries[index]
    return _with_entries(sequence, entries)


def append_entry(sequence: Sequence, entry: SequenceEntry) -> Sequence:
    if entry.repetitions < 1:
        raise InvalidRepetitionError(entry.repetitions)
    return _with_entries(sequence, (*sequence.entries, entry))


def clear_entries(sequence: Sequence) -> Sequence:
    """Drop all entries; the preset name is kept."""
    return _with_entries(sequence, ())


def rename(sequence: Sequence, preset_name: str) -> Sequence:
    return sequence.model_copy(update={'preset_name': preset_name})
