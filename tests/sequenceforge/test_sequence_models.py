"""Tests for the sequence value types."""

import pytest
from pydantic import ValidationError

from sequenceforge import (
    NO_PRESET,
    FrameImage,
    InvalidRepetitionError,
    Sequence,
    SequenceEntry,
    Tag,
    TagFrames,
)


class TestTag:
    """Tests for Tag."""

    def test_frame_range_is_inclusive(self):
        """Both ends of the range belong to the tag."""
        tag = Tag(name='walk', from_frame=2, to_frame=4)
        assert tag.frame_range == (2, 4)
        assert tag.frame_count == 3
        assert list(tag.frame_indices()) == [2, 3, 4]

    def test_accepts_camel_case(self):
        """Tags load from the serialized camelCase form."""
        tag = Tag.model_validate({'name': 'idle', 'fromFrame': 0, 'toFrame': 0})
        assert tag.frame_count == 1

    def test_rejects_reversed_range(self):
        """A tag cannot end before it starts."""
        with pytest.raises(ValidationError):
            Tag(name='bad', from_frame=5, to_frame=2)


class TestFrameImage:
    """Tests for FrameImage."""

    def test_empty_placeholder(self):
        """The placeholder carries neither pixels nor a position."""
        frame = FrameImage.empty()
        assert frame.pixels is None
        assert frame.position is None
        assert frame.is_empty

    def test_drawn_frame(self):
        """A frame with pixels is not empty."""
        frame = FrameImage(pixels=b'data', position=(3, 4))
        assert not frame.is_empty
        assert frame.position == (3, 4)

    def test_frozen(self):
        """Frames cannot be modified after creation."""
        frame = FrameImage(pixels=b'data', position=(0, 0))
        with pytest.raises(ValidationError):
            frame.pixels = b'other'


class TestSequenceEntry:
    """Tests for SequenceEntry."""

    def test_defaults_to_one_repetition(self):
        """Repetitions default to 1."""
        assert SequenceEntry(tag_name='idle').repetitions == 1

    @pytest.mark.parametrize('repetitions', [0, -1])
    def test_rejects_non_positive_repetitions(self, repetitions):
        """Zero or negative repetitions are invalid, not a skip."""
        with pytest.raises(InvalidRepetitionError):
            SequenceEntry(tag_name='idle', repetitions=repetitions)

    @pytest.mark.parametrize('repetitions', ['0', '-3', 0.0])
    def test_rejects_non_positive_repetitions_given_as_text(self, repetitions):
        """Numeric strings and floats raise the same error as ints."""
        with pytest.raises(InvalidRepetitionError):
            SequenceEntry(tag_name='idle', repetitions=repetitions)

    def test_accepts_numeric_string(self):
        """A positive numeric string is coerced by pydantic."""
        assert SequenceEntry(tag_name='idle', repetitions='3').repetitions == 3

    def test_serialized_zero_repetitions_fail_validation(self):
        """model_validate keeps pydantic's error for the stored form."""
        with pytest.raises(ValidationError):
            SequenceEntry.model_validate({'tagName': 'idle', 'repetitions': 0})

    def test_str(self):
        """Entries render as "tag xN"."""
        assert str(SequenceEntry(tag_name='walk', repetitions=3)) == 'walk x3'


class TestSequence:
    """Tests for Sequence."""

    def test_empty(self):
        """The empty sequence has no entries and no preset."""
        sequence = Sequence.empty()
        assert sequence.preset_name == NO_PRESET
        assert sequence.entries == ()
        assert sequence.is_empty

    def test_tag_names_distinct_in_first_use_order(self, make_sequence):
        """Each referenced tag is listed once, in order of first use."""
        sequence = make_sequence(('walk', 1), ('idle', 2), ('walk', 3), ('jump', 1))
        assert sequence.tag_names() == ('walk', 'idle', 'jump')

    def test_api_dict_shape(self, make_sequence):
        """Serialized form matches the persisted preset record."""
        sequence = make_sequence(('idle', 2), preset_name='loop')
        assert sequence.to_api_dict() == {
            'presetName': 'loop',
            'entries': [{'tagName': 'idle', 'repetitions': 2}],
        }

    def test_from_api_dict(self):
        """A preset record loads back into entries."""
        sequence = Sequence.from_api_dict({
            'presetName': 'loop',
            'entries': [{'tagName': 'idle', 'repetitions': 2}],
        })
        assert sequence.entries == (SequenceEntry(tag_name='idle', repetitions=2),)

    def test_structural_equality(self, make_sequence):
        """Sequences compare by value."""
        assert make_sequence(('idle', 2)) == make_sequence(('idle', 2))
        assert make_sequence(('idle', 2)) != make_sequence(('idle', 3))


class TestTagFrames:
    """Tests for TagFrames."""

    def test_mapping_access(self, tag_frames, frames):
        """TagFrames behaves as a read-only mapping of tuples."""
        assert 'idle' in tag_frames
        assert tag_frames['idle'] == (frames['F1'], frames['F2'])
        assert len(tag_frames) == 2
        assert tag_frames.names() == ('idle', 'walk')
        assert tag_frames.frame_count('walk') == 1

    def test_missing_tag(self, tag_frames):
        """Unknown tags are absent, not empty."""
        assert tag_frames.get('run') is None
        with pytest.raises(KeyError):
            tag_frames['run']

    def test_source_changes_do_not_leak(self, frames):
        """Changing the source dict after construction has no effect."""
        source = {'idle': [frames['F1']]}
        tag_frames = TagFrames(source)
        source['idle'].append(frames['F2'])
        source['walk'] = [frames['F3']]
        assert tag_frames['idle'] == (frames['F1'],)
        assert 'walk' not in tag_frames
