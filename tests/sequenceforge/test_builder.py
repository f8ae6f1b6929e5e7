"""Tests for building the output frame list."""

import pytest

from sequenceforge import (
    FrameImage,
    Sequence,
    TagFrames,
    UnknownTagError,
    build,
    expected_length,
)


class TestBuild:
    """Tests for build()."""

    def test_repeats_and_orders_entries(self, make_sequence, tag_frames, frames):
        """idle x2 then walk x1 -> F1 F2 F1 F2 F3."""
        sequence = make_sequence(('idle', 2), ('walk', 1))
        result = build(sequence, tag_frames)
        assert result == (frames['F1'], frames['F2'], frames['F1'], frames['F2'], frames['F3'])

    def test_entry_order_defines_output_order(self, make_sequence, tag_frames, frames):
        """Entries play in list order, and a tag may appear more than once."""
        sequence = make_sequence(('walk', 1), ('idle', 1), ('walk', 2))
        result = build(sequence, tag_frames)
        assert result == (frames['F3'], frames['F1'], frames['F2'], frames['F3'], frames['F3'])

    def test_unknown_tag(self, make_sequence, frames):
        """The error names the tag that is missing."""
        tag_frames = TagFrames({'idle': [frames['F1']]})
        with pytest.raises(UnknownTagError) as exc_info:
            build(make_sequence(('run', 1)), tag_frames)
        assert exc_info.value.tag_name == 'run'

    def test_unknown_tag_after_valid_entries(self, make_sequence, tag_frames):
        """A bad entry anywhere fails the whole build."""
        with pytest.raises(UnknownTagError):
            build(make_sequence(('idle', 3), ('run', 1)), tag_frames)

    def test_empty_sequence_builds_nothing(self, tag_frames):
        """No entries, no frames."""
        assert build(Sequence.empty(), tag_frames) == ()

    def test_placeholders_are_kept(self, make_sequence, frames):
        """Blank frames are repeated like drawn ones."""
        blank = FrameImage.empty()
        tag_frames = TagFrames({'blink': [frames['F1'], blank]})
        result = build(make_sequence(('blink', 2)), tag_frames)
        assert result == (frames['F1'], blank, frames['F1'], blank)
        assert [frame.is_empty for frame in result] == [False, True, False, True]

    def test_length_matches_repetitions(self, make_sequence, tag_frames):
        """Output length is the sum of repetitions times tag length."""
        sequence = make_sequence(('idle', 3), ('walk', 4), ('idle', 1))
        result = build(sequence, tag_frames)
        assert len(result) == 3 * 2 + 4 * 1 + 1 * 2
        assert expected_length(sequence, tag_frames) == len(result)

    def test_deterministic(self, make_sequence, tag_frames):
        """The same inputs give the same output."""
        sequence = make_sequence(('walk', 2), ('idle', 2))
        assert build(sequence, tag_frames) == build(sequence, tag_frames)

    def test_inputs_unchanged(self, make_sequence, tag_frames):
        """Building does not modify the sequence or the frames."""
        sequence = make_sequence(('idle', 2), ('walk', 1))
        before_sequence = sequence.model_copy(deep=True)
        before_frames = dict(tag_frames)
        build(sequence, tag_frames)
        assert sequence == before_sequence
        assert dict(tag_frames) == before_frames
