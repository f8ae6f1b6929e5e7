"""Read a document's tags and per-frame cels into TagFrames."""

import logging

from .document import TaggedDocument
from .exceptions import NoTagsError
from .models import FrameImage, TagFrames

logger = logging.getLogger(__name__)


def require_tags(document: TaggedDocument) -> None:
    """Raise NoTagsError if the document defines no tags."""
    if not list(document.tags):
        raise NoTagsError(getattr(document, 'name', ''))


class TagFrameExtractor:
    """
    Copies the working layer's cels for every tag of a document.

    The document is expected to be flattened already, so a single cel lookup
    per frame index yields its drawn content.
    """

    def extract(self, document: TaggedDocument) -> TagFrames:
        """
        Build the tag -> frames map for a document.

        Args:
            document: Document exposing `tags` and `cel(frame_index)`

        Returns:
            TagFrames with one FrameImage per frame in each tag's range,
            in ascending frame order. Frames without a cel are kept as
            empty placeholders.
        """
        require_tags(document)

        frames: dict[str, list[FrameImage]] = {}
        for tag in document.tags:
            if tag.name in frames:
                logger.warning(f"Duplicate tag name {tag.name!r}; keeping the last one")
            frames[tag.name] = [
                self._frame_image(document, index) for index in tag.frame_indices()
            ]

        tag_frames = TagFrames(frames)
        logger.debug(
            f"Extracted {len(tag_frames)} tags, "
            f"{sum(len(images) for images in frames.values())} frames"
        )
        return tag_frames

    @staticmethod
    def _frame_image(document: TaggedDocument, frame_index: int) -> FrameImage:
        cel = document.cel(frame_index)
        if cel is None:
            return FrameImage.empty()
        return FrameImage(pixels=cel.pixels, position=cel.position)


def extract(document: TaggedDocument) -> TagFrames:
    """Extract TagFrames with a default TagFrameExtractor."""
    return TagFrameExtractor().extract(document)
