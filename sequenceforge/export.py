"""
Hand-off to the export collaborator.

The exporter creates one output frame per FrameImage in the plan (blank
when the image is empty) and writes the file. Encoding is not done here.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Protocol

from .models import FrameImage


@dataclass(frozen=True)
class ExportPlan:
    """Frames to write, in order, and the suggested output filename."""

    frames: tuple[FrameImage, ...]
    filename: str = ''

    def __len__(self) -> int:
        return len(self.frames)

    @property
    def blank_frame_count(self) -> int:
        return sum(1 for frame in self.frames if frame.is_empty)


class Exporter(Protocol):
    """Receives a finished plan and produces the output artifact."""

    def export(self, plan: ExportPlan) -> None:
        ...


@dataclass
class RecordingExporter:
    """Exporter that keeps every plan it receives."""

    plans: list[ExportPlan] = field(default_factory=list)

    def export(self, plan: ExportPlan) -> None:
        self.plans.append(plan)

    @property
    def last(self) -> Optional[ExportPlan]:
        return self.plans[-1] if self.plans else None


def export_filename(document_filename: str, layer_group: Optional[str] = None) -> str:
    """
    Output filename for an export.

    Args:
        document_filename: Path of the source document
        layer_group: Optional layer group name; when given, the output is
            named after the group, next to the source document

    Returns:
        Filename string (the document's own when no group is chosen)
    """
    if not layer_group:
        return document_filename
    return str(Path(document_filename).parent / layer_group)
