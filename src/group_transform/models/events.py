"""
Group Transform - Transform Events

Typed events delivered by the event bus. Each event names the node that
was transformed (target_id) plus the transform-specific payload. The
`kind` tag identifies the variant without an isinstance check.

    RotateEvent  - node received a new absolute rotation (radians)
    ResizeEvent  - node was resized by a handle drag (already applied)
    MoveEvent    - node was translated by a delta (already applied)
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from group_transform.models.transform import Dimensions


@dataclass(frozen=True)
class RotateEvent:
    target_id: str
    rotation: float  # radians, absolute

    kind: ClassVar[str] = 'rotate'


@dataclass(frozen=True)
class ResizeEvent:
    target_id: str
    delta_x: float
    delta_y: float
    handle_index: int
    # Size before the resize; None when the source could not provide it
    previous_dimensions: Optional[Dimensions] = None

    kind: ClassVar[str] = 'resize'


@dataclass(frozen=True)
class MoveEvent:
    target_id: str
    delta_x: float
    delta_y: float

    kind: ClassVar[str] = 'move'


TransformEvent = Union[RotateEvent, ResizeEvent, MoveEvent]

EVENT_TYPES = (RotateEvent, ResizeEvent, MoveEvent)
