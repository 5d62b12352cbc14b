"""Cascade services: event dispatch, membership, policy and the three transforms"""

from .event_bus import EventBus
from .membership import resolve_members
from .policy import cascade_enabled
from .rotation import RotationCascade, normalize_rotation, rotate_point_around
from .resize import ResizeCascade, proportional_delta
from .move import MoveCascade

__all__ = [
    'EventBus',
    'resolve_members',
    'cascade_enabled',
    'RotationCascade',
    'normalize_rotation',
    'rotate_point_around',
    'ResizeCascade',
    'proportional_delta',
    'MoveCascade',
]
