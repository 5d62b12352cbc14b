"""
Group Transform - transform propagation for diagram groups

When a group node is rotated, resized or moved, the change cascades to
the nodes it contains, including nested groups.

Public API: TransformEngine, GroupTransformer, DiagramGraph, EventBus,
Node, Group and the transform events.
"""

from .engine import TransformEngine
from .errors import ContainmentError
from .group_transformer import GroupTransformer
from .models import (
    DiagramGraph, Dimensions, Group, MoveEvent, Node, ResizeEvent, RotateEvent, Vec2,
)
from .services import EventBus

__version__ = '0.1.0'

__all__ = [
    'TransformEngine',
    'GroupTransformer',
    'DiagramGraph',
    'EventBus',
    'ContainmentError',
    'Node',
    'Group',
    'Vec2',
    'Dimensions',
    'RotateEvent',
    'ResizeEvent',
    'MoveEvent',
]
