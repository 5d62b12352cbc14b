"""
Group Transform - Data Models

Node records, transform events and the diagram graph that owns them.
This is the MODEL layer: no cascade logic lives here.
"""

from .transform import Vec2, Dimensions
from .node import Node, Group
from .events import RotateEvent, ResizeEvent, MoveEvent, TransformEvent
from .graph import DiagramGraph

__all__ = [
    'Vec2',
    'Dimensions',
    'Node',
    'Group',
    'RotateEvent',
    'ResizeEvent',
    'MoveEvent',
    'TransformEvent',
    'DiagramGraph',
]
