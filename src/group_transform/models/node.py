"""
Group Transform - Node Data Model

Node records of the diagram graph:
- Node: a positioned, sized, rotated box (center-based coordinates)
- Group: a Node that contains other nodes by identifier

This is part of the MODEL layer - pure data, no event or cascade logic.
Nodes never hold references to other nodes; containment is expressed
through identifiers resolved by the graph.

Usage:
    node = Node('task_1', x=120, y=100, width=60, height=40)
    group = Group('group_1', x=100, y=100, width=300, height=200)
    group.add_child(node.id)
"""

from typing import Iterable, Optional, Tuple

from group_transform.constants import (
    DEFAULT_NODE_WIDTH, DEFAULT_NODE_HEIGHT, DEFAULT_NODE_ROTATION,
    DEFAULT_GROUP_WIDTH, DEFAULT_GROUP_HEIGHT,
    DEFAULT_TRANSFORM_WITH_CONTAINER, DEFAULT_IS_RESTRICT,
)
from group_transform.models.transform import Dimensions, Vec2


class Node:
    """A single diagram node

    Properties:
        id: Unique identifier within the graph
        x, y: Center position in canvas coordinates
        width, height: Node size
        rotation: Rotation angle in radians
        is_group: Always False for plain nodes
    """

    is_group = False

    def __init__(self, node_id: str, x: float = 0.0, y: float = 0.0,
                 width: float = DEFAULT_NODE_WIDTH, height: float = DEFAULT_NODE_HEIGHT,
                 rotation: float = DEFAULT_NODE_ROTATION):
        if not node_id:
            raise ValueError("Node id must be a non-empty string")
        self._id = node_id
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.rotation = float(rotation)

    @property
    def id(self) -> str:
        """Identifier (read-only, stable for the node's lifetime)"""
        return self._id

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)

    def __repr__(self):
        return (f"{type(self).__name__}(id={self._id!r}, x={self.x:.2f}, y={self.y:.2f}, "
                f"w={self.width:.2f}, h={self.height:.2f}, rot={self.rotation:.4f})")


class Group(Node):
    """Container node holding other nodes by identifier

    Children are a set: adding an existing id is a no-op. Iteration
    order is insertion order so cascades are reproducible.

    Properties:
        children: Tuple of child ids in insertion order
        transform_with_container: Master switch for rotate/resize cascading
        is_restrict: Group may not shrink below its children's footprint;
            cascading is unsupported while set
    """

    is_group = True

    def __init__(self, node_id: str, x: float = 0.0, y: float = 0.0,
                 width: float = DEFAULT_GROUP_WIDTH, height: float = DEFAULT_GROUP_HEIGHT,
                 rotation: float = DEFAULT_NODE_ROTATION,
                 children: Optional[Iterable[str]] = None,
                 transform_with_container: bool = DEFAULT_TRANSFORM_WITH_CONTAINER,
                 is_restrict: bool = DEFAULT_IS_RESTRICT):
        super().__init__(node_id, x=x, y=y, width=width, height=height, rotation=rotation)
        # dict keys give an insertion-ordered set
        self._children = {}
        self.transform_with_container = transform_with_container
        self.is_restrict = is_restrict
        for child_id in children or ():
            self.add_child(child_id)

    @property
    def children(self) -> Tuple[str, ...]:
        return tuple(self._children)

    def has_child(self, child_id: str) -> bool:
        return child_id in self._children

    def add_child(self, child_id: str) -> bool:
        """Add a child id

        Args:
            child_id: Identifier of the node to contain

        Returns:
            True if added, False if it was already a child

        Raises:
            ValueError: If child_id is the group's own id
        """
        if child_id == self.id:
            raise ValueError(f"Group '{self.id}' cannot contain itself")
        if child_id in self._children:
            return False
        self._children[child_id] = None
        return True

    def remove_child(self, child_id: str) -> bool:
        """Remove a child id

        Returns:
            True if removed, False if it was not a child
        """
        if child_id not in self._children:
            return False
        del self._children[child_id]
        return True
