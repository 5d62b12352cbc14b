"""
Group Transform - Diagram Graph

THE MODEL of the diagram: owns every Node/Group record, addressed by id.
Cascades never hold node references across calls; they look nodes up
here and mutate them through the graph's primitives.

This class handles:
- Node registry (add, remove, lookup)
- Group membership editing with containment-tree validation
- Geometry primitives used by cascades (move_node_to, set_node_rotation,
  batch_translate, resize_node)
- Gesture entry points used by an editor (rotate_node, move_node)

Primitives that represent a completed transform report it on the event
bus so group cascades can react:
- set_node_rotation on a group emits RotateEvent
- resize_node emits ResizeEvent
- rotate_node / move_node emit RotateEvent / MoveEvent
move_node_to and batch_translate never emit.

Usage:
    bus = EventBus()
    graph = DiagramGraph(bus)
    graph.add_node(Group('g', x=100, y=100))
    graph.add_node(Node('a', x=120, y=100))
    graph.add_child('g', 'a')
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from group_transform.constants import MIN_NODE_WIDTH, MIN_NODE_HEIGHT
from group_transform.errors import ContainmentError
from group_transform.models.events import MoveEvent, ResizeEvent, RotateEvent
from group_transform.models.node import Node
from group_transform.utils.resize_math import resize_by_handle


class DiagramGraph:
    """Registry of diagram nodes with transform primitives

    Args:
        bus: EventBus to report transforms on. Without a bus the graph
            still mutates nodes but nothing cascades.
    """

    def __init__(self, bus=None):
        self._logger = logging.getLogger('DiagramGraph')
        self._nodes: Dict[str, Node] = {}
        self._bus = bus

    @property
    def bus(self):
        return self._bus

    # ========================================
    # Registry
    # ========================================

    def add_node(self, node: Node) -> Node:
        """Register a node

        Raises:
            ValueError: If a node with the same id already exists
        """
        if node.id in self._nodes:
            raise ValueError(f"Node with id '{node.id}' already exists")
        self._nodes[node.id] = node
        self._logger.debug(f"Added {node!r}")
        return node

    def remove_node(self, node_id: str) -> Optional[Node]:
        """Unregister a node and drop it from any group that contains it

        Children of a removed group stay in the graph at root level.

        Returns:
            The removed node, or None if it was not registered
        """
        node = self._nodes.pop(node_id, None)
        if node is None:
            return None
        for other in self._nodes.values():
            if other.is_group:
                other.remove_child(node_id)
        self._logger.debug(f"Removed node '{node_id}'")
        return node

    def lookup_node(self, node_id: str) -> Optional[Node]:
        """Get node by id, or None if absent"""
        return self._nodes.get(node_id)

    def get_node(self, node_id: str) -> Node:
        """Get node by id

        Raises:
            ValueError: If id not found
        """
        node = self._nodes.get(node_id)
        if node is None:
            raise ValueError(f"Node with id '{node_id}' not found")
        return node

    def node_ids(self) -> List[str]:
        return list(self._nodes)

    def __contains__(self, node_id):
        return node_id in self._nodes

    # ========================================
    # Membership
    # ========================================

    def add_child(self, group_id: str, child_id: str) -> bool:
        """Put a node into a group

        Args:
            group_id: Containing group id
            child_id: Node to contain

        Returns:
            True if added, False if already a child

        Raises:
            ValueError: If either id is unknown
            ContainmentError: If group_id is not a group or the change
                would make a node its own descendant
        """
        group = self.get_node(group_id)
        child = self.get_node(child_id)
        if not group.is_group:
            raise ContainmentError(f"Node '{group_id}' is not a group")
        if child_id == group_id or self._contains(child, group_id):
            raise ContainmentError(f"Adding '{child_id}' to '{group_id}' would create a containment cycle")

        added = group.add_child(child_id)
        if added:
            self._logger.debug(f"Group '{group_id}' now contains '{child_id}'")
        return added

    def remove_child(self, group_id: str, child_id: str) -> bool:
        """Take a node out of a group (the node stays in the graph)

        Raises:
            ValueError: If group_id is unknown
            ContainmentError: If group_id is not a group
        """
        group = self.get_node(group_id)
        if not group.is_group:
            raise ContainmentError(f"Node '{group_id}' is not a group")
        removed = group.remove_child(child_id)
        if removed:
            self._logger.debug(f"Group '{group_id}' released '{child_id}'")
        return removed

    def parent_of(self, node_id: str) -> Optional[str]:
        """Id of the group directly containing node_id, or None at root level"""
        for other in self._nodes.values():
            if other.is_group and other.has_child(node_id):
                return other.id
        return None

    def _contains(self, node: Node, target_id: str) -> bool:
        """True if target_id is a transitive descendant of node"""
        if not node.is_group:
            return False
        pending = list(node.children)
        seen = set()
        while pending:
            current_id = pending.pop()
            if current_id == target_id:
                return True
            if current_id in seen:
                continue
            seen.add(current_id)
            current = self._nodes.get(current_id)
            if current is not None and current.is_group:
                pending.extend(current.children)
        return False

    # ========================================
    # Transform Primitives
    # ========================================

    def move_node_to(self, node_id: str, x: float, y: float):
        """Set node center (absolute, no event)

        Raises:
            ValueError: If id not found
        """
        node = self.get_node(node_id)
        node.x = x
        node.y = y
        self._logger.debug(f"Moved '{node_id}' to ({x:.4f}, {y:.4f})")

    def set_node_rotation(self, node_id: str, radians: float):
        """Set node rotation (absolute)

        Groups report the new rotation as a RotateEvent so that their
        own children follow.

        Raises:
            ValueError: If id not found
        """
        node = self.get_node(node_id)
        node.rotation = radians
        self._logger.debug(f"Set rotation of '{node_id}' to {radians:.4f} rad")
        if node.is_group:
            self._emit(RotateEvent(node_id, radians))

    def batch_translate(self, node_ids: Iterable[str], dx: float, dy: float) -> int:
        """Translate many nodes by the same offset (no events)

        Ids that do not resolve are ignored.

        Returns:
            Number of nodes moved
        """
        moved = 0
        for node_id in node_ids:
            node = self._nodes.get(node_id)
            if node is None:
                continue
            node.x += dx
            node.y += dy
            moved += 1
        self._logger.debug(f"Translated {moved} nodes by ({dx:.4f}, {dy:.4f})")
        return moved

    def resize_node(self, node_id: str, delta_x: float, delta_y: float, handle_index: int,
                    on_cancel: Optional[Callable[[], None]] = None) -> bool:
        """Resize one node by a handle drag

        The single-node resize primitive. If the resulting size would
        fall below MIN_NODE_WIDTH/MIN_NODE_HEIGHT the resize is
        cancelled: on_cancel is called and the node is left unchanged.
        Otherwise the new geometry is applied and a ResizeEvent carrying
        the previous dimensions is emitted.

        Args:
            node_id: Node to resize
            delta_x, delta_y: Handle movement
            handle_index: Which corner handle was dragged
            on_cancel: Called when the resize is rejected

        Returns:
            True if the node was resized

        Raises:
            ValueError: If id not found or handle_index unknown
        """
        node = self.get_node(node_id)
        new_x, new_y, new_width, new_height = resize_by_handle(
            node.x, node.y, node.width, node.height, delta_x, delta_y, handle_index
        )
        if new_width < MIN_NODE_WIDTH or new_height < MIN_NODE_HEIGHT:
            self._logger.debug(f"Resize of '{node_id}' cancelled: {new_width:.2f}x{new_height:.2f} below minimum")
            if on_cancel is not None:
                on_cancel()
            return False

        previous = node.dimensions
        node.x, node.y = new_x, new_y
        node.width, node.height = new_width, new_height
        self._logger.debug(f"Resized '{node_id}' from {previous.width:.2f}x{previous.height:.2f} "
                           f"to {new_width:.2f}x{new_height:.2f}")

        self._emit(ResizeEvent(node_id, delta_x, delta_y, handle_index, previous))
        return True

    # ========================================
    # Gesture Entry Points
    # ========================================

    def rotate_node(self, node_id: str, radians: float):
        """Apply a user rotation to a node and report it"""
        node = self.get_node(node_id)
        node.rotation = radians
        self._logger.debug(f"Rotated '{node_id}' to {radians:.4f} rad")
        self._emit(RotateEvent(node_id, radians))

    def move_node(self, node_id: str, dx: float, dy: float):
        """Apply a user drag to a node and report it"""
        node = self.get_node(node_id)
        node.x += dx
        node.y += dy
        self._logger.debug(f"Dragged '{node_id}' by ({dx:.4f}, {dy:.4f})")
        self._emit(MoveEvent(node_id, dx, dy))

    def _emit(self, event):
        if self._bus is not None:
            self._bus.emit(event)
