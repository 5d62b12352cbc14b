"""
Group Transform - Rotation Cascade

When a group rotates, each direct child orbits the group center and
takes the group's rotation as its own.

Children orbit from their snapshot position, never from their live
position. begin_gesture seeds the snapshot with each child's position
turned back by the group's current rotation; a child missing from it is
recorded as it is on first touch.
Rotation events carry the group's TOTAL rotation, so rotating from the
cached original prevents compounding during a drag.

Nested groups are not walked here: setting a nested group's rotation
makes the graph emit its own RotateEvent, which its own cascade handles.

Gesture boundaries:
    cascade.begin_gesture()     # seed snapshot at rotate-drag start
    ... RotateEvents ...
    cascade.end_gesture()       # clear snapshot at rotate-drag end
"""

import logging
import math
from typing import Dict, Tuple

from group_transform.constants import DEGREES_PER_TURN, DEGREES_TO_RADIANS, RADIANS_TO_DEGREES
from group_transform.models.events import RotateEvent
from group_transform.models.transform import Vec2
from group_transform.services.policy import cascade_enabled


def normalize_rotation(radians: float) -> float:
    """Map a negative angle into [0, 360) degrees, returned in radians

    Angles already at or above 360 degrees are left as they are.
    """
    theta = radians * RADIANS_TO_DEGREES
    if theta < 0:
        theta += DEGREES_PER_TURN
    return theta * DEGREES_TO_RADIANS


def rotate_point_around(point_x: float, point_y: float, center_x: float, center_y: float,
                        radians: float) -> Tuple[float, float]:
    """Rotate a point around a center

    Args:
        point_x, point_y: Point to rotate
        center_x, center_y: Center of rotation
        radians: Rotation angle in radians (clockwise on a Y-down canvas)

    Returns:
        Tuple of (new_x, new_y)
    """
    # Translate to origin
    dx = point_x - center_x
    dy = point_y - center_y

    cos_angle = math.cos(radians)
    sin_angle = math.sin(radians)

    new_dx = dx * cos_angle - dy * sin_angle
    new_dy = dx * sin_angle + dy * cos_angle

    # Translate back
    return (new_dx + center_x, new_dy + center_y)


class RotationCascade:
    """Rotates a group's direct children together with the group

    Args:
        graph: DiagramGraph holding the group and its children
        group_id: Id of the owning group
    """

    def __init__(self, graph, group_id: str):
        self._logger = logging.getLogger('RotationCascade')
        self._graph = graph
        self._group_id = group_id
        # child id -> position at first touch in the current gesture
        self._snapshot: Dict[str, Vec2] = {}

    @property
    def group_id(self) -> str:
        return self._group_id

    @property
    def snapshot(self) -> Dict[str, Vec2]:
        """Copy of the current position snapshot"""
        return {child_id: Vec2(pos.x, pos.y) for child_id, pos in self._snapshot.items()}

    def begin_gesture(self):
        """Start a new rotation gesture

        Each child is recorded at its current position turned back by the
        group's current rotation, so the next RotateEvent (which carries
        the group's total rotation) continues from where the children are
        instead of rotating them a second time.
        """
        self._snapshot.clear()
        group = self._graph.lookup_node(self._group_id)
        if group is None or not group.is_group:
            return

        undo = -normalize_rotation(group.rotation)
        for child_id in group.children:
            child = self._graph.lookup_node(child_id)
            if child is None:
                continue
            self._snapshot[child_id] = Vec2(*rotate_point_around(child.x, child.y, group.x, group.y, undo))

        self._logger.debug(f"Seeded {len(self._snapshot)} positions for group '{self._group_id}' "
                           f"at {group.rotation:.4f} rad")

    def end_gesture(self):
        """Finish the current rotation gesture"""
        if self._snapshot:
            self._logger.debug(f"Cleared {len(self._snapshot)} cached positions for group '{self._group_id}'")
        self._snapshot.clear()

    def on_rotate(self, event: RotateEvent):
        """Handle a RotateEvent; ignores events for other nodes"""
        if event.target_id != self._group_id:
            return
        group = self._graph.lookup_node(self._group_id)
        if group is None or not cascade_enabled(group):
            return

        center_x, center_y = group.x, group.y
        radians = normalize_rotation(event.rotation)

        for child_id in group.children:
            child = self._graph.lookup_node(child_id)
            if child is None:
                continue

            original = self._snapshot.get(child_id)
            if original is None:
                original = child.position
                self._snapshot[child_id] = original

            new_x, new_y = rotate_point_around(original.x, original.y, center_x, center_y, radians)
            self._graph.move_node_to(child_id, new_x, new_y)
            self._graph.set_node_rotation(child_id, event.rotation)

        self._logger.debug(f"Rotated {len(group.children)} children of '{self._group_id}' "
                           f"around ({center_x:.3f}, {center_y:.3f}) to {event.rotation:.4f} rad")
