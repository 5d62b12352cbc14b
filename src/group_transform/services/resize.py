"""
Group Transform - Resize Cascade

When a group is resized, each direct child is resized by a share of the
group's handle delta proportional to its size: a child half as wide as
the group receives half the horizontal delta.

ResizeEvents arrive after the group has already changed size, so the
ratios use the event's previous_dimensions, never the group's current
size. The child resize goes through the graph's single-node resize
primitive, which emits the child's own ResizeEvent; nested groups fan
out from there.
"""

import logging
from typing import Tuple

from group_transform.constants import RESIZE_HANDLES
from group_transform.models.events import ResizeEvent
from group_transform.models.transform import Dimensions
from group_transform.services.policy import cascade_enabled


def proportional_delta(child, previous: Dimensions, delta_x: float, delta_y: float) -> Tuple[float, float]:
    """Share of a group's resize delta that goes to one child

    Args:
        child: Child node (its current width/height are used)
        previous: Group dimensions before the resize
        delta_x, delta_y: Group handle delta

    Returns:
        Tuple of (child_dx, child_dy)
    """
    return (child.width / previous.width * delta_x,
            child.height / previous.height * delta_y)


class ResizeCascade:
    """Resizes a group's direct children proportionally with the group

    Args:
        graph: DiagramGraph holding the group and its children
        group_id: Id of the owning group
    """

    def __init__(self, graph, group_id: str):
        self._logger = logging.getLogger('ResizeCascade')
        self._graph = graph
        self._group_id = group_id

    @property
    def group_id(self) -> str:
        return self._group_id

    def on_resize(self, event: ResizeEvent):
        """Handle a ResizeEvent; ignores events for other nodes"""
        if event.target_id != self._group_id:
            return
        group = self._graph.lookup_node(self._group_id)
        if group is None or not cascade_enabled(group):
            return

        previous = event.previous_dimensions
        if previous is None or not previous.is_usable():
            self._logger.debug(f"Skipping resize cascade for '{self._group_id}': no previous dimensions")
            return
        if event.handle_index not in RESIZE_HANDLES:
            self._logger.debug(f"Skipping resize cascade for '{self._group_id}': "
                               f"unknown handle {event.handle_index}")
            return

        for child_id in group.children:
            child = self._graph.lookup_node(child_id)
            if child is None:
                continue

            child_dx, child_dy = proportional_delta(child, previous, event.delta_x, event.delta_y)
            self._graph.resize_node(
                child_id, child_dx, child_dy, event.handle_index,
                on_cancel=lambda child_id=child_id: self._on_child_cancel(child_id),
            )

    def _on_child_cancel(self, child_id: str):
        self._logger.debug(f"Child '{child_id}' of '{self._group_id}' rejected its resize")
