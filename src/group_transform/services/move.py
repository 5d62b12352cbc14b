"""
Group Transform - Move Cascade

When a group moves, every descendant at every depth is translated by the
same delta in one batch. Translation has no rotation or scale component,
so no per-level work is needed.

Moves are not gated by the rotate/resize policy flags.
"""

import logging

from group_transform.models.events import MoveEvent
from group_transform.services.membership import resolve_members


class MoveCascade:
    """Translates all of a group's descendants with the group

    Args:
        graph: DiagramGraph holding the group and its descendants
        group_id: Id of the owning group
    """

    def __init__(self, graph, group_id: str):
        self._logger = logging.getLogger('MoveCascade')
        self._graph = graph
        self._group_id = group_id

    @property
    def group_id(self) -> str:
        return self._group_id

    def on_move(self, event: MoveEvent):
        """Handle a MoveEvent; ignores events for other nodes"""
        if event.target_id != self._group_id:
            return
        if event.delta_x == 0 and event.delta_y == 0:
            return
        group = self._graph.lookup_node(self._group_id)
        if group is None:
            return

        node_ids = resolve_members(self._graph, group)
        if node_ids:
            self._graph.batch_translate(node_ids, event.delta_x, event.delta_y)
            self._logger.debug(f"Moved {len(node_ids)} descendants of '{self._group_id}' by "
                               f"({event.delta_x:.4f}, {event.delta_y:.4f})")
