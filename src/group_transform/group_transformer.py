"""
Group Transform - Group Transformer

Binds the three cascades of one group to an event bus. Whatever owns a
group's lifecycle (an editor view, a test) attaches a GroupTransformer
when the group appears and detaches it when the group goes away.

Usage:
    transformer = GroupTransformer(graph, 'group_1')
    transformer.attach(bus)
    ...
    transformer.detach()
"""

import logging

from group_transform.models.events import MoveEvent, ResizeEvent, RotateEvent
from group_transform.services.move import MoveCascade
from group_transform.services.resize import ResizeCascade
from group_transform.services.rotation import RotationCascade


class GroupTransformer:
    """Rotate/resize/move cascades for a single group

    Args:
        graph: DiagramGraph holding the group
        group_id: Id of the group to cascade for
    """

    def __init__(self, graph, group_id: str):
        self._logger = logging.getLogger('GroupTransformer')
        self._graph = graph
        self._group_id = group_id
        self._bus = None

        self.rotation = RotationCascade(graph, group_id)
        self.resize = ResizeCascade(graph, group_id)
        self.move = MoveCascade(graph, group_id)

    @property
    def group_id(self) -> str:
        return self._group_id

    @property
    def is_attached(self) -> bool:
        return self._bus is not None

    def _subscriptions(self):
        return (
            (RotateEvent, self.rotation.on_rotate),
            (ResizeEvent, self.resize.on_resize),
            (MoveEvent, self.move.on_move),
        )

    def attach(self, bus):
        """Subscribe the cascades to a bus

        Raises:
            RuntimeError: If already attached to a different bus
        """
        if self._bus is bus:
            return
        if self._bus is not None:
            raise RuntimeError(f"Group '{self._group_id}' transformer is already attached to another bus")
        for event_type, handler in self._subscriptions():
            bus.subscribe(event_type, handler)
        self._bus = bus
        self._logger.debug(f"Attached cascades for group '{self._group_id}'")

    def detach(self):
        """Unsubscribe from the bus and drop any rotation snapshot"""
        if self._bus is None:
            return
        for event_type, handler in self._subscriptions():
            self._bus.unsubscribe(event_type, handler)
        self._bus = None
        self.rotation.end_gesture()
        self._logger.debug(f"Detached cascades for group '{self._group_id}'")

    def begin_rotation(self):
        self.rotation.begin_gesture()

    def end_rotation(self):
        self.rotation.end_gesture()
