"""
Group Transform - Transform Engine

Top-level entry point tying a DiagramGraph, an EventBus and one
GroupTransformer per group together.

This class handles:
- Creating the bus and graph (or adopting existing ones)
- Tracking groups: one attached GroupTransformer per group id
- Rotation gesture boundaries for all tracked groups

Usage:
    engine = TransformEngine()
    engine.graph.add_node(Group('g', x=100, y=100))
    engine.graph.add_node(Node('a', x=120, y=100))
    engine.graph.add_child('g', 'a')
    engine.sync_groups()

    engine.begin_rotation()
    engine.graph.rotate_node('g', math.pi / 2)
    engine.end_rotation()
"""

import logging
from typing import Dict, List, Optional

from group_transform.group_transformer import GroupTransformer
from group_transform.models.graph import DiagramGraph
from group_transform.services.event_bus import EventBus


class TransformEngine:
    """Owns the cascade wiring for every group of a diagram

    Args:
        graph: Existing DiagramGraph (created with the engine's bus if None)
        bus: Existing EventBus (the graph's bus, or a new one, if None)
    """

    def __init__(self, graph: Optional[DiagramGraph] = None, bus: Optional[EventBus] = None):
        self._logger = logging.getLogger('TransformEngine')
        if bus is None:
            bus = graph.bus if graph is not None and graph.bus is not None else EventBus()
        if graph is None:
            graph = DiagramGraph(bus)
        elif graph.bus is not bus:
            raise ValueError("Graph reports transforms on a different bus")
        self._bus = bus
        self._graph = graph
        self._transformers: Dict[str, GroupTransformer] = {}

    @property
    def graph(self) -> DiagramGraph:
        return self._graph

    @property
    def bus(self) -> EventBus:
        return self._bus

    def tracked_groups(self) -> List[str]:
        return list(self._transformers)

    def transformer_for(self, group_id: str) -> Optional[GroupTransformer]:
        return self._transformers.get(group_id)

    # ========================================
    # Group Tracking
    # ========================================

    def track_group(self, group_id: str) -> GroupTransformer:
        """Attach cascades for a group (returns the existing transformer if tracked)

        Raises:
            ValueError: If the id is unknown or not a group
        """
        transformer = self._transformers.get(group_id)
        if transformer is not None:
            return transformer
        node = self._graph.get_node(group_id)
        if not node.is_group:
            raise ValueError(f"Node '{group_id}' is not a group")

        transformer = GroupTransformer(self._graph, group_id)
        transformer.attach(self._bus)
        self._transformers[group_id] = transformer
        return transformer

    def untrack_group(self, group_id: str) -> bool:
        """Detach a group's cascades

        Returns:
            True if the group was tracked
        """
        transformer = self._transformers.pop(group_id, None)
        if transformer is None:
            return False
        transformer.detach()
        return True

    def sync_groups(self) -> int:
        """Track every group in the graph and untrack groups that are gone

        Returns:
            Number of tracked groups afterwards
        """
        for group_id in list(self._transformers):
            node = self._graph.lookup_node(group_id)
            if node is None or not node.is_group:
                self.untrack_group(group_id)

        for node_id in self._graph.node_ids():
            if self._graph.get_node(node_id).is_group:
                self.track_group(node_id)

        self._logger.debug(f"Tracking {len(self._transformers)} groups")
        return len(self._transformers)

    # ========================================
    # Rotation Gestures
    # ========================================

    def begin_rotation(self):
        """Call at the START of a rotate drag"""
        for transformer in self._transformers.values():
            transformer.begin_rotation()

    def end_rotation(self):
        """Call at the END of a rotate drag"""
        for transformer in self._transformers.values():
            transformer.end_rotation()
