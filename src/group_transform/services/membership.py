"""
Group Transform - Membership Resolution

Flattens a group's containment tree into an ordered list of descendant
ids. Children that no longer resolve in the graph are skipped; the graph
may briefly hold stale ids while the editor rearranges nodes.
"""

from typing import List


def resolve_members(graph, group) -> List[str]:
    """Get every node contained in a group, at any depth

    Depth-first in child insertion order: a nested group's id comes
    first, followed by its own resolved descendants.

    Args:
        graph: DiagramGraph to resolve ids against
        group: Group node (a plain node yields an empty list)

    Returns:
        List of descendant ids without duplicates
    """
    node_ids: List[str] = []
    if not group.is_group:
        return node_ids
    _collect(graph, group, node_ids, set())
    return node_ids


def _collect(graph, group, node_ids, seen):
    for child_id in group.children:
        child = graph.lookup_node(child_id)
        if child is None or child_id in seen:
            continue
        seen.add(child_id)
        node_ids.append(child_id)
        if child.is_group:
            _collect(graph, child, node_ids, seen)
