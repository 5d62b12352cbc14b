"""
Group Transform - Cascade Policy

Decides whether a group's rotate/resize may cascade to its children.

transform_with_container means "rotate and resize move together", so
turning it off disables both cascades. Restricted groups (is_restrict)
must validate every child's resize before their own resize commits,
which needs a request/response exchange with the children. Cascades run
after the parent has already changed, so restricted groups never
cascade. Moves are not gated here.
"""


def cascade_enabled(group) -> bool:
    """True if rotate/resize cascading is permitted for the group"""
    return bool(group.transform_with_container) and not group.is_restrict
