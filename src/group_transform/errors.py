"""Exception types raised by the diagram graph API"""


class ContainmentError(ValueError):
    """Raised when a membership change would break the containment tree

    A node may not be its own transitive descendant, and only groups
    can hold children.
    """
