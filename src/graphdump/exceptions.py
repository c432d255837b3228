"""graphdump exception types."""


class GraphDumpError(Exception):
    """Base class for graphdump errors."""

    pass


class MemberAccessError(GraphDumpError, AttributeError):
    """Raised when a composite member exists but its value cannot be read."""

    def __init__(self, owner: str, name: str):
        super().__init__(f"Unable to access field {name!r} of {owner}")
        self.owner = owner
        self.name = name
