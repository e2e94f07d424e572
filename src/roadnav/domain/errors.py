# domain/errors.py


class NavigationError(Exception):
    """Base class for everything the routing core reports to its callers."""


class UnknownVertex(NavigationError, LookupError):
    def __init__(self, node_id: int):
        super().__init__(f"unknown vertex {node_id!r}")
        self.node_id = node_id


class EmptyGraph(NavigationError, LookupError):
    def __init__(self, msg: str = "graph has no nodes"):
        super().__init__(msg)


class NoRoute(NavigationError):
    """Start and goal are not connected (or the search gave up)."""

    reason = "unreachable"

    def __init__(self, start: int, goal: int, msg: str | None = None):
        super().__init__(msg or f"no route from {start} to {goal}")
        self.start, self.goal = start, goal


class SearchAborted(NoRoute):
    reason = "aborted"

    def __init__(self, start: int, goal: int, expanded: int):
        super().__init__(
            start, goal, f"search from {start} to {goal} aborted after {expanded} expansions"
        )
        self.expanded = expanded


class ParseFailure(NavigationError, ValueError):
    def __init__(self, text: str, reason: str):
        super().__init__(f"{reason}: {text!r}")
        self.text, self.reason = text, reason
