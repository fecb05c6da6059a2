"""Exceptions raised by the Chomp strategy engine."""


class ChompError(ValueError):
    """Base class for engine errors."""


class MalformedBoard(ChompError):
    """Board does not describe a valid staircase shape."""


class IllegalMove(ChompError):
    """Move targets a cell that is not on the board."""
