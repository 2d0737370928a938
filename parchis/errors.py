"""Exceptions raised by the parchis display."""


class ParchisError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(ParchisError, ValueError):
    """Invalid board geometry or display configuration."""


class InvalidPieceReference(ParchisError, KeyError):
    """A (color, piece_id) pair that does not name one of the 16 pieces."""

    def __init__(self, color, piece_id):
        self.color = color
        self.piece_id = piece_id
        super().__init__(f"unknown piece {color!r} #{piece_id!r}")

    def __str__(self):
        return self.args[0]


class InvalidPlacement(ParchisError, ValueError):
    """A placement whose index is outside the range of its zone."""


class InvalidMessage(ParchisError, ValueError):
    """A message from the authority that cannot be decoded."""
