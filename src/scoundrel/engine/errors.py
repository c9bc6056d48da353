from __future__ import annotations


class EngineError(RuntimeError):
    pass


class EmptyDeckError(EngineError):
    """Raised when drawing from an empty dungeon. Indicates an engine bug."""


class InvalidSelectionError(EngineError):
    """A room index that does not point at a card. Recoverable."""


class IllegalActionError(EngineError):
    """An action the current turn phase does not allow."""
