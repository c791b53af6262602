"""Exception hierarchy shared by the quiz core."""

from __future__ import annotations


class QuizError(Exception):
    """Base class for every error raised by the quiz core."""


class FetchError(QuizError):
    """Raised when no usable question set could be loaded."""


class PreconditionError(QuizError, ValueError):
    """Raised when an operation is invoked with invalid input or in the wrong state.

    The state machine never mutates when raising this error.
    """


class EmptySessionError(PreconditionError):
    """Raised when a session is started without any questions."""


class PersistenceError(QuizError):
    """Raised when the local store cannot be read or written."""
