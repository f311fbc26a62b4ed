"""Errors raised by labelframe.

All errors share the :class:`LabelFrameError` base class,
each one also inherits from the builtin exception that
better describes it, so that ``except IndexError`` or
``except TypeError`` keep working as expected.

Errors are always raised before any change is applied,
an operation that failed never leaves the object it was
invoked on partially modified.
"""


class LabelFrameError(Exception):
    """Base class for all labelframe errors."""


class ConstructionError(LabelFrameError, ValueError):
    """The input data has an unsupported shape or type."""


class AlignmentError(LabelFrameError, RuntimeError):
    """The index and the values have different lengths.

    This should never happen when using the public API,
    it signals an internal inconsistency.
    """


class BoundsError(LabelFrameError, IndexError):
    """A position or level is out of range."""


class TypeUnsupportedError(LabelFrameError, TypeError):
    """The operation is not supported for the kind of the values."""


class AmbiguousConfigError(LabelFrameError, ValueError):
    """Conflicting construction options were provided."""


class TypeMismatchError(LabelFrameError, TypeError):
    """A value can't be represented in the kind of the column."""


class LabelNotFoundError(LabelFrameError, KeyError):
    """The requested label does not exist."""
