"""labelframe

Labeled, typed, one and two dimensional data built on Apache Arrow.

The library is constituted by multiple components, each isolated within its own
package and each self documented in literate programming style.

The primary components are:

* The Values, the typed nullable storage of each column of data.
* The Index, the labels that identify each row (and each column) of data.
* The Series, one dimensional labeled data of a single kind.
* The DataFrame, a collection of Series sharing the same index.

    >>> df = DataFrame({"a": [1, 2, 3], "b": [4.0, 5.0, None]})
    >>> df.sum().to_pylist()
    [6.0, 9.0]

For the user guide and code documentation of each component, refer to the
component itself.

labelframe never configures logging, non fatal issues are reported
through the ``labelframe`` logger, which has no handler by default.
"""

import logging

from . import errors
from .compare import equal
from .config import Config
from .dataframe import DataFrame
from .errors import (
    AlignmentError,
    AmbiguousConfigError,
    BoundsError,
    ConstructionError,
    LabelFrameError,
    LabelNotFoundError,
    TypeMismatchError,
    TypeUnsupportedError,
)
from .index import ColLevel, Columns, Index, Level
from .kinds import Kind
from .series import Grouping, Series
from .utils.tabulate import DisplayOptions

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "Series",
    "DataFrame",
    "Grouping",
    "Config",
    "Kind",
    "Index",
    "Level",
    "Columns",
    "ColLevel",
    "DisplayOptions",
    "equal",
    "errors",
    "LabelFrameError",
    "ConstructionError",
    "AlignmentError",
    "BoundsError",
    "TypeUnsupportedError",
    "AmbiguousConfigError",
    "TypeMismatchError",
    "LabelNotFoundError",
)
