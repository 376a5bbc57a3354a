# reqlix:header:start
#
#   project      : Reqlix
#   file         : results.py
#   file_relpath : src/reqlix/core/results.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Tagged operation results and batch parameters.

Results:
    Every operation yields either `Success` (carrying data) or `Failure`
    (carrying the error message and its `ErrorKind`). `to_dict()` renders the
    JSON envelope ``{"success": true, "data": ...}`` or
    ``{"success": false, "error": "..."}``. A batch call is a `Success` whose
    data is a list of per-element results.

Batch parameters:
    An "index or list of indices" argument is resolved once into `SingleIndex`
    or `BatchIndices` by `resolve_indices`; the store never re-inspects the raw
    shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar, Union

from reqlix.config.logging import get_logger
from reqlix.core.errors import ErrorKind, ReqlixError, ReqlixValidationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from reqlix.config.logging import ReqlixLogger

logger: ReqlixLogger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        data (T): Operation payload (record, list of records, or list of results).
    """

    data: T

    @property
    def success(self) -> bool:
        """Always True."""
        return True

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON envelope for this result."""
        return {"success": True, "data": to_jsonable(self.data)}


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome.

    Attributes:
        error (str): User-facing error message.
        kind (ErrorKind): Classification of the failure.
    """

    error: str
    kind: ErrorKind

    @property
    def success(self) -> bool:
        """Always False."""
        return False

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON envelope for this result."""
        return {"success": False, "error": self.error}


Outcome = Union[Success[Any], Failure]


def to_jsonable(value: Any) -> Any:
    """Convert records and nested results into plain JSON-compatible values.

    Args:
        value (Any): Record, result, sequence or scalar.

    Returns:
        Any: Dicts, lists and scalars only.
    """
    if isinstance(value, (Success, Failure)):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: to_jsonable(v) for k, v in value.items()}
    return value


def run_operation(func: Callable[[], T]) -> Success[T] | Failure:
    """Call ``func`` and capture a raised `ReqlixError` as a `Failure`.

    Other exceptions propagate.

    Args:
        func (Callable[[], T]): Zero-argument callable performing the operation.

    Returns:
        Success[T] | Failure: The tagged outcome.
    """
    try:
        return Success(func())
    except ReqlixError as exc:
        logger.debug("Operation failed (%s): %s", exc.kind.value, exc.message)
        return Failure(error=exc.message, kind=exc.kind)


# --------------------------- Batch parameters ---------------------------


@dataclass(frozen=True, slots=True)
class SingleIndex:
    """A single requirement index.

    Attributes:
        index (str): The index.
    """

    index: str


@dataclass(frozen=True, slots=True)
class BatchIndices:
    """An ordered list of requirement indices.

    Attributes:
        indices (tuple[str, ...]): The indices, in request order.
    """

    indices: tuple[str, ...] = field(default_factory=tuple)


IndexParam = Union[SingleIndex, BatchIndices]

INDEX_TYPE_MESSAGE: Final[str] = "index must be a string or an array of strings"


def resolve_indices(value: str | Sequence[str]) -> IndexParam:
    """Resolve an "index or list of indices" argument.

    Args:
        value (str | Sequence[str]): A single index or a sequence of indices.

    Returns:
        IndexParam: `SingleIndex` for a string, `BatchIndices` otherwise.

    Raises:
        ReqlixValidationError: If ``value`` is neither a string nor a sequence
            of strings.
    """
    if isinstance(value, str):
        return SingleIndex(value)
    if not isinstance(value, Sequence):
        raise ReqlixValidationError(INDEX_TYPE_MESSAGE)
    items: tuple[object, ...] = tuple(value)
    if not all(isinstance(item, str) for item in items):
        raise ReqlixValidationError(INDEX_TYPE_MESSAGE)
    return BatchIndices(tuple(str(item) for item in items))
