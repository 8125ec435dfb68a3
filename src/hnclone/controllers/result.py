"""Result envelope returned by every controller method."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ControllerResult(Generic[T]):
    """Uniform ``{success, data, error}`` envelope.

    On failure ``data`` holds the empty default of the operation
    ([] for lists, None for single items) and ``error`` a fixed message.
    """

    success: bool
    data: T
    error: str | None = None
