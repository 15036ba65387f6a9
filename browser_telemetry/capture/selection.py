"""Head/tail selection over capture buffers.

Selection never mutates its input and always returns a new list, so callers
hold a stable snapshot even if the buffer changes while they await.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, TypeVar

from browser_telemetry.capture.buffers import EventStore
from browser_telemetry.capture.views import ClickRecord, LogRecord, NavigationRecord
from browser_telemetry.core.exceptions import InvalidSliceError

T = TypeVar("T")


@dataclass(frozen=True)
class SliceRequest:
    """Which part of a sequence to return.

    ``head`` wins over ``tail`` when both are given.
    """

    head: Optional[int] = None
    tail: Optional[int] = None


def _check(name: str, value: int) -> int:
    if value < 0:
        raise InvalidSliceError(name, value)
    return value


def _last(items: List[T], count: int) -> List[T]:
    # items[-0:] would be the whole list
    if count == 0:
        return []
    return items[-count:]


def select(
    sequence: Iterable[T],
    request: Optional[SliceRequest] = None,
    default_tail: Optional[int] = None,
    *,
    head: Optional[int] = None,
    tail: Optional[int] = None,
) -> List[T]:
    """
    Select a contiguous part of ``sequence`` in its existing order.

    Args:
        sequence: Records in storage order
        request: head/tail counts; absent fields are ignored
        default_tail: Count returned from the end when neither head nor
            tail is given. None returns the whole sequence.
        head: Shorthand for ``SliceRequest(head=...)``
        tail: Shorthand for ``SliceRequest(tail=...)``

    Returns:
        A new list

    Raises:
        InvalidSliceError: The effective head or tail is negative
        TypeError: Both ``request`` and head/tail keywords are given
    """
    if request is None:
        request = SliceRequest(head=head, tail=tail)
    elif head is not None or tail is not None:
        raise TypeError("pass either a SliceRequest or head/tail, not both")
    items = list(sequence)

    if request.head is not None:
        return items[:_check("head", request.head)]
    if request.tail is not None:
        return _last(items, _check("tail", request.tail))
    if default_tail is None:
        return items
    return _last(items, default_tail)


def select_logs(
    store: EventStore,
    head: Optional[int] = None,
    tail: Optional[int] = None,
) -> List[LogRecord]:
    """Logs oldest-first; the last ``store.default_logs_return`` by default."""
    return select(store.logs, SliceRequest(head, tail), default_tail=store.default_logs_return)


def select_clicks(
    store: EventStore,
    head: Optional[int] = None,
    tail: Optional[int] = None,
) -> List[ClickRecord]:
    """Clicks newest-first; all of them by default."""
    return select(store.clicks, SliceRequest(head, tail))


def select_navigations(
    store: EventStore,
    head: Optional[int] = None,
) -> List[NavigationRecord]:
    """Navigations newest-first; all of them by default."""
    return select(store.navigations, SliceRequest(head=head))
