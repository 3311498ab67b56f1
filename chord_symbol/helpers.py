"""Small helpers shared by the parsing and rendering pipelines."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

logger = logging.getLogger(__name__)


def chain(filters: Iterable[Callable[[Any], Any]], value: Any) -> Any:
    """Run ``value`` through ``filters`` in order.

    Each filter receives the output of the previous one. A filter returning
    a falsy value stops the chain, which then returns None.

    Parameters
    ----------
    filters : Iterable[Callable]
        The filters to apply.
    value : Any
        The initial value.

    Returns
    -------
    Any
        The output of the last filter, or None if the chain was stopped.

    Examples
    --------
    >>> chain([str.strip, str.upper], "  gm7 ")
    'GM7'
    >>> chain([str.strip, lambda s: None, str.upper], "gm7") is None
    True
    """
    for apply_filter in filters:
        value = apply_filter(value)
        if not value:
            logger.debug("Filter %r stopped the chain", getattr(apply_filter, "__name__", apply_filter))
            return None
    return value


def has_all(intervals: Iterable[str], wanted: Iterable[str]) -> bool:
    """Whether every interval of ``wanted`` is in ``intervals``."""
    present = set(intervals)
    return all(interval in present for interval in wanted)


def has_one_of(intervals: Iterable[str], wanted: Iterable[str]) -> bool:
    """Whether at least one interval of ``wanted`` is in ``intervals``."""
    present = set(intervals)
    return any(interval in present for interval in wanted)


def has_none_of(intervals: Iterable[str], wanted: Iterable[str]) -> bool:
    """Whether no interval of ``wanted`` is in ``intervals``."""
    return not has_one_of(intervals, wanted)


def has_exactly(intervals: Iterable[str], wanted: Iterable[str]) -> bool:
    """Whether ``intervals`` and ``wanted`` hold the same intervals.

    Examples
    --------
    >>> has_exactly(("1", "5"), ["5", "1"])
    True
    """
    return set(intervals) == set(wanted)
