"""Date range and limit filtering of a user's exercise log."""

from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from services.validation import parse_date_string


def filter_log_by_dates(
    log: Sequence[Dict[str, Any]],
    from_: Optional[date],
    to: Optional[date],
) -> List[Dict[str, Any]]:
    """
    Keep entries dated within ``[from_, to]``.

    Either bound may be None to leave that side open. Entries keep their
    order. With at least one bound set, entries whose date cannot be read
    are dropped.
    """
    if from_ is None and to is None:
        return list(log)

    filtered = []
    for entry in log:
        entry_date = parse_date_string(entry.get("date"))
        if entry_date is None:
            continue
        if from_ is not None and entry_date < from_:
            continue
        if to is not None and entry_date > to:
            continue
        filtered.append(entry)
    return filtered


def filter_log_by_limit(log: Sequence[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    """Return the first ``limit`` entries, or all of them when ``limit`` is 0."""
    if limit == 0:
        return list(log)
    return list(log[:limit])
