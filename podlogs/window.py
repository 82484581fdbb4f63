"""Log paging: pick one page of lines out of a container's full log.

The API is index based. A client asks for ``count`` lines starting at
``start_index``; a negative (or past-the-end) start asks for the last page.
The last page is aligned to a multiple of ``count`` so that paging backwards
from it lands on the same page boundaries as paging forwards from zero.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple, TypeVar

from .errors import InvalidPageSize
from .schemas import LogQuery, Logs

T = TypeVar("T")

LINE_SEPARATOR = "\n"

PAGE_ACTIONS = ("first", "previous", "next", "last")


def check_page_size(count: int) -> None:
    if count <= 0:
        raise InvalidPageSize(count)


def select_logs(logs: Sequence[T], start_index: int, count: int) -> Tuple[int, List[T]]:
    """Return ``(start_index, lines)`` for the page at ``start_index``.

    The returned start index is the one actually used, which differs from the
    requested one when the request was negative or beyond the end.
    """
    check_page_size(count)

    total = len(logs)
    if start_index > total:
        start_index = -1
    # negative start index means the last page
    if start_index < 0:
        start_index = (total // count) * count

    end_index = start_index + count
    if end_index > total:
        end_index = total
    return start_index, list(logs[start_index:end_index])


def split_lines(raw_logs: str) -> List[str]:
    # Plain split: a trailing newline leaves an empty last line, counted in total.
    return raw_logs.split(LINE_SEPARATOR)


def construct_logs(since_time: str | None, raw_logs: str, query: LogQuery) -> Logs:
    """Build the ``Logs`` response for ``query`` from the full raw log text."""
    lines = split_lines(raw_logs)
    start_index, selected = select_logs(lines, query.start_index, query.count)
    return Logs(
        pod_id=query.pod_id,
        since_time=since_time,
        logs=selected,
        container=query.container,
        total=len(lines),
        start_index=start_index,
    )


def page_start(action: str, current_index: int, per_page: int) -> int:
    """Start index to request for a paging button, relative to the shown page."""
    if action == "first":
        return 0
    if action == "previous":
        return max(0, current_index - per_page)
    if action == "next":
        return current_index + per_page
    if action == "last":
        return -1
    raise ValueError(f"Unsupported page action: {action}")
