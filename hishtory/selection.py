"""Selecting a search result and the state that orders asynchronous queries."""

from __future__ import annotations

import posixpath
import re
import time
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Pattern, Union

_HOME_PREFIX = "~/"


class SelectStatus(IntEnum):
    """Whether the user picked an entry, and whether to change into its directory."""

    NOT_SELECTED = 0
    SELECTED = 1
    SELECTED_WITH_CHANGE_DIR = 2


@dataclass
class QueryIdAllocator:
    """Monotonic query ids that keep stale results from overwriting newer ones.

    Typing ``l`` then ``s`` dispatches queries for ``l`` and ``ls``; if the
    ``ls`` results arrive first, the later ``l`` results must be dropped.
    """

    last_dispatched_id: int = 0
    last_processed_id: int = -1
    last_dispatched_at: float = field(default=0.0)

    def allocate(self) -> int:
        """Reserve the id for a newly dispatched query."""
        self.last_dispatched_id += 1
        self.last_dispatched_at = time.monotonic()
        return self.last_dispatched_id

    def should_process(self, query_id: int) -> bool:
        """Whether results for ``query_id`` are newer than any processed so far.

        Accepting an id records it as the latest processed one.
        """
        if query_id > self.last_processed_id:
            self.last_processed_id = query_id
            return True
        return False


def build_selected_command(
    command: str,
    working_directory: str,
    status: SelectStatus,
    home_dir: str | None,
) -> str:
    """The command line to hand back to the shell for a selected entry.

    With a change of directory, the command is prefixed by a ``cd`` into the
    entry's working directory; a leading ``~/`` is expanded with ``home_dir``
    unless the home directory is unknown (None).
    """
    status = SelectStatus(status)
    if status is SelectStatus.NOT_SELECTED:
        raise ValueError("no entry was selected")
    if status is SelectStatus.SELECTED:
        return command
    change_dir = working_directory
    if change_dir.startswith(_HOME_PREFIX) and home_dir is not None:
        stripped = change_dir[len(_HOME_PREFIX):]
        change_dir = posixpath.normpath(home_dir + "/" + stripped)
    return 'cd "' + change_dir + '" && ' + command


def _compile(pattern: Union[str, Pattern[str], None]) -> Pattern[str] | None:
    if pattern is None:
        return None
    if isinstance(pattern, str):
        try:
            return re.compile(pattern)
        except re.error:
            return None
    return pattern


def highlight_chunks(
    value: str, pattern: Union[str, Pattern[str], None]
) -> list[tuple[str, bool, bool, bool]]:
    """Split a table cell into chunks for match highlighting.

    Each chunk is ``(text, is_matching, is_left_most, is_right_most)``; the
    edge flags say where the cell padding goes. A missing or invalid pattern
    matches nothing.
    """
    regex = _compile(pattern)
    matches = list(regex.finditer(value)) if regex is not None else []
    if not matches:
        return [(value, False, True, True)]

    chunks: list[tuple[str, bool, bool, bool]] = []
    last_included = 0
    for match in matches:
        start, end = match.span()
        before = value[last_included:start]
        if before:
            chunks.append((before, False, last_included == 0, last_included + 1 == len(value)))
        matched = value[start:end]
        if matched:
            chunks.append((matched, True, start == 0, end == len(value)))
        last_included = end
    if last_included != len(value):
        chunks.append((value[last_included:], False, False, True))
    return chunks


def filter_duplicate_commands(commands: Iterable[str]) -> list[str]:
    """Keep the first of each command, comparing with surrounding whitespace removed."""
    seen: set[str] = set()
    kept: list[str] = []
    for command in commands:
        key = command.strip()
        if key in seen:
            continue
        seen.add(key)
        kept.append(command)
    return kept