import re

import pytest

from hishtory.selection import (
    QueryIdAllocator,
    SelectStatus,
    build_selected_command,
    filter_duplicate_commands,
    highlight_chunks,
)


def test_select_status_from_value_drives_selection():
    assert build_selected_command("ls", "/tmp", SelectStatus(1), "/home/u") == "ls"
    assert build_selected_command("ls", "/tmp", SelectStatus(2), "/home/u") == 'cd "/tmp" && ls'
    with pytest.raises(ValueError):
        build_selected_command("ls", "/tmp", SelectStatus(0), "/home/u")


def test_allocate_is_increasing():
    alloc = QueryIdAllocator()
    first = alloc.allocate()
    second = alloc.allocate()
    assert second > first
    assert alloc.last_dispatched_id == second


def test_should_process_drops_stale_results():
    alloc = QueryIdAllocator()
    older = alloc.allocate()
    newer = alloc.allocate()
    assert alloc.should_process(newer) is True
    assert alloc.should_process(older) is False
    assert alloc.last_processed_id == newer


def test_should_process_same_id_twice():
    alloc = QueryIdAllocator()
    qid = alloc.allocate()
    assert alloc.should_process(qid) is True
    assert alloc.should_process(qid) is False


def test_selected_returns_command():
    assert build_selected_command("ls -la", "/tmp", SelectStatus.SELECTED, "/home/u") == "ls -la"


def test_selected_with_change_dir():
    out = build_selected_command("ls", "/tmp", SelectStatus.SELECTED_WITH_CHANGE_DIR, "/home/u")
    assert out == 'cd "/tmp" && ls'


def test_change_dir_expands_home():
    out = build_selected_command(
        "make", "~/code/proj", SelectStatus.SELECTED_WITH_CHANGE_DIR, "/home/u"
    )
    assert out == 'cd "/home/u/code/proj" && make'


def test_change_dir_without_home_keeps_tilde():
    out = build_selected_command("make", "~/code", SelectStatus.SELECTED_WITH_CHANGE_DIR, None)
    assert out.startswith('cd "~/code"')
    assert out.endswith(" && make")


def test_not_selected_raises():
    with pytest.raises(ValueError):
        build_selected_command("ls", "/tmp", SelectStatus.NOT_SELECTED, "/home/u")


def test_highlight_no_match():
    assert highlight_chunks("hello", "zzz") == [("hello", False, True, True)]


def test_highlight_none_pattern():
    assert highlight_chunks("hello", None) == [("hello", False, True, True)]


def test_highlight_invalid_pattern_matches_nothing():
    assert highlight_chunks("a(b", "(") == [("a(b", False, True, True)]


@pytest.mark.parametrize(
    "value,pattern",
    [("foo bar", "bar"), ("foo bar foo", "foo"), ("xaxbx", "x"), ("abc", "abc")],
)
def test_highlight_chunks_reassemble(value, pattern):
    chunks = highlight_chunks(value, pattern)
    assert "".join(text for text, _, _, _ in chunks) == value
    for text, matching, _, _ in chunks:
        if matching:
            assert re.fullmatch(pattern, text)
    assert chunks[-1][3] is True


def test_highlight_middle_match():
    chunks = highlight_chunks("foo bar baz", re.compile("bar"))
    assert chunks == [
        ("foo ", False, True, False),
        ("bar", True, False, False),
        (" baz", False, False, True),
    ]


def test_highlight_whole_match():
    assert highlight_chunks("abc", "abc") == [("abc", True, True, True)]


def test_filter_duplicate_commands():
    cmds = ["ls", " ls ", "pwd", "ls", "echo"]
    assert filter_duplicate_commands(cmds) == ["ls", "pwd", "echo"]


def test_filter_duplicate_keeps_first_spelling():
    cmds = ["  git status", "git status"]
    assert filter_duplicate_commands(cmds) == ["  git status"]


def test_filter_duplicate_empty():
    assert filter_duplicate_commands([]) == []