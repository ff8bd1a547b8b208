"""Tests for ProjectTodoReader."""

from pathlib import Path

import pytest

from daily_todos.todos.todo_reader import (
    ProjectTodoReader,
    extract_short_id,
    extract_short_ids,
)


def test_find_todos_missing_dir(tmp_path: Path) -> None:
    """Test that a missing projects directory yields nothing."""
    reader = ProjectTodoReader(tmp_path / "nope")
    assert reader.find_todos_for_day("2025-01-01") == {}


def test_find_todos_empty_dir(projects_dir: Path) -> None:
    """Test an existing but empty projects directory."""
    reader = ProjectTodoReader(projects_dir)
    assert reader.find_todos_for_day("2025-01-01") == {}


def test_find_todos_filters_files(projects_dir: Path) -> None:
    """Test date, extension and blank-content filtering."""
    alpha = projects_dir / "alpha"
    alpha.mkdir()
    (alpha / "2025-01-01-abcd.md").write_text("## Tasks\n- one\n", encoding="utf-8")
    (alpha / "2025-01-01-ef01.md").write_text("   \n\t\n", encoding="utf-8")
    (alpha / "2025-01-02-zz.md").write_text("## Tasks\n- later\n", encoding="utf-8")
    (alpha / "2025-01-01-abcd.txt").write_text("## Tasks\n- wrong ext\n", encoding="utf-8")

    todos = ProjectTodoReader(projects_dir).find_todos_for_day("2025-01-01")

    assert list(todos) == ["alpha"]
    assert todos["alpha"].files == ["2025-01-01-abcd.md"]
    assert todos["alpha"].contents == ["## Tasks\n- one\n"]
    assert extract_short_ids(todos["alpha"].files) == ["abcd"]


def test_find_todos_sorted_and_parallel(projects_dir: Path) -> None:
    """Test files are sorted by name with contents kept in step."""
    beta = projects_dir / "beta"
    beta.mkdir()
    (beta / "2025-01-01-b2.md").write_text("second", encoding="utf-8")
    (beta / "2025-01-01-a1.md").write_text("first", encoding="utf-8")
    (beta / "2025-01-01-c3.md").write_text("", encoding="utf-8")

    todos = ProjectTodoReader(projects_dir).find_todos_for_day("2025-01-01")

    assert todos["beta"].files == ["2025-01-01-a1.md", "2025-01-01-b2.md"]
    assert todos["beta"].contents == ["first", "second"]


def test_find_todos_skips_projects_without_content(projects_dir: Path) -> None:
    """Test that projects with only blank or stale files are omitted."""
    (projects_dir / "empty").mkdir()
    stale = projects_dir / "stale"
    stale.mkdir()
    (stale / "2024-12-31-old.md").write_text("## Tasks\n- old\n", encoding="utf-8")
    live = projects_dir / "live"
    live.mkdir()
    (live / "2025-01-01-x.md").write_text("## Tasks\n- now\n", encoding="utf-8")
    (projects_dir / "2025-01-01-root.md").write_text("not a project", encoding="utf-8")

    todos = ProjectTodoReader(projects_dir).find_todos_for_day("2025-01-01")

    assert list(todos) == ["live"]


def test_find_todos_skips_unreadable_file(projects_dir: Path) -> None:
    """Test that a file that cannot be decoded is skipped, not fatal."""
    gamma = projects_dir / "gamma"
    gamma.mkdir()
    (gamma / "2025-01-01-bad.md").write_bytes(b"\xff\xfe\xfa broken")
    (gamma / "2025-01-01-good.md").write_text("## Notes\n- fine\n", encoding="utf-8")

    todos = ProjectTodoReader(projects_dir).find_todos_for_day("2025-01-01")

    assert todos["gamma"].files == ["2025-01-01-good.md"]


def test_find_todos_ignores_directories_named_like_files(projects_dir: Path) -> None:
    """Test that only regular files are considered."""
    delta = projects_dir / "delta"
    (delta / "2025-01-01-dir.md").mkdir(parents=True)

    assert ProjectTodoReader(projects_dir).find_todos_for_day("2025-01-01") == {}


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("2025-12-19-e90e.md", "e90e"),
        ("2025-01-01-abcd.md", "abcd"),
        ("2025-01-01.md", "01"),
        ("2025-01-01-ABCD.md", None),
        ("2025-01-01-ab_cd.md", None),
        ("notes.md", None),
    ],
)
def test_extract_short_id(filename: str, expected: str | None) -> None:
    """Test extracting the trailing lower-case id."""
    assert extract_short_id(filename) == expected


def test_extract_short_ids_filters_missing() -> None:
    """Test that names without an id contribute nothing."""
    names = ["2025-01-01-aa.md", "2025-01-01-BAD.md", "2025-01-01-bb.md"]
    assert extract_short_ids(names) == ["aa", "bb"]
