"""Tests for snapshot models and output reporters."""

import json

import yaml
from rich.console import Console

from porcelain import __version__
from porcelain.git.models import StatusEntry, StatusKind, StatusSnapshot
from porcelain.output import json_report, terminal, yaml_report


def _make_snapshot(entries=None) -> StatusSnapshot:
    """Build a StatusSnapshot with sample data."""
    if entries is None:
        entries = [
            StatusEntry(path="a.txt", status=StatusKind.MODIFIED),
            StatusEntry(path="new.txt", status=StatusKind.RENAMED, original_path="old.txt"),
            StatusEntry(path="d.txt", status=StatusKind.UNTRACKED, full_path="/repo/d.txt"),
        ]
    return StatusSnapshot(
        local_branch="master",
        remote_branch="origin/master",
        ahead=1,
        behind=2,
        entries=entries or None,
    )


def _capture(snapshot: StatusSnapshot, **kwargs) -> str:
    console = Console(record=True, width=120)
    terminal.render(snapshot, console=console, **kwargs)
    return console.export_text()


class TestSnapshotModel:
    def test_counts(self):
        counts = _make_snapshot().counts()
        assert counts["modified"] == 1
        assert counts["renamed"] == 1
        assert counts["untracked"] == 1
        assert counts["added"] == 0
        assert list(counts) == [k.value for k in StatusKind]

    def test_clean_snapshot(self):
        snap = _make_snapshot(entries=[])
        assert snap.entries is None
        assert snap.is_clean
        assert snap.to_dict()["entries"] == []

    def test_entry_dict_omits_empty_fields(self):
        entry = StatusEntry(path="a.txt", status=StatusKind.ADDED)
        assert entry.to_dict() == {"path": "a.txt", "status": "added"}


class TestJsonReport:
    def test_valid_json(self):
        data = json.loads(json_report.render(_make_snapshot()))
        assert data["version"] == __version__
        assert data["local_branch"] == "master"
        assert data["remote_branch"] == "origin/master"
        assert data["ahead"] == 1
        assert data["behind"] == 2
        assert data["clean"] is False
        assert data["counts"]["renamed"] == 1

    def test_entry_order_and_fields(self):
        data = json.loads(json_report.render(_make_snapshot()))
        assert [e["path"] for e in data["entries"]] == ["a.txt", "new.txt", "d.txt"]
        assert data["entries"][1]["original_path"] == "old.txt"
        assert data["entries"][2]["full_path"] == "/repo/d.txt"

    def test_empty_snapshot(self):
        data = json.loads(json_report.render(StatusSnapshot(local_branch="main")))
        assert data["clean"] is True
        assert data["entries"] == []
        assert data["remote_branch"] is None


class TestYamlReport:
    def test_matches_json_document(self):
        snap = _make_snapshot()
        assert yaml.safe_load(yaml_report.render(snap)) == json.loads(json_report.render(snap))


class TestTerminal:
    def test_branch_and_entries(self):
        out = _capture(_make_snapshot())
        assert "master" in out
        assert "origin/master" in out
        assert "↑1" in out and "↓2" in out
        assert "old.txt → new.txt" in out
        assert "Total:" in out

    def test_clean_message(self):
        out = _capture(_make_snapshot(entries=[]))
        assert "working tree clean" in out

    def test_summary_hidden(self):
        out = _capture(_make_snapshot(), show_summary=False)
        assert "Total:" not in out

    def test_full_paths(self):
        out = _capture(_make_snapshot(), show_full_paths=True)
        assert "/repo/d.txt" in out
