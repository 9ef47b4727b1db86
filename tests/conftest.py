import json
import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import score_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from score_toolkit.core.models import Entry


# Common test fixtures
@pytest.fixture
def sample_entries() -> list[Entry]:
    """The built-in registration sequence (Alice repeated)."""
    return [
        Entry("Alice", 95),
        Entry("Bob", 80),
        Entry("Alice", 97),
        Entry("Charlie", 100),
        Entry("Diana", 75),
    ]


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document to tmp_path and return its path."""
    def _write(data, name: str = "entries.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_jsonl(tmp_path: Path):
    """Write raw JSONL lines to tmp_path and return its path."""
    def _write(lines: list[str], name: str = "entries.jsonl") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return _write
