from pathlib import Path

import pytest

from roadnet.config import reset_config

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Isolate tests from ROADNET_* variables and the cached config."""
    for name in ("ROADNET_SOURCE_FALLBACK_DIRS", "ROADNET_DISPLAY_CELL_WIDTH", "ROADNET_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def write_edges(tmp_path):
    """Write edge-list lines to a file and return its path."""

    def _write(lines, name="edges.txt"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
