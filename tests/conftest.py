"""Shared fixtures for building small shader trees on disk."""

import pytest


@pytest.fixture
def write_source(tmp_path):
    """Return a helper that writes a file below tmp_path and returns its path as str."""

    def _write(name: str, text: str = "") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write
