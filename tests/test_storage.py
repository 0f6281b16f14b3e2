import os
import tempfile

from turnkeeper.storage import (
    build_export_basename,
    ensure_structure,
    export_text_async,
    timestamp_slug,
)


def test_timestamp_slug_format():
    slug = timestamp_slug()
    assert len(slug) == 10
    assert slug.count("-") == 2


def test_build_export_basename():
    name = build_export_basename("Board Meeting")
    assert "--" in name
    assert "Board-Meeting" in name


def test_ensure_structure_creates_folders():
    with tempfile.TemporaryDirectory() as tmp:
        paths = ensure_structure(tmp)
        for key in ("sessions", "exports", "logs"):
            assert os.path.isdir(paths[key])


def test_export_text_async_writes_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "out", "speeches.csv")
        thread = export_text_async(path, "1.000,A\n")
        thread.join(timeout=5)
        with open(path, "r", encoding="utf-8") as handle:
            assert handle.read() == "1.000,A\n"


def test_export_text_async_drops_write_errors():
    with tempfile.TemporaryDirectory() as tmp:
        # A directory cannot be opened for writing.
        thread = export_text_async(tmp, "1.000,A\n")
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert os.path.isdir(tmp)
