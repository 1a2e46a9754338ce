import re

import pytest

from clara.engine import RenameEngine
from clara.utils import UNDO_FILENAME
from conftest import listing, make_files

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z\] .+")


def test_round_trip_restores_names(engine, pages):
    before = listing(pages)
    result = engine.run(pages, "jpg", 1)
    undo = engine.undo()
    assert undo.undone == result.renamed == 3
    assert [n for n in listing(pages) if n != UNDO_FILENAME] == before


def test_undo_without_operation_touches_nothing(engine, pages):
    before = listing(pages)
    undo = engine.undo()
    assert undo.undone == 0
    assert undo.errors
    assert undo.to_dict() == {"undone": 0, "errors": undo.errors, "operationId": None}
    assert listing(pages) == before


def test_scan_dict_shape(engine, tmp_path):
    make_files(tmp_path, "AT 09-10-1941.p.1.jpeg")
    data = engine.scan(str(tmp_path)).to_dict()
    assert data == {
        "total": 1,
        "matched": 1,
        "items": [{"name": "AT 09-10-1941.p.1.jpeg", "date": "1941-10-09T00:00:00.000Z", "page": 1}],
    }


def test_scan_of_missing_folder_propagates(engine, tmp_path):
    with pytest.raises(FileNotFoundError):
        engine.scan(tmp_path / "missing")


def test_engines_do_not_share_operations(pages):
    first = RenameEngine()
    second = RenameEngine()
    first.run(pages)
    assert second.undo().undone == 0
    assert first.undo().undone == 3


def test_observer_receives_timestamped_lines(engine, captured, pages):
    engine.run(pages)
    assert captured
    assert all(LINE.match(line) for line in captured)
    assert any('Renamed: "A 01-01-1941.p.1.jpg" -> "0001 A 01-01-1941.p.1.jpg"' in line for line in captured)
    assert len(captured) == len(engine.sink.lines)


def test_unsubscribed_observer_gets_nothing(engine, pages):
    lines = []
    unsubscribe = engine.subscribe(lines.append)
    engine.scan(pages)
    seen = len(lines)
    unsubscribe()
    engine.run(pages)
    assert len(lines) == seen


def test_failing_observer_does_not_abort_run(engine, pages):
    def broken(text):
        if "Renamed:" in text:
            raise RuntimeError("observer failed")

    engine.subscribe(broken)
    result = engine.run(pages)

    assert result.renamed == 3
    assert len(engine.store) == 1
    assert (pages / UNDO_FILENAME).exists()
    assert engine.undo().undone == 3
