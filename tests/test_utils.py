from pathlib import Path

import pytest

from clara.errors import InvalidPathError
from clara.utils import (
    coerce_start_number,
    ensure_directory,
    format_counter,
    matches_extension,
    normalize_extension,
    restore_path,
    safe_move,
)


@pytest.mark.parametrize("n, expected", [
    (0, "0000"),
    (7, "0007"),
    (999, "0999"),
    (1000, "1000"),
    (1500, "1500"),
    (123456, "123456"),
])
def test_format_counter(n, expected):
    assert format_counter(n) == expected


@pytest.mark.parametrize("value, expected", [
    (None, 1),
    (7, 7),
    (0, 0),
    ("12", 12),
    (" 5 ", 5),
    (3.0, 3),
    ("", 1),
    ("abc", 1),
    (-4, 1),
    ("-4", 1),
    (2.5, 1),
    ("2.5", 1),
    (True, 1),
    ([1], 1),
])
def test_coerce_start_number(value, expected):
    assert coerce_start_number(value) == expected


def test_extension_matching_ignores_case_and_dot():
    assert normalize_extension("JPEG") == ".jpeg"
    assert normalize_extension(" .Jpg ") == ".jpg"
    assert normalize_extension(None) == ""
    assert matches_extension("AT 09-10-1941.p.1.JPEG", "jpeg")
    assert matches_extension("scan.jpeg", ".JPEG")
    assert not matches_extension("scan.png", "jpeg")
    assert matches_extension("anything.bin", "   ")
    assert matches_extension("anything.bin", None)


def test_restore_path_inserts_suffix_before_extension():
    assert restore_path(Path("/d/foo.jpg")) == Path("/d/foo (restore).jpg")
    assert restore_path(Path("/d/AT 09-10-1941.p.1.jpeg")) == Path("/d/AT 09-10-1941.p.1 (restore).jpeg")
    assert restore_path(Path("/d/noext")) == Path("/d/noext (restore)")


def test_ensure_directory(tmp_path):
    assert ensure_directory(str(tmp_path)) == tmp_path.resolve()
    with pytest.raises(InvalidPathError):
        ensure_directory(str(tmp_path / "missing"))
    (tmp_path / "file.txt").write_text("x")
    with pytest.raises(InvalidPathError):
        ensure_directory(str(tmp_path / "file.txt"))
    with pytest.raises(InvalidPathError):
        ensure_directory("  ")


def test_safe_move_refuses_to_overwrite(tmp_path):
    src = tmp_path / "a.jpg"
    dst = tmp_path / "b.jpg"
    src.write_text("a")
    dst.write_text("b")
    with pytest.raises(FileExistsError):
        safe_move(src, dst)
    assert dst.read_text() == "b"

    with pytest.raises(FileNotFoundError):
        safe_move(tmp_path / "gone.jpg", tmp_path / "c.jpg")

    safe_move(src, tmp_path / "c.jpg")
    assert not src.exists()
    assert (tmp_path / "c.jpg").read_text() == "a"
