"""Shared fixtures: a folder of scanned pages and a fresh engine per test."""
from pathlib import Path

import pytest

from clara.engine import RenameEngine


def make_files(folder: Path, *names: str) -> None:
    for name in names:
        (folder / name).write_text(name, encoding="utf-8")


def listing(folder: Path):
    return sorted(p.name for p in folder.iterdir())


@pytest.fixture
def engine():
    return RenameEngine()


@pytest.fixture
def captured(engine):
    """Lines pushed to an observer of the engine's log stream."""
    lines = []
    unsubscribe = engine.subscribe(lines.append)
    yield lines
    unsubscribe()


@pytest.fixture
def pages(tmp_path):
    """Three pages listed out of order; sorted order is A, B, C."""
    make_files(
        tmp_path,
        "C 03-01-1941.p.1.jpg",
        "A 01-01-1941.p.1.jpg",
        "B 02-01-1941.p.1.jpg",
    )
    return tmp_path
