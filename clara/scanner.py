import re
from pathlib import Path
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .logger import LogSink
from .models import Candidate, ScanResult
from .utils import matches_extension

# "<anything><whitespace>DD-MM-YYYY.p.PAGE.ext", e.g. "AT 09-10-1941.p.1.jpeg"
FILENAME_PATTERN = re.compile(r"\s([0-9]{2})-([0-9]{2})-([0-9]{4})\.p\.([0-9]+)\.[^.]+\Z")


def extract_metadata(filename: str) -> Optional[Tuple[datetime, int]]:
    """Return (date, page) embedded in filename, or None if it does not match."""
    match = FILENAME_PATTERN.search(filename)
    if not match:
        return None
    dd, mm, yyyy, page = match.groups()
    try:
        date = datetime(int(yyyy), int(mm), int(dd), tzinfo=timezone.utc)
    except ValueError:
        # 31-02-1941 and friends are rejected, not rolled over
        return None
    return date, int(page)


class FolderScanner:
    """Lists the files directly inside a folder and orders those carrying a date and page."""

    def __init__(self, root: Path, extension: str | None = None, sink: LogSink | None = None):
        self.root = Path(root)
        self.extension = extension
        self.sink = sink or LogSink()

    def scan(self) -> ScanResult:
        self.sink.emit(f"Scanning folder: {self.root} (ext={self.extension or 'any'})")

        # OSError from listing is not caught: an unreadable folder fails the scan
        names = sorted(p.name for p in self.root.iterdir() if p.is_file())
        files = [name for name in names if matches_extension(name, self.extension)]

        items: List[Candidate] = []
        for name in files:
            info = extract_metadata(name)
            if info is None:
                continue
            date, page = info
            items.append(Candidate(name=name, date=date, page=page))

        # sort() is stable, so true ties keep listing order
        items.sort(key=lambda c: (c.date, c.page or 0))

        self.sink.emit(f"Found {len(items)} matching files with valid date/page data.")
        return ScanResult(total=len(files), matched=len(items), items=items)
