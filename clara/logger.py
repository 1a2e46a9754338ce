import json
import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Callable, Iterable, List

from .models import LogLine, RenameMapping
from .utils import UNDO_FILENAME

Observer = Callable[[str], None]

_log = logging.getLogger("clara")


class LogSink:
    """Append-only stream of timestamped lines, pushed to subscribed observers."""

    def __init__(self):
        self.lines: List[LogLine] = []
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register observer; the returned callable unsubscribes it."""
        self._observers.append(observer)
        return lambda: self.unsubscribe(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def emit(self, message: str, level: int = logging.INFO) -> LogLine:
        line = LogLine(datetime.now(timezone.utc), message)
        self.lines.append(line)
        _log.log(level, message)
        text = str(line)
        # Copy so an observer may unsubscribe itself while being notified
        for observer in list(self._observers):
            try:
                observer(text)
            except Exception:
                # A broken observer must not leave a rename batch half done
                _log.exception("Log observer %r failed", observer)
        return line

    def messages(self) -> List[str]:
        return [line.message for line in self.lines]


class UndoRecordWriter:
    """Writes the last batch of a directory to a JSON file inside it."""

    def __init__(self, root: Path):
        self.root = root
        self.path = self.root / UNDO_FILENAME

    def write(self, operation_id: str, mappings: Iterable[RenameMapping]) -> Path:
        data = {
            "operationId": operation_id,
            "mappings": [m.to_dict() for m in mappings],
        }
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return self.path
