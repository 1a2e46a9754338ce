"""
Facade used by the console and window shells.

One RenameEngine owns its operation store and log sink; shells subscribe to
the sink before calling scan / run / undo and unsubscribe when they close.
Calls are synchronous and are expected to be issued one at a time.
"""
from pathlib import Path
from typing import Callable

from .logger import LogSink, Observer
from .models import RunResult, ScanResult, UndoResult
from .renamer import SequentialRenamer
from .scanner import FolderScanner
from .store import OperationStore
from .undo import UndoManager


class RenameEngine:
    def __init__(self, store: OperationStore | None = None, sink: LogSink | None = None):
        self.store = store if store is not None else OperationStore()
        self.sink = sink if sink is not None else LogSink()

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        return self.sink.subscribe(observer)

    def scan(self, directory, extension: str | None = None) -> ScanResult:
        return FolderScanner(Path(directory), extension, self.sink).scan()

    def run(self, directory, extension: str | None = None, start_number=None) -> RunResult:
        renamer = SequentialRenamer(Path(directory), self.store, self.sink)
        return renamer.run(extension, start_number)

    def undo(self, operation_id: str | None = None) -> UndoResult:
        return UndoManager(self.store, self.sink).undo(operation_id)
