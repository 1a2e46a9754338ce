import logging
import uuid
from pathlib import Path
from datetime import datetime, timezone
from typing import List

from .logger import LogSink, UndoRecordWriter
from .models import Candidate, Operation, RenameMapping, RunResult
from .scanner import FolderScanner
from .store import OperationStore
from .utils import coerce_start_number, format_counter, safe_move


class SequentialRenamer:
    """Prefixes the scanned candidates of a folder with a running counter."""

    def __init__(self, root: Path, store: OperationStore, sink: LogSink | None = None):
        self.root = Path(root)
        self.store = store
        self.sink = sink or LogSink()

    def rename_one(self, item: Candidate, counter: int) -> RenameMapping:
        new_name = f"{format_counter(counter)} {item.name}"
        old_path = self.root / item.name
        new_path = self.root / new_name
        safe_move(old_path, new_path)
        return RenameMapping(old_path, new_path)

    def run(self, extension: str | None = None, start_number=None) -> RunResult:
        self.sink.emit(
            f"Starting rename: dir={self.root}, ext={extension or 'any'}, start={start_number}"
        )
        scan = FolderScanner(self.root, extension, self.sink).scan()
        if not scan.items:
            self.sink.emit("Nothing to rename.")
            return RunResult(operation_id=None, renamed=0, mappings=[])

        counter = coerce_start_number(start_number)
        mappings: List[RenameMapping] = []
        for item in scan.items:
            try:
                mapping = self.rename_one(item, counter)
            except OSError as e:
                # Counter is kept so the next file takes the number that failed
                self.sink.emit(f'ERROR renaming "{item.name}": {e}', logging.ERROR)
                continue
            mappings.append(mapping)
            self.sink.emit(f'Renamed: "{item.name}" -> "{mapping.new_path.name}"')
            counter += 1

        if not mappings:
            self.sink.emit("No file could be renamed.", logging.WARNING)
            return RunResult(operation_id=None, renamed=0, mappings=[])

        operation_id = str(uuid.uuid4())
        self.store.add(
            Operation(
                id=operation_id,
                directory=self.root,
                created_at=datetime.now(timezone.utc),
                mappings=tuple(mappings),
            )
        )

        writer = UndoRecordWriter(self.root)
        try:
            writer.write(operation_id, mappings)
            self.sink.emit(f"Undo data saved to {writer.path.name}")
        except OSError as e:
            self.sink.emit(f"WARNING: could not write undo file: {e}", logging.WARNING)

        self.sink.emit(f"Renamed {len(mappings)} of {scan.matched} files. Operation: {operation_id}")
        return RunResult(operation_id=operation_id, renamed=len(mappings), mappings=mappings)
