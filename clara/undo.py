import logging
from pathlib import Path
from typing import List

from .logger import LogSink
from .models import RenameMapping, UndoResult
from .store import OperationStore
from .utils import restore_path, safe_move

NO_OPERATION = "no operation to undo"


class UndoManager:
    def __init__(self, store: OperationStore, sink: LogSink | None = None):
        self.store = store
        self.sink = sink or LogSink()

    def restore_one(self, mapping: RenameMapping) -> Path:
        target = mapping.old_path
        if target.exists():
            # Something took the original name since the rename
            target = restore_path(mapping.old_path)
        safe_move(mapping.new_path, target)
        return target

    def undo(self, operation_id: str | None = None) -> UndoResult:
        if operation_id:
            op = self.store.get(operation_id)
        else:
            op = self.store.last()

        if op is None:
            self.sink.emit(f"Undo: {NO_OPERATION}.", logging.WARNING)
            return UndoResult(undone=0, errors=[NO_OPERATION], operation_id=None)

        self.sink.emit(f"Undoing operation {op.id} ({len(op.mappings)} files)")
        undone = 0
        errors: List[str] = []
        # Last renamed first
        for mapping in reversed(op.mappings):
            try:
                target = self.restore_one(mapping)
            except OSError as e:
                self.sink.emit(f'ERROR undoing "{mapping.new_path.name}": {e}', logging.ERROR)
                errors.append(f"{mapping.new_path.name}: {e}")
                continue
            undone += 1
            self.sink.emit(f'Undo: "{mapping.new_path.name}" -> "{target.name}"')

        self.sink.emit(f"Undo complete. Restored {undone} files, {len(errors)} errors.")
        return UndoResult(undone=undone, errors=errors, operation_id=op.id)
