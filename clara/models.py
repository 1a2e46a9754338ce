from dataclasses import dataclass, field
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple


def iso_utc(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a Z suffix."""
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Candidate:
    name: str
    date: datetime  # UTC midnight
    page: int

    def to_dict(self) -> dict:
        return {"name": self.name, "date": iso_utc(self.date), "page": self.page}


@dataclass(frozen=True)
class RenameMapping:
    old_path: Path
    new_path: Path

    def to_dict(self) -> dict:
        return {"oldPath": str(self.old_path), "newPath": str(self.new_path)}


@dataclass(frozen=True)
class Operation:
    id: str
    directory: Path
    created_at: datetime
    mappings: Tuple[RenameMapping, ...]


@dataclass(frozen=True)
class LogLine:
    timestamp: datetime
    message: str

    def __str__(self) -> str:
        return f"[{iso_utc(self.timestamp)}] {self.message}"


@dataclass(frozen=True)
class ScanResult:
    total: int
    matched: int
    items: List[Candidate] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "matched": self.matched,
            "items": [c.to_dict() for c in self.items],
        }


@dataclass(frozen=True)
class RunResult:
    operation_id: Optional[str]
    renamed: int
    mappings: List[RenameMapping] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "operationId": self.operation_id,
            "renamed": self.renamed,
            "mappings": [m.to_dict() for m in self.mappings],
        }


@dataclass(frozen=True)
class UndoResult:
    undone: int
    errors: List[str] = field(default_factory=list)
    operation_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "undone": self.undone,
            "errors": list(self.errors),
            "operationId": self.operation_id,
        }
