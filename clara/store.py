from typing import Dict, Optional

from .models import Operation


class OperationStore:
    """
    Completed rename batches of one engine, keyed by operation id.
    The most recent batch is tracked explicitly in last_id.
    """

    def __init__(self):
        self._operations: Dict[str, Operation] = {}
        self.last_id: Optional[str] = None

    def add(self, op: Operation) -> None:
        self._operations[op.id] = op
        self.last_id = op.id

    def get(self, operation_id: str) -> Optional[Operation]:
        return self._operations.get(operation_id)

    def last(self) -> Optional[Operation]:
        if self.last_id is None:
            return None
        return self._operations[self.last_id]

    def __contains__(self, operation_id: object) -> bool:
        return operation_id in self._operations

    def __len__(self) -> int:
        return len(self._operations)
