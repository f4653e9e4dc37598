from dataclasses import dataclass
from enum import Enum

from statement_scanner.extraction.models import Transaction


class RunStatus(str, Enum):
    IDLE = "IDLE"
    PROCESSING = "PROCESSING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


@dataclass(slots=True)
class RunState:
    """Caller-visible state of the current pipeline run."""

    status: RunStatus = RunStatus.IDLE
    total: int = 0
    completed: int = 0
    transactions: tuple[Transaction, ...] = ()
    error_message: str = ""

    @property
    def pending(self) -> int:
        return self.total - self.completed
