"""Observability and telemetry for the calculation pipeline."""
import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Any, Optional
from datetime import datetime
from enum import Enum

from lrcalc.config import MAX_TRACE_RECORDS

logger = logging.getLogger(__name__)


class RecordType(str, Enum):
    """Types of trace records."""
    STAGE = "stage"
    ERROR = "error"


@dataclass
class TraceRecord:
    """Base class for trace records."""
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        record_type = getattr(self, 'record_type', None)
        return {
            "timestamp": self.timestamp.isoformat(),
            "type": record_type.value if record_type else "unknown",
            **{k: v for k, v in self.__dict__.items() if k not in ("timestamp", "record_type")}
        }


@dataclass
class StageRecord(TraceRecord):
    """Record for a completed pipeline stage (guard, lex, evaluate)."""
    stage: str
    expression: str
    outcome: str
    duration_ms: float
    metadata: Dict[str, Any] = field(default_factory=dict)
    record_type: RecordType = field(default=RecordType.STAGE, init=False)


@dataclass
class ErrorRecord(TraceRecord):
    """Record for a stage that failed."""
    stage: str
    expression: str
    error_kind: str
    message: str
    position: Optional[int] = None
    record_type: RecordType = field(default=RecordType.ERROR, init=False)


# In-memory trace storage, bounded
_trace_log: Deque[TraceRecord] = deque(maxlen=MAX_TRACE_RECORDS)


def log_stage(stage: str, expression: str, outcome: Any, duration_ms: float,
              metadata: Optional[Dict] = None):
    """Log a completed stage with timing."""
    record = StageRecord(
        timestamp=datetime.now(),
        stage=stage,
        expression=expression[:100],
        outcome=str(outcome)[:200],
        duration_ms=duration_ms,
        metadata=metadata or {}
    )
    _trace_log.append(record)
    logger.info(
        f"🔨 {stage}({expression[:50]!r}) → {str(outcome)[:100]} ({duration_ms:.3f}ms)")
    if metadata:
        logger.debug(f"  Metadata: {metadata}")


def log_error(stage: str, expression: str, error_kind: str, message: str,
              position: Optional[int] = None):
    """Log a failed stage."""
    record = ErrorRecord(
        timestamp=datetime.now(),
        stage=stage,
        expression=expression[:100],
        error_kind=error_kind,
        message=message,
        position=position
    )
    _trace_log.append(record)
    logger.warning(f"❌ {stage} failed [{error_kind}]: {message}")


def get_trace() -> List[TraceRecord]:
    """Get the full trace log."""
    return list(_trace_log)


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_stage_records() -> List[StageRecord]:
    """Get all completed stage records."""
    return [r for r in _trace_log if isinstance(r, StageRecord)]


def get_error_records() -> List[ErrorRecord]:
    """Get all error records."""
    return [r for r in _trace_log if isinstance(r, ErrorRecord)]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["\n=== Calculation Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        if isinstance(record, StageRecord):
            lines.append(
                f"[{timestamp}] {record.stage.upper()}: {record.outcome[:150]} ({record.duration_ms:.3f}ms)")
        elif isinstance(record, ErrorRecord):
            where = f" at {record.position}" if record.position is not None else ""
            lines.append(
                f"[{timestamp}] ERROR in {record.stage}: {record.error_kind}{where}")

    return "\n".join(lines)
