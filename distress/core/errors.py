"""Error Hierarchy — typed, categorized exceptions for all Distress failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Malformed input is the only domain failure; it is never retried
    - to_response() produces the REST envelope shared by every API error
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with DistressError base: API handler and CLI catch one type
    - ErrorContext as dataclass: line/column observability without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    source: str | None = None
    line_number: int | None = None
    column: int | None = None


class DistressError(Exception):
    """Base exception for all Distress errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "source": self.context.source,
                    "line_number": self.context.line_number,
                    "column": self.context.column,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class MalformedInputError(DistressError):
    """Input text does not describe a valid packet corpus."""
    def __init__(
        self,
        message: str,
        code: str = "MALFORMED_INPUT",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class MalformedPacketError(MalformedInputError):
    """A packet line does not match the nested-list grammar."""
    def __init__(
        self,
        reason: str,
        column: int,
        line_number: int | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.column = column
        ctx.line_number = line_number
        where = f"line {line_number}, column {column}" if line_number else f"column {column}"
        super().__init__(
            f"Malformed packet at {where}: {reason}",
            "MALFORMED_PACKET", ctx,
        )
        self.reason = reason
        self.column = column
        self.line_number = line_number

    def at_line(self, line_number: int) -> "MalformedPacketError":
        """Same failure, located on a line of a larger corpus."""
        return MalformedPacketError(
            self.reason, self.column, line_number, self.context,
        )


class UnpairedPacketError(MalformedInputError):
    """Pairwise evaluation requires an even number of packets."""
    def __init__(self, packet_count: int, context: ErrorContext | None = None):
        super().__init__(
            f"Packets must come in pairs; got {packet_count} packet(s).",
            "UNPAIRED_PACKET", context,
        )
        self.packet_count = packet_count
