"""Error Hierarchy — typed, categorized errors for all Ignite failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are RETURNED by ledger operations, never raised across
      the service boundary; the HTTP shell raises them for the global handler
    - Infrastructure errors (500-level) are raised normally
    - to_response() produces the REST envelope

Design Decisions:
    - Single hierarchy with IgniteError base: FastAPI global handler catches all (ADR: uniform error shape)
    - Errors double as typed results: a failed operation hands back the instance,
      callers branch with isinstance() — no partial state, no exception unwinding in the core
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    IDENTITY = "identity"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    participant_id: str | None = None
    spark_id: str | None = None


class IgniteError(Exception):
    """Base exception for all Ignite errors."""

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
                    "participant_id": self.context.participant_id,
                    "spark_id": self.context.spark_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotRegisteredError(IgniteError):
    """Actor is unknown to the identity registry."""
    def __init__(self, participant_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(participant_id=participant_id)
        super().__init__(
            "Not verified", "NOT_REGISTERED", ErrorCategory.IDENTITY,
            ErrorSeverity.ERROR, ctx, 403,
        )
        self.participant_id = participant_id


class PolicyValidationError(IgniteError):
    """Title, description, goal or amount outside policy bounds."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class SparkNotFoundError(IgniteError):
    """Spark id does not exist in the store."""
    def __init__(self, spark_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(spark_id=spark_id)
        super().__init__(
            "Spark not found", "SPARK_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.spark_id = spark_id


class SparkNotActiveError(IgniteError):
    """Pledge attempted against a spark that already ignited."""
    def __init__(self, spark_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(spark_id=spark_id)
        super().__init__(
            "Spark already ignited", "SPARK_NOT_ACTIVE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.spark_id = spark_id


class SelfBackingForbiddenError(IgniteError):
    """Creator attempted to back their own spark."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Can't back your own spark", "SELF_BACKING_FORBIDDEN",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, context, 403,
        )


class InsufficientFundsError(IgniteError):
    """Debit would drive the balance negative."""
    def __init__(
        self, balance: int, requested: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Insufficient balance", "INSUFFICIENT_FUNDS",
            ErrorCategory.BUSINESS_RULE, ErrorSeverity.ERROR, context, 402,
        )
        self.balance = balance
        self.requested = requested


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(IgniteError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class SmsNotConfiguredError(IgniteError):
    """Outbound SMS credentials are missing."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "SMS not configured", "SMS_NOT_CONFIGURED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 503,
        )


class SmsDeliveryError(IgniteError):
    """SMS provider rejected or failed the request."""
    def __init__(
        self, message: str, status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "SMS_DELIVERY_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, context, 502,
        )
        self.status_code = status_code
