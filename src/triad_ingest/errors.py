# ABOUTME: Exception hierarchy and non-fatal diagnostics for the game data pipeline
# ABOUTME: Fatal errors abort a load attempt, diagnostics are recorded and logged but never block completion

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class GameDataError(Exception):
    """Base exception for fatal game data errors.

    Any subclass raised by a parser stage aborts the current load attempt.
    """

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.context = context


class SchemaMismatchError(GameDataError):
    """Raised when a host table is missing or its row count/shape differs from what we expect."""

    pass


class CrossReferenceMismatchError(GameDataError):
    """Raised when an id from one table fails to resolve against another table or catalogue."""

    pass


class IndexDriftError(GameDataError):
    """Raised when card ids drift too far from the host row order."""

    pass


class EmptyDatasetError(GameDataError):
    """Raised when a required host table has no usable rows."""

    pass


class DiagnosticKind(str, Enum):
    """Kinds of non-fatal problems recorded during a load."""

    REFERENCE_WARNING = "reference_warning"
    CROSS_REFERENCE_MISMATCH = "cross_reference_mismatch"
    MISSING_ACHIEVEMENT = "missing_achievement"


class Diagnostic(BaseModel):
    """A single non-fatal problem found while loading."""

    kind: DiagnosticKind
    message: str
    context: dict[str, Any] = Field(default_factory=dict)
