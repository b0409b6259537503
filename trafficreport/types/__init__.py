"""Record, projection and enum types used across trafficreport."""

from trafficreport.types.base import (
    BaseValidationError,
    Severity,
    ValidationResultSource,
)
from trafficreport.types.dto import (
    CoverageView,
    ErrorCatalogEntry,
    OperationErrorGroup,
    RenderedIssueDetail,
    RenderingSnapshot,
    RenderingView,
)
from trafficreport.types.records import (
    CoverageRecord,
    IssueDetail,
    OperationContext,
    RuntimeException,
    ValidationIssue,
)

__all__ = [
    "BaseValidationError",
    "Severity",
    "ValidationResultSource",
    "CoverageView",
    "ErrorCatalogEntry",
    "OperationErrorGroup",
    "RenderedIssueDetail",
    "RenderingSnapshot",
    "RenderingView",
    "CoverageRecord",
    "IssueDetail",
    "OperationContext",
    "RuntimeException",
    "ValidationIssue",
]
