"""Read-only projections handed to the template renderer.

All containers are frozen and rebuilt on every report generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from trafficreport.types.records import (
    IssueDetail,
    OperationContext,
    RuntimeException,
)


@dataclass(frozen=True)
class ErrorCatalogEntry:
    """Friendly name and documentation link for one error code."""

    code: str
    friendly_name: Optional[str] = None
    link: Optional[str] = None


@dataclass(frozen=True)
class RenderedIssueDetail:
    """An :class:`IssueDetail` joined with catalog data and payload links.

    Attributes:
        friendly_name: Catalog name for ``code``; None for unknown codes.
        link: Catalog documentation link; None for unknown codes.
        payload_file_path: Browsable link to the payload file.
        payload_file_link_label: Final path segment of the payload file.
    """

    code: str
    message: str
    severity: Any = None
    schema_path: Optional[str] = None
    paths_in_payload: Tuple[str, ...] = ()
    json_paths_in_payload: Tuple[str, ...] = ()
    source: Any = None
    params: Any = None
    friendly_name: Optional[str] = None
    link: Optional[str] = None
    payload_file_path: Optional[str] = None
    payload_file_link_label: Optional[str] = None

    @classmethod
    def from_detail(
        cls,
        detail: IssueDetail,
        entry: Optional[ErrorCatalogEntry],
        payload_file_path: Optional[str],
        payload_file_link_label: Optional[str],
    ) -> "RenderedIssueDetail":
        return cls(
            code=detail.code,
            message=detail.message,
            severity=detail.severity,
            schema_path=detail.schema_path,
            paths_in_payload=detail.paths_in_payload,
            json_paths_in_payload=detail.json_paths_in_payload,
            source=detail.source,
            params=detail.params,
            friendly_name=entry.friendly_name if entry is not None else None,
            link=entry.link if entry is not None else None,
            payload_file_path=payload_file_path,
            payload_file_link_label=payload_file_link_label,
        )


@dataclass(frozen=True)
class RenderingView:
    """One validation issue ready for template substitution."""

    operation_info: Optional[OperationContext]
    errors: Tuple[IssueDetail, ...]
    errors_for_rendering: Tuple[RenderedIssueDetail, ...]
    runtime_exceptions: Tuple[RuntimeException, ...] = ()
    payload_file_path: Optional[str] = None
    payload_file_link_label: Optional[str] = None

    @property
    def operation_id(self) -> str:
        if self.operation_info is None:
            return ""
        return self.operation_info.operation_id

    @property
    def error_code_len(self) -> int:
        return len(self.errors_for_rendering)


@dataclass(frozen=True)
class CoverageView:
    """One coverage record with its spec link rewritten."""

    spec: Optional[str]
    spec_link_label: Optional[str]
    api_version: Optional[str]
    covered_operations: int
    validation_pass_operations: int
    validation_fail_operations: int
    uncovered_operations: int
    uncovered_operations_list: Tuple[Any, ...]
    uncovered_operations_list_gen: Tuple[Any, ...]
    total_operations: int
    coverage_rate: float


@dataclass(frozen=True)
class OperationErrorGroup:
    """General errors of one operation merged across validation issues.

    Attributes:
        operation_info: Context of the first view seen for the operation.
        general_errors_inner: Member views, in first-seen order.
        error_code_len: Sum of member detail counts.
        errors_for_rendering: Member details concatenated in view order.
    """

    operation_info: Optional[OperationContext]
    general_errors_inner: Tuple[RenderingView, ...]
    error_code_len: int
    errors_for_rendering: Tuple[RenderedIssueDetail, ...]

    @property
    def operation_id(self) -> str:
        if self.operation_info is None:
            return ""
        return self.operation_info.operation_id


@dataclass(frozen=True)
class RenderingSnapshot:
    """Output of one preparation pass.

    ``complete`` is False until a preparation pass finishes, and stays False
    when preparation stopped early; views built before the failure are still
    present.
    """

    validation_results_for_rendering: Tuple[RenderingView, ...] = ()
    coverage_results_for_rendering: Tuple[CoverageView, ...] = ()
    complete: bool = False
