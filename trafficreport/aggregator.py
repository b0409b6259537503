"""Aggregation of validation and coverage results into rendering views.

:class:`ResultAggregator` owns the raw records of one report generation. A
single asynchronous preparation pass joins issues with the error catalog,
rewrites links, and freezes the outcome into a :class:`RenderingSnapshot`.
Every getter is a pure projection over that snapshot (or over the raw
records), so getters may be called in any order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence

from trafficreport.catalog import CatalogLoadResult, ErrorCatalogLoader
from trafficreport.config import ReportOptions
from trafficreport.links import LinkPolicy
from trafficreport.logging import get_logger
from trafficreport.types.dto import (
    CoverageView,
    OperationErrorGroup,
    RenderedIssueDetail,
    RenderingSnapshot,
    RenderingView,
)
from trafficreport.types.records import CoverageRecord, ValidationIssue

logger = get_logger(__name__)

UNKNOWN_API_VERSION = "unknown"


def sort_by_operation_id(issues: Iterable[ValidationIssue]) -> List[ValidationIssue]:
    """Return a copy ordered by operation id; equal ids keep input order."""
    return sorted(issues, key=lambda issue: issue.operation_id)


def build_rendering_view(
    issue: ValidationIssue, catalog: CatalogLoadResult, links: LinkPolicy
) -> RenderingView:
    """Join one issue with catalog entries and its rewritten payload link."""
    payload_link, payload_label = links.payload_link(issue.payload_file_path)
    details = tuple(
        RenderedIssueDetail.from_detail(
            detail, catalog.lookup(detail.code), payload_link, payload_label
        )
        for detail in issue.errors
    )
    return RenderingView(
        operation_info=issue.operation_info,
        errors=issue.errors,
        errors_for_rendering=details,
        runtime_exceptions=issue.runtime_exceptions,
        payload_file_path=payload_link,
        payload_file_link_label=payload_label,
    )


def build_coverage_view(record: CoverageRecord, links: LinkPolicy) -> CoverageView:
    spec_link, spec_label = links.spec_link(record.spec)
    return CoverageView(
        spec=spec_link,
        spec_link_label=spec_label,
        api_version=record.api_version,
        covered_operations=record.covered_operations,
        validation_pass_operations=(
            record.covered_operations - record.validation_fail_operations
        ),
        validation_fail_operations=record.validation_fail_operations,
        uncovered_operations=record.uncovered_operations,
        uncovered_operations_list=record.uncovered_operations_list,
        uncovered_operations_list_gen=record.uncovered_operations_list_gen,
        total_operations=record.total_operations,
        coverage_rate=record.coverage_rate,
    )


def general_errors(views: Iterable[RenderingView]) -> List[RenderingView]:
    """Keep only views carrying at least one issue detail."""
    return [view for view in views if len(view.errors) > 0]


def group_by_operation(views: Iterable[RenderingView]) -> List[OperationErrorGroup]:
    """Merge views sharing an operation id, in first-seen order."""
    members: Dict[str, List[RenderingView]] = {}
    order: List[str] = []
    for view in views:
        key = view.operation_id
        if key not in members:
            members[key] = []
            order.append(key)
        members[key].append(view)

    groups: List[OperationErrorGroup] = []
    for key in order:
        inner = members[key]
        details: List[RenderedIssueDetail] = []
        for view in inner:
            details.extend(view.errors_for_rendering)
        groups.append(
            OperationErrorGroup(
                operation_info=inner[0].operation_info,
                general_errors_inner=tuple(inner),
                error_code_len=sum(view.error_code_len for view in inner),
                errors_for_rendering=tuple(details),
            )
        )
    return groups


def format_generated_date(value: datetime) -> str:
    """Format as ``YYYY-MM-DD at H:MM{AM|PM}``.

    Hours stay in 24-hour form; the suffix switches to PM from 13:00, so
    ``14:07`` renders as ``14:07PM``. Existing reports rely on this output.
    """
    suffix = "AM" if value.hour < 13 else "PM"
    return (
        f"{value.year}-{value.month:02d}-{value.day:02d} at "
        f"{value.hour}:{value.minute:02d}{suffix}"
    )


class ResultAggregator:
    """Owns the raw results of one run and exposes the report's view surface.

    Args:
        validation_results: Raw validation issues, in any order.
        coverage_results: Raw per-spec coverage records.
        undefined_operation_count: Exchanges matching no spec operation.
        package_name: Package label for the report header.
        language: Language label for the report header.
        link_policy: Link override settings; defaults to pass-through links.
        output_exception_in_report: Whether runtime exceptions are surfaced.
        catalog_loader: Error catalog source; defaults to the public catalog.
        generated_date: Creation timestamp; defaults to now (local time).
    """

    def __init__(
        self,
        validation_results: Sequence[ValidationIssue],
        coverage_results: Sequence[CoverageRecord],
        undefined_operation_count: int = 0,
        package_name: str = "",
        language: str = "",
        link_policy: Optional[LinkPolicy] = None,
        output_exception_in_report: bool = False,
        catalog_loader: Optional[ErrorCatalogLoader] = None,
        generated_date: Optional[datetime] = None,
    ):
        self.package = package_name
        self.language = language
        self.undefined_operation_count = undefined_operation_count
        self.generated_date = generated_date if generated_date else datetime.now()
        self.api_version = UNKNOWN_API_VERSION
        self.operation_validated = 0
        self.operation_failed = 0
        self.operation_unvalidated = 0

        self._validation_results = list(validation_results)
        self._coverage_results = list(coverage_results)
        self._links = link_policy if link_policy is not None else LinkPolicy()
        self._output_exception_in_report = output_exception_in_report
        self._catalog_loader = (
            catalog_loader if catalog_loader is not None else ErrorCatalogLoader()
        )
        self._snapshot = RenderingSnapshot(complete=False)

        self._set_metrics()
        self._sorted_validation_results = sort_by_operation_id(
            self._validation_results
        )

    @classmethod
    def from_options(
        cls,
        validation_results: Sequence[ValidationIssue],
        coverage_results: Sequence[CoverageRecord],
        undefined_operation_count: int,
        options: ReportOptions,
        catalog_loader: Optional[ErrorCatalogLoader] = None,
        generated_date: Optional[datetime] = None,
    ) -> "ResultAggregator":
        if catalog_loader is None:
            catalog_loader = ErrorCatalogLoader(options.error_definitions_location)
        return cls(
            validation_results,
            coverage_results,
            undefined_operation_count=undefined_operation_count,
            package_name=options.sdk_package,
            language=options.sdk_language,
            link_policy=LinkPolicy.from_options(options),
            output_exception_in_report=options.output_exception_in_report,
            catalog_loader=catalog_loader,
            generated_date=generated_date,
        )

    def _set_metrics(self) -> None:
        if self._coverage_results:
            self.api_version = (
                self._coverage_results[0].api_version or UNKNOWN_API_VERSION
            )
        for record in self._coverage_results:
            self.operation_validated += record.covered_operations
            self.operation_failed += record.validation_fail_operations
            self.operation_unvalidated += record.uncovered_operations

    @property
    def snapshot(self) -> RenderingSnapshot:
        return self._snapshot

    @property
    def validation_results_for_rendering(self) -> List[RenderingView]:
        return list(self._snapshot.validation_results_for_rendering)

    @property
    def coverage_results_for_rendering(self) -> List[CoverageView]:
        return list(self._snapshot.coverage_results_for_rendering)

    async def prepare_rendering_views(self) -> RenderingSnapshot:
        """Fetch the catalog, then build every rendering view.

        Failures are logged and swallowed. Views built before a failure are
        kept and the snapshot is marked incomplete.
        """
        views: List[RenderingView] = []
        coverage: List[CoverageView] = []
        complete = False
        try:
            catalog = await self._catalog_loader.load()
            if not catalog.ok:
                logger.warning(
                    f"Error definitions unavailable, report will not be enriched: "
                    f"{catalog.error}"
                )
            for issue in self._sorted_validation_results:
                views.append(build_rendering_view(issue, catalog, self._links))
            for record in self._coverage_results:
                coverage.append(build_coverage_view(record, self._links))
            complete = True
        except Exception as e:
            logger.exception(f"Failed to prepare rendering views: {e}")

        self._snapshot = RenderingSnapshot(
            validation_results_for_rendering=tuple(views),
            coverage_results_for_rendering=tuple(coverage),
            complete=complete,
        )
        logger.debug(
            f"Prepared {len(views)} validation views and {len(coverage)} coverage views"
        )
        return self._snapshot

    def format_generated_date(self) -> str:
        return format_generated_date(self.generated_date)

    def get_total_errors(self) -> int:
        return len(self._validation_results)

    def get_general_errors(self) -> List[RenderingView]:
        return general_errors(self._snapshot.validation_results_for_rendering)

    def get_general_errors_grouped_by_operation(self) -> List[OperationErrorGroup]:
        return group_by_operation(self.get_general_errors())

    def get_total_general_errors(self) -> int:
        return len(self.get_general_errors())

    def get_run_time_errors(self) -> List[ValidationIssue]:
        """Issues with runtime exceptions; always empty when output is disabled."""
        if not self._output_exception_in_report:
            return []
        return [
            issue
            for issue in self._sorted_validation_results
            if len(issue.runtime_exceptions) > 0
        ]

    def get_total_run_time_errors(self) -> int:
        return len(self.get_run_time_errors())

    def template_context(self) -> Dict[str, Any]:
        """Collect public fields and getter results for the template."""
        return {
            "view": self,
            "package": self.package,
            "language": self.language,
            "api_version": self.api_version,
            "generated_date": self.format_generated_date(),
            "undefined_operation_count": self.undefined_operation_count,
            "operation_validated": self.operation_validated,
            "operation_failed": self.operation_failed,
            "operation_unvalidated": self.operation_unvalidated,
            "validation_results_for_rendering": self.validation_results_for_rendering,
            "coverage_results_for_rendering": self.coverage_results_for_rendering,
            "general_errors": self.get_general_errors(),
            "general_errors_grouped": self.get_general_errors_grouped_by_operation(),
            "run_time_errors": self.get_run_time_errors(),
            "total_errors": self.get_total_errors(),
            "total_general_errors": self.get_total_general_errors(),
            "total_run_time_errors": self.get_total_run_time_errors(),
            "rendering_complete": self._snapshot.complete,
        }
