"""trafficreport: HTML reports for API traffic validation runs.

Joins per-operation validation issues with an error-code catalog, groups them
by operation, rewrites spec and payload paths into links, and renders the
result together with per-spec coverage statistics.

Primary API:
    ReportGenerator - Render and write the report for one run
    ResultAggregator - Build the report's view surface from raw results
    ReportOptions - Output path, labels and link settings

Example:
    from trafficreport import (
        CoverageRecord, ReportGenerator, ReportOptions, ValidationIssue,
    )

    issues = [ValidationIssue.from_dict(d) for d in raw_issues]
    coverage = [CoverageRecord.from_dict(d) for d in raw_coverage]
    ReportGenerator(issues, coverage, 0, ReportOptions(report_path="out.html")).generate()
"""

from __future__ import annotations

from trafficreport import cli, logging
from trafficreport._version import __version__
from trafficreport.aggregator import ResultAggregator, format_generated_date
from trafficreport.catalog import CatalogLoadResult, ErrorCatalogLoader, FileLoader
from trafficreport.config import ReportOptions
from trafficreport.links import LinkPolicy, rewrite_payload_link, rewrite_spec_link
from trafficreport.report import ReportGenerator
from trafficreport.types import (
    CoverageRecord,
    IssueDetail,
    OperationContext,
    RuntimeException,
    ValidationIssue,
)

__all__ = [
    # Version
    "__version__",
    # Records
    "ValidationIssue",
    "IssueDetail",
    "OperationContext",
    "RuntimeException",
    "CoverageRecord",
    # Report
    "ReportGenerator",
    "ReportOptions",
    "ResultAggregator",
    "format_generated_date",
    # Catalog
    "ErrorCatalogLoader",
    "CatalogLoadResult",
    "FileLoader",
    # Links
    "LinkPolicy",
    "rewrite_payload_link",
    "rewrite_spec_link",
    # Utilities
    "cli",
    "logging",
]
