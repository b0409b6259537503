"""HTML report generation for traffic validation results.

Builds a :class:`ResultAggregator`, waits for its rendering views, renders the
Jinja2 layout against the aggregator's view surface and writes the result.
"""

from __future__ import annotations

import asyncio
from importlib import resources
from pathlib import Path
from typing import Optional, Sequence

import jinja2

from trafficreport.aggregator import ResultAggregator
from trafficreport.catalog import ErrorCatalogLoader
from trafficreport.config import ReportOptions
from trafficreport.logging import get_logger
from trafficreport.types.records import CoverageRecord, ValidationIssue
from trafficreport.utils.output_paths import ensure_parent_dir

logger = get_logger(__name__)

DEFAULT_TEMPLATE = "base_layout.html.j2"


def load_default_template() -> str:
    """Return the packaged report layout."""
    return (
        resources.files("trafficreport.templates")
        .joinpath(DEFAULT_TEMPLATE)
        .read_text(encoding="utf-8")
    )


def render_template(template_text: str, aggregator: ResultAggregator) -> str:
    """Render ``template_text`` with the aggregator's template context.

    Values are HTML-escaped.
    """
    env = jinja2.Environment(
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    return env.from_string(template_text).render(**aggregator.template_context())


class ReportGenerator:
    """Generate the HTML report for one traffic validation run.

    Args:
        validation_results: Raw validation issues.
        coverage_results: Raw per-spec coverage records.
        undefined_operation_count: Exchanges matching no spec operation.
        options: Report options; ``report_path`` is resolved against the CWD.
        catalog_loader: Optional catalog source overriding the options' location.
        template_text: Optional template text; else ``options.template_path``,
            else the packaged layout.
    """

    def __init__(
        self,
        validation_results: Sequence[ValidationIssue],
        coverage_results: Sequence[CoverageRecord],
        undefined_operation_count: int,
        options: ReportOptions,
        catalog_loader: Optional[ErrorCatalogLoader] = None,
        template_text: Optional[str] = None,
    ):
        self.validation_results = list(validation_results)
        self.coverage_results = list(coverage_results)
        self.undefined_operation_count = undefined_operation_count
        self.options = options
        self.report_path = Path(options.report_path).resolve()
        self._catalog_loader = catalog_loader
        self._template_text = template_text

    def load_template(self) -> str:
        if self._template_text is not None:
            return self._template_text
        if self.options.template_path:
            return Path(self.options.template_path).read_text(encoding="utf-8")
        return load_default_template()

    async def generate_html_report(self) -> Path:
        """Render the report and write it, replacing any existing file.

        Returns:
            The path of the written report.
        """
        template = self.load_template()
        aggregator = ResultAggregator.from_options(
            self.validation_results,
            self.coverage_results,
            self.undefined_operation_count,
            self.options,
            catalog_loader=self._catalog_loader,
        )
        await aggregator.prepare_rendering_views()

        logger.debug(f"General errors: {aggregator.get_total_general_errors()}")
        logger.debug(f"Runtime errors: {aggregator.get_total_run_time_errors()}")
        logger.debug(
            "Operations with general errors: "
            f"{len(aggregator.get_general_errors_grouped_by_operation())}"
        )

        text = render_template(template, aggregator)
        ensure_parent_dir(self.report_path)
        self.report_path.write_text(text, encoding="utf-8")
        logger.info(f"Report saved to: {self.report_path}")
        return self.report_path

    def generate(self) -> Path:
        """Synchronous wrapper around :meth:`generate_html_report`."""
        return asyncio.run(self.generate_html_report())
