"""Utility helpers used across trafficreport.

This package contains small, self-contained utilities that do not depend on
project internals. Keep modules minimal and focused.
"""

from trafficreport.utils.output_paths import (
    blob_name_date_postfix,
    default_collection_file_name,
    default_env_file_name,
    default_newman_dir,
    default_newman_report,
    default_quality_report_file_path,
    get_file_name_from_path,
)

__all__ = [
    # Scenario artifact naming
    "default_quality_report_file_path",
    "default_collection_file_name",
    "default_env_file_name",
    "default_newman_report",
    "default_newman_dir",
    "get_file_name_from_path",
    "blob_name_date_postfix",
]
