"""Configuration for report generation."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from trafficreport.utils.yaml_utils import normalize_yaml_dict_keys

# Error catalog maintained alongside the validator documentation
DEFAULT_ERROR_DEFINITIONS_URL = (
    "https://github.com/Azure/oav/blob/develop/documentation/error-definitions.json"
)

DEFAULT_REPORT_PATH = "report.html"

# Upstream (camelCase) option names accepted in config files
_OPTION_ALIASES: Dict[str, str] = {
    "reportPath": "report_path",
    "sdkPackage": "sdk_package",
    "sdkLanguage": "sdk_language",
    "overrideLinkInReport": "override_link_in_report",
    "outputExceptionInReport": "output_exception_in_report",
    "specLinkPrefix": "spec_link_prefix",
    "payloadLinkPrefix": "payload_link_prefix",
    "errorDefinitionsLocation": "error_definitions_location",
    "templatePath": "template_path",
}


@dataclass
class ReportOptions:
    """Caller-supplied options for one report generation.

    Attributes:
        report_path: Destination of the rendered report.
        sdk_package: Package label shown in the report header.
        sdk_language: Language label shown in the report header.
        override_link_in_report: Rewrite spec/payload paths under the prefixes.
        output_exception_in_report: Surface runtime exceptions in the report.
        spec_link_prefix: Base URL for spec links when overriding.
        payload_link_prefix: Base URL for payload links when overriding.
        error_definitions_location: URL or path of the error catalog.
        template_path: Optional template file replacing the packaged layout.
    """

    report_path: str = DEFAULT_REPORT_PATH
    sdk_package: str = ""
    sdk_language: str = ""
    override_link_in_report: bool = False
    output_exception_in_report: bool = False
    spec_link_prefix: str = ""
    payload_link_prefix: str = ""
    error_definitions_location: str = DEFAULT_ERROR_DEFINITIONS_URL
    template_path: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ReportOptions":
        """Build options from a mapping with snake_case or camelCase keys.

        Raises:
            ValueError: If a key is not a recognized option.
        """
        allowed = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in normalize_yaml_dict_keys(dict(data)).items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in allowed:
                raise ValueError(f"Unrecognized report option '{key}'")
            kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ReportOptions":
        """Parse options from a YAML document (empty documents give defaults)."""
        data = yaml.safe_load(yaml_str)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Report options YAML must map to a dictionary at top-level.")
        return cls.from_dict(data)

    @classmethod
    def from_file(cls, path: Path) -> "ReportOptions":
        return cls.from_yaml(path.read_text(encoding="utf-8"))
