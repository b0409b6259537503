"""Global pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest

from tests.helpers import CATALOG_LOCATION, StaticLoader, make_issue
from trafficreport.catalog import ErrorCatalogLoader
from trafficreport.types.records import CoverageRecord, ValidationIssue


@pytest.fixture
def catalog_doc() -> Dict[str, Any]:
    return {
        "ErrorDefinitions": [
            {
                "code": "INVALID_TYPE",
                "friendlyName": "Invalid type",
                "link": "https://docs.example.test/invalid-type",
            },
            {"code": "OBJECT_MISSING_REQUIRED_PROPERTY"},
        ]
    }


@pytest.fixture
def catalog_loader(catalog_doc) -> ErrorCatalogLoader:
    """Catalog loader serving ``catalog_doc`` without network access."""
    return ErrorCatalogLoader(CATALOG_LOCATION, StaticLoader(json.dumps(catalog_doc)))


@pytest.fixture
def failing_catalog_loader() -> ErrorCatalogLoader:
    return ErrorCatalogLoader(
        CATALOG_LOCATION, StaticLoader(error=ConnectionError("network down"))
    )


@pytest.fixture
def sample_issues() -> List[ValidationIssue]:
    """Three issues: two for ``Get`` (one without details), one for ``Put``."""
    return [
        make_issue("Put", ["INVALID_TYPE"], payload="/runs/run1/put_1.json"),
        make_issue(
            "Get",
            ["INVALID_TYPE", "OBJECT_MISSING_REQUIRED_PROPERTY"],
            payload="/runs/run1/get_1.json",
        ),
        make_issue("Get", [], payload="/runs/run1/get_2.json", exceptions=["TIMEOUT"]),
    ]


@pytest.fixture
def sample_coverage() -> List[CoverageRecord]:
    return [
        CoverageRecord(
            spec="/repo/specification/storage/stable/2021-01-01/storage.json",
            api_version="2021-01-01",
            covered_operations=5,
            validation_fail_operations=1,
            uncovered_operations=5,
            uncovered_operations_list=("Ops_list", "Ops_delete"),
            total_operations=10,
            coverage_rate=0.5,
        )
    ]
