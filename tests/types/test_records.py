"""Tests for record parsing from the upstream JSON shape."""

from trafficreport.types import (
    BaseValidationError,
    CoverageRecord,
    IssueDetail,
    Severity,
    ValidationIssue,
    ValidationResultSource,
)


def test_validation_issue_from_camel_case_dict() -> None:
    issue = ValidationIssue.from_dict(
        {
            "operationInfo": {"operationId": "Ops_list", "apiVersion": "2021-01-01"},
            "errors": [
                {
                    "code": "INVALID_TYPE",
                    "message": "Expected type string but found integer",
                    "severity": 1,
                    "schemaPath": "#/properties/name/type",
                    "pathsInPayload": ["/name"],
                    "jsonPathsInPayload": ["$.name"],
                    "source": "response",
                    "params": ["string", "integer"],
                }
            ],
            "runtimeExceptions": [{"code": "TIMEOUT", "message": "timed out"}],
            "payloadFilePath": "/runs/run1/list.json",
        }
    )
    assert issue.operation_id == "Ops_list"
    assert issue.operation_info.api_version == "2021-01-01"
    (detail,) = issue.errors
    assert detail.severity is Severity.ERROR
    assert detail.paths_in_payload == ("/name",)
    assert detail.json_paths_in_payload == ("$.name",)
    assert detail.params == ["string", "integer"]
    assert issue.runtime_exceptions[0].code == "TIMEOUT"
    assert issue.payload_file_path == "/runs/run1/list.json"


def test_validation_issue_with_missing_fields() -> None:
    issue = ValidationIssue.from_dict({})
    assert issue.operation_info is None
    assert issue.operation_id == ""
    assert issue.errors == ()
    assert issue.runtime_exceptions == ()
    assert issue.payload_file_path is None


def test_coverage_record_accepts_upstream_spelling() -> None:
    record = CoverageRecord.from_dict(
        {
            "spec": "specification/a.json",
            "apiVersion": "2021-01-01",
            "coveredOperaions": 5,
            "validationFailOperations": 1,
            "unCoveredOperations": 5,
            "unCoveredOperationsList": [{"operationId": "Ops_delete"}],
            "totalOperations": 10,
            "coverageRate": 0.5,
        }
    )
    assert record.covered_operations == 5
    assert record.validation_fail_operations == 1
    assert record.uncovered_operations_list == ({"operationId": "Ops_delete"},)
    assert record.coverage_rate == 0.5


def test_severity_coercion_keeps_unknown_values() -> None:
    assert Severity.coerce(2) is Severity.WARNING
    assert Severity.coerce("information") is Severity.INFORMATION
    assert Severity.coerce(42) == 42
    assert Severity.coerce("custom") == "custom"
    assert Severity.coerce(None) is None
    assert IssueDetail.from_dict({"code": "X", "severity": "Verbose"}).severity is (
        Severity.VERBOSE
    )


def test_base_validation_error_is_data_only() -> None:
    err = BaseValidationError(
        severity=Severity.CRITICAL,
        error_code="RESPONSE_STATUS_CODE_NOT_IN_SPEC",
        source=ValidationResultSource.RESPONSE,
        count=3,
    )
    assert err.error_details is None
    assert err.source.value == "response"
    assert err == BaseValidationError(
        Severity.CRITICAL,
        "RESPONSE_STATUS_CODE_NOT_IN_SPEC",
        None,
        ValidationResultSource.RESPONSE,
        3,
    )


def test_null_identity_fields_are_treated_as_missing() -> None:
    issue = ValidationIssue.from_dict(
        {
            "operationInfo": {"operationId": None, "apiVersion": None},
            "errors": [{"code": None, "message": None, "schemaPath": None}],
            "runtimeExceptions": [{"code": None}],
            "payloadFilePath": None,
        }
    )
    assert issue.operation_id == ""
    assert issue.operation_info.api_version is None
    (detail,) = issue.errors
    assert detail.code == ""
    assert detail.message == ""
    assert detail.schema_path is None
    assert issue.runtime_exceptions[0].code == ""
    assert issue.payload_file_path is None


def test_coverage_record_null_values_fall_back_to_defaults() -> None:
    record = CoverageRecord.from_dict(
        {
            "spec": "a.json",
            "apiVersion": None,
            "coveredOperaions": None,
            "validationFailOperations": None,
            "unCoveredOperations": None,
            "unCoveredOperationsList": None,
            "totalOperations": None,
            "coverageRate": None,
        }
    )
    assert record == CoverageRecord(spec="a.json")


def test_coverage_record_keeps_generated_uncovered_list() -> None:
    record = CoverageRecord.from_dict(
        {
            "spec": "a.json",
            "unCoveredOperationsListGen": [
                {"operationIdList": ["Ops_delete"], "key": "Ops"}
            ],
        }
    )
    assert record.uncovered_operations_list_gen == (
        {"operationIdList": ["Ops_delete"], "key": "Ops"},
    )
