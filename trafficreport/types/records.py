"""Raw records produced by the traffic validation run.

These are consumed as-is: the aggregator never re-validates their internal
consistency. ``from_dict`` accepts the camelCase JSON emitted by the upstream
validator and tolerates missing optional fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from trafficreport.types.base import Severity


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the value of the first key present in ``data``.

    An explicit ``None`` (JSON ``null``) counts as absent.
    """
    for key in keys:
        value = data.get(key)
        if value is not None:
            return value
    return default


def _as_tuple(value: Any) -> Tuple[Any, ...]:
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return (value,)


@dataclass(frozen=True)
class OperationContext:
    """Identity of the API operation a validation issue belongs to."""

    operation_id: str
    api_version: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OperationContext":
        return cls(
            operation_id=str(_pick(data, "operation_id", "operationId", default="")),
            api_version=_pick(data, "api_version", "apiVersion"),
        )


@dataclass(frozen=True)
class IssueDetail:
    """One rule violation inside a :class:`ValidationIssue`.

    Attributes:
        code: Error code; join key into the error catalog.
        message: Human-readable message from the validator.
        severity: Severity (a :class:`Severity` when recognized).
        schema_path: Path of the violated rule inside the schema.
        paths_in_payload: Payload locations, in slash form.
        json_paths_in_payload: Payload locations, in JSONPath form.
        source: Where the issue was raised (request/response).
        params: Arbitrary validator parameters.
    """

    code: str
    message: str = ""
    severity: Any = None
    schema_path: Optional[str] = None
    paths_in_payload: Tuple[str, ...] = ()
    json_paths_in_payload: Tuple[str, ...] = ()
    source: Any = None
    params: Any = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "IssueDetail":
        return cls(
            code=str(_pick(data, "code", default="")),
            message=_pick(data, "message", default="") or "",
            severity=Severity.coerce(_pick(data, "severity")),
            schema_path=_pick(data, "schema_path", "schemaPath"),
            paths_in_payload=_as_tuple(
                _pick(data, "paths_in_payload", "pathsInPayload")
            ),
            json_paths_in_payload=_as_tuple(
                _pick(data, "json_paths_in_payload", "jsonPathsInPayload")
            ),
            source=_pick(data, "source"),
            params=_pick(data, "params"),
        )


@dataclass(frozen=True)
class RuntimeException:
    """Exception raised while validating one exchange."""

    code: str
    message: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RuntimeException":
        return cls(
            code=str(_pick(data, "code", default="")),
            message=_pick(data, "message", default="") or "",
        )


@dataclass(frozen=True)
class ValidationIssue:
    """Validation outcome for one operation exchange.

    Several records may carry the same operation id; consumers merge them.
    """

    operation_info: Optional[OperationContext] = None
    errors: Tuple[IssueDetail, ...] = ()
    runtime_exceptions: Tuple[RuntimeException, ...] = ()
    payload_file_path: Optional[str] = None

    @property
    def operation_id(self) -> str:
        """Operation identity, empty when the record carries none."""
        if self.operation_info is None:
            return ""
        return self.operation_info.operation_id

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ValidationIssue":
        op_info = _pick(data, "operation_info", "operationInfo")
        return cls(
            operation_info=(
                OperationContext.from_dict(op_info)
                if isinstance(op_info, Mapping)
                else None
            ),
            errors=tuple(
                IssueDetail.from_dict(e)
                for e in _as_tuple(_pick(data, "errors"))
            ),
            runtime_exceptions=tuple(
                RuntimeException.from_dict(e)
                for e in _as_tuple(
                    _pick(data, "runtime_exceptions", "runtimeExceptions")
                )
            ),
            payload_file_path=_pick(data, "payload_file_path", "payloadFilePath"),
        )


@dataclass(frozen=True)
class CoverageRecord:
    """Coverage summary for one specification document.

    ``coverage_rate`` is trusted from input; it is never recomputed here.
    """

    spec: Optional[str] = None
    api_version: Optional[str] = None
    covered_operations: int = 0
    validation_fail_operations: int = 0
    uncovered_operations: int = 0
    uncovered_operations_list: Tuple[Any, ...] = ()
    uncovered_operations_list_gen: Tuple[Any, ...] = ()
    total_operations: int = 0
    coverage_rate: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CoverageRecord":
        return cls(
            spec=_pick(data, "spec"),
            api_version=_pick(data, "api_version", "apiVersion"),
            covered_operations=int(
                _pick(
                    data,
                    "covered_operations",
                    "coveredOperations",
                    "coveredOperaions",
                    default=0,
                )
            ),
            validation_fail_operations=int(
                _pick(
                    data,
                    "validation_fail_operations",
                    "validationFailOperations",
                    default=0,
                )
            ),
            uncovered_operations=int(
                _pick(data, "uncovered_operations", "unCoveredOperations", default=0)
            ),
            uncovered_operations_list=_as_tuple(
                _pick(data, "uncovered_operations_list", "unCoveredOperationsList")
            ),
            uncovered_operations_list_gen=_as_tuple(
                _pick(
                    data, "uncovered_operations_list_gen", "unCoveredOperationsListGen"
                )
            ),
            total_operations=int(
                _pick(data, "total_operations", "totalOperations", default=0)
            ),
            coverage_rate=float(
                _pick(data, "coverage_rate", "coverageRate", default=0.0)
            ),
        )
