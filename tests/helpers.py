"""Shared builders and fakes for trafficreport tests."""

from __future__ import annotations

from typing import List, Optional, Sequence

from trafficreport.types.records import (
    IssueDetail,
    OperationContext,
    RuntimeException,
    ValidationIssue,
)

CATALOG_LOCATION = "https://example.test/error-definitions.json"


class StaticLoader:
    """Content loader returning fixed text (or raising) and recording calls."""

    def __init__(self, text: Optional[str] = None, error: Optional[Exception] = None):
        self.text = text
        self.error = error
        self.calls: List[str] = []

    async def load(self, location: str) -> str:
        self.calls.append(location)
        if self.error is not None:
            raise self.error
        assert self.text is not None
        return self.text


def make_issue(
    operation_id: Optional[str],
    codes: Sequence[str] = (),
    payload: Optional[str] = None,
    exceptions: Sequence[str] = (),
) -> ValidationIssue:
    return ValidationIssue(
        operation_info=(
            OperationContext(operation_id=operation_id)
            if operation_id is not None
            else None
        ),
        errors=tuple(
            IssueDetail(code=code, message=f"{code} message", severity=1)
            for code in codes
        ),
        runtime_exceptions=tuple(
            RuntimeException(code=code, message=f"{code} raised") for code in exceptions
        ),
        payload_file_path=payload,
    )
