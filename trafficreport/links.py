"""Rewrite spec and payload file paths into browsable report links.

All functions are pure. A ``None`` path yields ``(None, None)``: nothing to
link, nothing to label.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from trafficreport.config import ReportOptions

#: Path component marking the root of the specification tree.
SPEC_ROOT_MARKER = "specification"

Link = Tuple[Optional[str], Optional[str]]


def normalize_prefix(prefix: str) -> str:
    """Drop a single trailing ``/`` from a link prefix."""
    if prefix.endswith("/"):
        return prefix[:-1]
    return prefix


def link_label(raw_path: Optional[str]) -> Optional[str]:
    """Return the substring after the last ``/`` (the whole path if none)."""
    if raw_path is None:
        return None
    return raw_path[raw_path.rfind("/") + 1 :]


def _payload_link(raw_path: Optional[str], override_enabled: bool, prefix: str) -> Link:
    if raw_path is None:
        return None, None
    label = link_label(raw_path)
    if not override_enabled:
        return raw_path, label
    return f"{prefix}/{label}", label


def _spec_link(raw_path: Optional[str], override_enabled: bool, prefix: str) -> Link:
    if raw_path is None:
        return None, None
    label = link_label(raw_path)
    if not override_enabled:
        return raw_path, label
    start = raw_path.find(SPEC_ROOT_MARKER)
    tail = raw_path[start:] if start >= 0 else raw_path
    return f"{prefix}/{tail}", label


def rewrite_payload_link(
    raw_path: Optional[str], override_enabled: bool, prefix: str
) -> Link:
    """Return ``(link, label)`` for a payload file.

    With override enabled the link is ``prefix/<label>``, after one trailing
    ``/`` is dropped from ``prefix``.
    """
    if override_enabled:
        prefix = normalize_prefix(prefix)
    return _payload_link(raw_path, override_enabled, prefix)


def rewrite_spec_link(
    raw_path: Optional[str], override_enabled: bool, prefix: str
) -> Link:
    """Return ``(link, label)`` for a specification file.

    With override enabled the link is ``prefix/`` followed by ``raw_path`` from
    its first :data:`SPEC_ROOT_MARKER`; the full path is kept when the marker
    is missing. One trailing ``/`` is dropped from ``prefix`` first.
    """
    if override_enabled:
        prefix = normalize_prefix(prefix)
    return _spec_link(raw_path, override_enabled, prefix)


@dataclass(frozen=True)
class LinkPolicy:
    """Link override settings with prefixes normalized once, at construction.

    Prefixes are left untouched when overriding is disabled.
    """

    override_enabled: bool = False
    spec_link_prefix: str = ""
    payload_link_prefix: str = ""

    def __post_init__(self) -> None:
        if self.override_enabled:
            object.__setattr__(
                self, "spec_link_prefix", normalize_prefix(self.spec_link_prefix)
            )
            object.__setattr__(
                self, "payload_link_prefix", normalize_prefix(self.payload_link_prefix)
            )

    @classmethod
    def from_options(cls, options: ReportOptions) -> "LinkPolicy":
        return cls(
            override_enabled=options.override_link_in_report,
            spec_link_prefix=options.spec_link_prefix or "",
            payload_link_prefix=options.payload_link_prefix or "",
        )

    def payload_link(self, raw_path: Optional[str]) -> Link:
        return _payload_link(raw_path, self.override_enabled, self.payload_link_prefix)

    def spec_link(self, raw_path: Optional[str]) -> Link:
        return _spec_link(raw_path, self.override_enabled, self.spec_link_prefix)
