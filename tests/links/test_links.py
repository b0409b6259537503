"""Tests for spec and payload link rewriting."""

from __future__ import annotations

import pytest

from trafficreport.config import ReportOptions
from trafficreport.links import (
    LinkPolicy,
    link_label,
    normalize_prefix,
    rewrite_payload_link,
    rewrite_spec_link,
)

SPEC = "/home/ci/azure-rest-api-specs/specification/storage/stable/storage.json"


def test_payload_link_passthrough_when_disabled() -> None:
    raw = "/tmp/payloads/run1/foo.json"
    assert rewrite_payload_link(raw, False, "https://x") == (raw, "foo.json")


def test_spec_link_passthrough_when_disabled() -> None:
    assert rewrite_spec_link(SPEC, False, "https://x") == (SPEC, "storage.json")


def test_payload_link_override_with_normalized_prefix() -> None:
    policy = LinkPolicy(override_enabled=True, payload_link_prefix="https://x/")
    assert policy.payload_link(".../run1/foo.json") == (
        "https://x/foo.json",
        "foo.json",
    )


def test_pure_rewrites_strip_one_trailing_slash() -> None:
    assert rewrite_payload_link("./run1/foo.json", True, "https://x/") == (
        "https://x/foo.json",
        "foo.json",
    )
    assert rewrite_spec_link("/r/specification/a.json", True, "https://x/")[0] == (
        "https://x/specification/a.json"
    )
    assert rewrite_payload_link("/r/foo.json", False, "https://x/")[0] == "/r/foo.json"


def test_policy_built_directly_normalizes_prefixes() -> None:
    policy = LinkPolicy(True, "https://s/", "https://x/")
    assert policy.spec_link_prefix == "https://s"
    assert policy.payload_link_prefix == "https://x"
    assert policy.payload_link("/runs/run1/foo.json")[0] == "https://x/foo.json"


def test_policy_normalizes_only_once() -> None:
    policy = LinkPolicy(True, payload_link_prefix="https://x//")
    assert policy.payload_link("/runs/foo.json")[0] == "https://x//foo.json"


def test_spec_link_override_starts_at_specification_root() -> None:
    link, label = rewrite_spec_link(SPEC, True, "https://github.com/org/specs/blob/main")
    assert link == (
        "https://github.com/org/specs/blob/main/"
        "specification/storage/stable/storage.json"
    )
    assert label == "storage.json"


def test_spec_link_override_without_marker_keeps_full_path() -> None:
    link, _ = rewrite_spec_link("local/api.json", True, "https://x")
    assert link == "https://x/local/api.json"


@pytest.mark.parametrize("override", [True, False])
def test_missing_path_yields_no_link(override: bool) -> None:
    assert rewrite_payload_link(None, override, "https://x") == (None, None)
    assert rewrite_spec_link(None, override, "https://x") == (None, None)


def test_label_of_path_without_separator_is_whole_path() -> None:
    assert link_label("foo.json") == "foo.json"
    assert link_label("a/b/") == ""


def test_normalize_prefix_strips_once() -> None:
    assert normalize_prefix("https://x/") == "https://x"
    assert normalize_prefix("https://x//") == "https://x/"
    assert normalize_prefix("https://x") == "https://x"


def test_policy_keeps_prefixes_untouched_when_disabled() -> None:
    policy = LinkPolicy(
        override_enabled=False,
        spec_link_prefix="https://s/",
        payload_link_prefix="https://p/",
    )
    assert policy.spec_link_prefix == "https://s/"
    assert policy.payload_link("/a/b.json") == ("/a/b.json", "b.json")


def test_policy_from_options() -> None:
    options = ReportOptions(
        override_link_in_report=True,
        spec_link_prefix="https://s/",
        payload_link_prefix="https://p/",
    )
    policy = LinkPolicy.from_options(options)
    assert policy.override_enabled
    assert policy.spec_link_prefix == "https://s"
    assert policy.payload_link_prefix == "https://p"
    assert policy.spec_link(SPEC)[0] == (
        "https://s/specification/storage/stable/storage.json"
    )
