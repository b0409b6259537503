"""Error-code catalog loading.

The catalog maps validator error codes to friendly names and documentation
links. Loading never raises: every failure is returned as a
:class:`CatalogLoadResult` with an empty mapping so that report generation
can continue unenriched.
"""

from __future__ import annotations

import asyncio
import json
import re
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol

import httpx
import jsonschema

from trafficreport.config import DEFAULT_ERROR_DEFINITIONS_URL
from trafficreport.logging import get_logger
from trafficreport.types.dto import ErrorCatalogEntry

logger = get_logger(__name__)

_GITHUB_BLOB_RE = re.compile(r"^https?://github\.com/([^/]+)/([^/]+)/blob/(.+)$")


class ContentLoader(Protocol):
    """Anything able to fetch a document by URL or path."""

    async def load(self, location: str) -> str: ...


class FileLoader:
    """Fetch documents over HTTP(S) or from the local filesystem.

    Args:
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._transport = transport

    async def load(self, location: str) -> str:
        if location.startswith(("http://", "https://")):
            async with httpx.AsyncClient(
                transport=self._transport, follow_redirects=True
            ) as client:
                response = await client.get(location)
                response.raise_for_status()
                return response.text
        if location.startswith("file://"):
            location = location[len("file://") :]
        return await asyncio.to_thread(Path(location).read_text, encoding="utf-8")


def resolve_github_url(url: str) -> str:
    """Rewrite a GitHub ``blob`` page URL to its raw-content URL.

    Other locations are returned unchanged.
    """
    match = _GITHUB_BLOB_RE.match(url)
    if match is None:
        return url
    owner, repo, rest = match.groups()
    return f"https://raw.githubusercontent.com/{owner}/{repo}/{rest}"


@lru_cache(maxsize=1)
def _error_definitions_schema() -> Dict[str, Any]:
    with (
        resources.files("trafficreport.schemas")
        .joinpath("error_definitions.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def parse_error_definitions(text: str) -> Dict[str, ErrorCatalogEntry]:
    """Parse a catalog document into a ``code -> entry`` mapping.

    Later duplicates of a code replace earlier ones.

    Raises:
        ValueError: If ``text`` is not valid JSON.
        jsonschema.ValidationError: If the document has the wrong shape.
    """
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in error definitions: {e}") from e

    jsonschema.validate(doc, _error_definitions_schema())

    entries: Dict[str, ErrorCatalogEntry] = {}
    for definition in doc["ErrorDefinitions"]:
        code = definition["code"]
        entries[code] = ErrorCatalogEntry(
            code=code,
            friendly_name=definition.get("friendlyName"),
            link=definition.get("link"),
        )
    return entries


@dataclass(frozen=True)
class CatalogLoadResult:
    """Outcome of a catalog fetch: entries on success, a reason on failure."""

    entries: Mapping[str, ErrorCatalogEntry] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, entries: Mapping[str, ErrorCatalogEntry]) -> "CatalogLoadResult":
        return cls(entries=dict(entries))

    @classmethod
    def failure(cls, reason: str) -> "CatalogLoadResult":
        return cls(entries={}, error=reason)

    def lookup(self, code: str) -> Optional[ErrorCatalogEntry]:
        return self.entries.get(code)


class ErrorCatalogLoader:
    """Fetch and parse the error catalog once per report generation.

    Args:
        location: URL or path of the catalog document.
        loader: Content loader; defaults to :class:`FileLoader`.
    """

    def __init__(
        self,
        location: str = DEFAULT_ERROR_DEFINITIONS_URL,
        loader: Optional[ContentLoader] = None,
    ):
        self.location = location
        self._loader = loader if loader is not None else FileLoader()

    async def load(self) -> CatalogLoadResult:
        resolved = resolve_github_url(self.location)
        logger.debug(f"Loading error definitions from: {resolved}")
        try:
            text = await self._loader.load(resolved)
            entries = parse_error_definitions(text)
        except Exception as e:
            return CatalogLoadResult.failure(f"{type(e).__name__}: {e}")
        logger.debug(f"Loaded {len(entries)} error definitions")
        return CatalogLoadResult.success(entries)
