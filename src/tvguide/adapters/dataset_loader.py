"""
Loader for persisted guide documents.

A source is either raw JSON text, an http(s) URL or a path on disk. Whatever
the source, the result is a validated, immutable GuideDataset; the grid and
selection code never touch the network or the filesystem themselves.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import requests
import structlog
from pydantic import ValidationError
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..domain.schemas import GuideDataset
from ..infra.exceptions import DatasetLoadError
from ..infra.settings import settings

_log = structlog.get_logger(__name__)


def _create_session() -> requests.Session:
    """Create a requests session with retry logic for guide documents."""
    session = requests.Session()

    retry_strategy = Retry(
        total=3,
        backoff_factor=0.5,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers.update({"Accept": "application/json"})
    return session


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def is_raw_json(source: str) -> bool:
    stripped = source.lstrip()
    return stripped.startswith("{") or stripped.startswith("[")


def fetch_document(url: str, session: requests.Session | None = None) -> Any:
    """GET ``url`` and decode its JSON body."""
    if session is None:
        with _create_session() as owned:
            return fetch_document(url, session=owned)

    _log.debug("fetch_guide_document", url=url)
    try:
        response = session.get(url, timeout=settings.fetch_timeout_seconds)
        response.raise_for_status()
        return response.json()
    except requests.RequestException as e:
        raise DatasetLoadError(f"Failed to fetch data: {e}") from e
    except ValueError as e:
        raise DatasetLoadError(f"Response from {url} is not valid JSON: {e}") from e


def parse_dataset(document: Any) -> GuideDataset:
    """Validate an already-decoded guide document."""
    if not isinstance(document, Mapping):
        raise DatasetLoadError(
            f"Guide document must be a JSON object, got {type(document).__name__}"
        )
    try:
        return GuideDataset.model_validate(document)
    except ValidationError as e:
        raise DatasetLoadError(f"Invalid guide document: {e}") from e


def load_dataset(
    source: str | Path | Mapping[str, Any],
    session: requests.Session | None = None,
) -> GuideDataset:
    """Load a guide dataset from raw JSON, a URL, a file path or a decoded mapping."""
    if isinstance(source, Mapping):
        return parse_dataset(source)

    if isinstance(source, Path):
        text_source = str(source)
        raw = False
    else:
        text_source = source
        raw = is_raw_json(source)

    if raw:
        try:
            document = json.loads(text_source)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(f"Invalid guide JSON: {e}") from e
    elif is_url(text_source):
        document = fetch_document(text_source, session=session)
    else:
        path = Path(text_source)
        if not path.is_file():
            raise DatasetLoadError(f"Guide document not found: {path}")
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetLoadError(f"Failed to parse guide document {path}: {e}") from e

    dataset = parse_dataset(document)
    _log.info(
        "guide_loaded",
        channel_id=dataset.channel_id,
        regions=dataset.regions,
        rows=len(dataset.rows),
    )
    return dataset
