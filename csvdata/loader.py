"""Load CSV resources and turn them into typed records.

Resource paths look like ``/data/job_data.csv`` and are resolved against a
source root: a local directory, or an http(s) base URL serving the same
layout. Loading never raises past this module. Any fetch or parse failure is
logged and reported to the caller as an empty list, so an empty result means
"load failed" to callers that need data.

Usage:
    import asyncio
    from csvdata.loader import get_job_data

    jobs = asyncio.run(get_job_data())
"""

import asyncio
import logging
import urllib.error
import urllib.request
from pathlib import Path
from typing import Callable

import config
from csvdata.parser import parse_csv
from csvdata.transform import (
    invalid_numeric_fields,
    transform_augmented_job_data,
    transform_job_data,
    transform_sector_data,
    transform_skills_data,
    transform_timeline_events,
)

log = logging.getLogger(__name__)


class ResourceError(Exception):
    """Raised internally when a resource cannot be read."""


def _is_url(root: str) -> bool:
    return root.startswith(("http://", "https://"))


def resolve_path(path: str, source_root: str | None = None) -> str:
    """Resolve a resource path against the source root (URL or local file path)."""
    root = source_root or config.SOURCE_ROOT
    if _is_url(root):
        return root.rstrip("/") + "/" + path.lstrip("/")
    return str(Path(root) / path.lstrip("/"))


def read_text(path: str, source_root: str | None = None) -> str:
    """Read a resource as text. Blocking.

    Raises:
        ResourceError: On a missing file, network error or non-success status.
    """
    location = resolve_path(path, source_root)

    if not _is_url(location):
        try:
            return Path(location).read_text(encoding="utf-8")
        except OSError as e:
            raise ResourceError(f"Failed to read {location}: {e}") from e

    req = urllib.request.Request(location, headers={"Accept": "text/csv"})
    try:
        with urllib.request.urlopen(req, timeout=config.HTTP_TIMEOUT_SECONDS) as resp:
            status = getattr(resp, "status", 200)
            if not 200 <= status < 300:
                raise ResourceError(f"Failed to fetch {location}: {status} {resp.reason}")
            return resp.read().decode("utf-8")
    except urllib.error.HTTPError as e:
        raise ResourceError(f"Failed to fetch {location}: {e.code} {e.reason}") from e
    except urllib.error.URLError as e:
        raise ResourceError(f"Failed to fetch {location}: {e.reason}") from e


async def fetch_csv(
    path: str,
    *,
    delimiter: str = ",",
    skip_header: bool = True,
    source_root: str | None = None,
) -> list[dict]:
    """Fetch and parse a CSV resource. Returns [] on any failure."""
    try:
        text = await asyncio.to_thread(read_text, path, source_root)
        return parse_csv(text, delimiter=delimiter, skip_header=skip_header)
    except Exception as e:
        log.error("Error fetching CSV from %s: %s", path, e)
        return []


async def load_resource(
    path: str,
    transform: Callable[[list[dict]], list],
    *,
    strict: bool = False,
    source_root: str | None = None,
) -> list:
    """Fetch, parse and transform a resource into typed records.

    Args:
        path: Resource path, e.g. ``config.JOB_DATA_PATH``.
        transform: One of the ``csvdata.transform`` functions.
        strict: Drop records whose numeric fields failed coercion instead of
            passing them through with NaN values.
        source_root: Override ``config.SOURCE_ROOT``.

    Returns:
        Typed records in source row order, or [] when loading failed.
    """
    rows = await fetch_csv(path, source_root=source_root)
    if not rows:
        log.warning("No rows loaded from %s", path)
        return []

    try:
        records = transform(rows)
    except Exception as e:
        log.error("Error transforming %s: %s", path, e)
        return []

    kept = []
    for i, record in enumerate(records):
        bad = invalid_numeric_fields(record)
        if bad:
            log.warning("%s row %d has non-numeric values in %s", path, i + 1, ", ".join(bad))
            if strict:
                continue
        kept.append(record)

    log.info("Loaded %d records from %s", len(kept), path)
    return kept


async def get_job_data(**kwargs) -> list:
    return await load_resource(config.JOB_DATA_PATH, transform_job_data, **kwargs)


async def get_augmented_job_data(**kwargs) -> list:
    return await load_resource(config.AUGMENTED_JOB_DATA_PATH, transform_augmented_job_data, **kwargs)


async def get_sector_data(**kwargs) -> list:
    return await load_resource(config.SECTOR_DATA_PATH, transform_sector_data, **kwargs)


async def get_skills_data(**kwargs) -> list:
    return await load_resource(config.SKILLS_DATA_PATH, transform_skills_data, **kwargs)


async def get_timeline_events(**kwargs) -> list:
    return await load_resource(config.TIMELINE_EVENTS_PATH, transform_timeline_events, **kwargs)


async def load_all(**kwargs) -> dict[str, list]:
    """Load every resource concurrently. Each entry is [] if its load failed."""
    jobs, augmented, sectors, skills, events = await asyncio.gather(
        get_job_data(**kwargs),
        get_augmented_job_data(**kwargs),
        get_sector_data(**kwargs),
        get_skills_data(**kwargs),
        get_timeline_events(**kwargs),
    )
    return {
        "jobs": jobs,
        "augmented_jobs": augmented,
        "sectors": sectors,
        "skills": skills,
        "timeline": events,
    }
