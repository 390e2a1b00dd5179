"""Job lookup: search, filter and sort job records, plus per-job skill profiles."""

import math

from analyzer.risk import matches_tier

SORT_FIELDS = ("impact", "title", "aiWorkloadRatio")


def search_jobs(jobs: list[dict], term: str) -> list[dict]:
    """Case-insensitive substring match on title. An empty term returns all jobs."""
    if not term:
        return list(jobs)
    needle = term.lower()
    return [j for j in jobs if needle in (j.get("title") or "").lower()]


def list_domains(jobs: list[dict]) -> list[str]:
    """Unique domains in first-seen order."""
    seen = {}
    for j in jobs:
        seen.setdefault(j.get("domain", ""), None)
    return list(seen)


def _numeric_key(value) -> float:
    # NaN sorts last in both directions
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return math.inf
    return value


def sort_jobs(jobs: list[dict], by: str = "impact", direction: str = "desc") -> list[dict]:
    """Sort by impact, title or aiWorkloadRatio. Ties keep their input order."""
    if by not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {by!r}")
    if direction not in ("asc", "desc"):
        raise ValueError(f"Unknown sort direction: {direction!r}")

    reverse = direction == "desc"
    if by == "title":
        return sorted(jobs, key=lambda j: (j.get("title") or "").lower(), reverse=reverse)

    valid = [j for j in jobs if _numeric_key(j.get(by)) != math.inf]
    invalid = [j for j in jobs if _numeric_key(j.get(by)) == math.inf]
    return sorted(valid, key=lambda j: j[by], reverse=reverse) + invalid


def filter_jobs(
    jobs: list[dict],
    term: str = "",
    domain: str | None = None,
    tier: str = "all",
    sort_by: str = "impact",
    direction: str = "desc",
) -> list[dict]:
    """Apply search term, domain and risk tier filters, then sort."""
    filtered = search_jobs(jobs, term)
    if domain:
        filtered = [j for j in filtered if j.get("domain") == domain]
    filtered = [j for j in filtered if matches_tier(j.get("impact", math.nan), tier)]
    return sort_jobs(filtered, sort_by, direction)


def toggle_sort(sort_by: str, direction: str, field: str) -> tuple[str, str]:
    """Clicking the active sort field flips direction; a new field starts descending."""
    if field not in SORT_FIELDS:
        raise ValueError(f"Unknown sort field: {field!r}")
    if field == sort_by:
        return sort_by, "asc" if direction == "desc" else "desc"
    return field, "desc"


def job_skill_profile(job: dict) -> list[dict]:
    """Human-skill vs AI-capability scores derived from a job's impact."""
    impact = job["impact"]
    return [
        {"skill": "Technical Knowledge", "value": max(30, 100 - impact * 0.7), "category": "Human Skills"},
        {"skill": "Creative Problem Solving", "value": max(40, 110 - impact * 0.8), "category": "Human Skills"},
        {"skill": "Emotional Intelligence", "value": max(50, 120 - impact * 0.9), "category": "Human Skills"},
        {"skill": "Data Processing", "value": min(90, 40 + impact * 0.6), "category": "AI Capabilities"},
        {"skill": "Pattern Recognition", "value": min(95, 35 + impact * 0.7), "category": "AI Capabilities"},
        {"skill": "Decision Making", "value": min(85, 25 + impact * 0.7), "category": "AI Capabilities"},
    ]


def profile_to_radar_rows(profile: list[dict]) -> list[dict]:
    """Pivot a skill profile into radar rows: one per skill, a column per category."""
    rows: dict[str, dict] = {}
    for item in profile:
        row = rows.setdefault(item["skill"], {"skill": item["skill"]})
        row[item["category"]] = item["value"]
    return list(rows.values())
