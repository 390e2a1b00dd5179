"""Map raw CSV records onto the typed record shapes.

Each data file has its own transform. The two job files describe the same
kind of thing but use different headers and different skill separators, so
they have separate transforms and are never interchangeable.
"""

from csvdata.coerce import is_invalid_number, parse_float, parse_int, split_list
from csvdata.models import (
    AugmentedJobRecord,
    JobRecord,
    RawRecord,
    SectorRecord,
    SkillCategoryRecord,
    TimelineEventRecord,
)

# Skill list separators per source file
JOB_SKILL_SEPARATOR = "|"
AUGMENTED_SKILL_SEPARATOR = ", "

# Numeric fields checked by invalid_numeric_fields()
JOB_NUMERIC_FIELDS = ("impact", "tasks", "aiModels", "aiWorkloadRatio")
SECTOR_NUMERIC_FIELDS = ("value",)


def _optional(value: str):
    # Empty CSV cells mean "not provided"
    return value if value else None


def transform_job_data(rows: list[RawRecord]) -> list[JobRecord]:
    """Transform job_data.csv rows (camelCase headers, ``|``-separated skills)."""
    return [
        {
            "title": row.get("title", ""),
            "impact": parse_int(row.get("impact", "")),
            "tasks": parse_int(row.get("tasks", "")),
            "aiModels": parse_int(row.get("aiModels", "")),
            "aiWorkloadRatio": parse_float(row.get("aiWorkloadRatio", "")),
            "domain": row.get("domain", ""),
            "automationLevel": row.get("automationLevel", ""),
            "augmentationPotential": row.get("augmentationPotential", ""),
            "timeToDisruption": row.get("timeToDisruption", ""),
            "keySkillsToKeep": split_list(row.get("keySkillsToKeep", ""), JOB_SKILL_SEPARATOR),
        }
        for row in rows
    ]


def transform_augmented_job_data(rows: list[RawRecord]) -> list[AugmentedJobRecord]:
    """Transform augmented_final_data.csv rows (spreadsheet-style headers, ``", "``-separated skills)."""
    return [
        {
            "title": row.get("Job Titles", ""),
            "impact": parse_int(row.get("AI Impact", "")),
            "tasks": parse_int(row.get("Tasks", "")),
            "aiModels": parse_int(row.get("AI models", "")),
            "aiWorkloadRatio": parse_float(row.get("AI_Workload_Ratio", "")),
            "domain": row.get("Domain", ""),
            "keySkillsToKeep": split_list(
                row.get("Key Skills to Maintain", ""), AUGMENTED_SKILL_SEPARATOR
            ),
            "howToBeAIProof": row.get("How to Be AI-Proof", ""),
            "timeToDisruption": row.get("Time to Disruption", ""),
            "aiImpactAssessment": row.get("AI Impact Assessment", ""),
        }
        for row in rows
    ]


def transform_sector_data(rows: list[RawRecord]) -> list[SectorRecord]:
    return [
        {
            "label": row.get("label", ""),
            "value": parse_int(row.get("value", "")),
            "color": _optional(row.get("color", "")),
            "description": _optional(row.get("description", "")),
        }
        for row in rows
    ]


def transform_skills_data(rows: list[RawRecord]) -> list[SkillCategoryRecord]:
    """Group skill rows by category, keeping first-seen category order."""
    grouped: dict[str, list] = {}
    for row in rows:
        category = row.get("category", "")
        grouped.setdefault(category, []).append({
            "name": row.get("skill_name", ""),
            "value": parse_int(row.get("value", "")),
        })
    return [{"category": category, "skills": skills} for category, skills in grouped.items()]


def transform_timeline_events(rows: list[RawRecord]) -> list[TimelineEventRecord]:
    """Numeric years become ints; era labels like "Beyond 2030" stay strings."""
    events = []
    for row in rows:
        raw_year = row.get("year", "")
        year = parse_int(raw_year)
        events.append({
            "year": raw_year if is_invalid_number(year) else year,
            "title": row.get("title", ""),
            "description": row.get("description", ""),
            "iconColor": _optional(row.get("iconColor", "")),
            "icon": _optional(row.get("icon", "")),
        })
    return events


def invalid_numeric_fields(record: dict, fields=None) -> list[str]:
    """Return the numeric fields of *record* that failed coercion (NaN).

    With no explicit *fields*, every key in JOB_NUMERIC_FIELDS or
    SECTOR_NUMERIC_FIELDS present in the record is checked. Skill categories
    are checked per skill.
    """
    if "skills" in record and fields is None:
        return [
            f"skills[{s.get('name', '')}].value"
            for s in record["skills"]
            if is_invalid_number(s.get("value"))
        ]
    if fields is None:
        fields = [f for f in JOB_NUMERIC_FIELDS + SECTOR_NUMERIC_FIELDS if f in record]
    return [f for f in fields if is_invalid_number(record.get(f))]
