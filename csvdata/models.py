"""
Typed dictionaries for the records flowing through the CSV pipeline.

Everything is a plain dict with type hints: the parser produces ``RawRecord``
dicts, the transformers turn them into the typed shapes below. Nothing here
validates at runtime; numeric fields may hold NaN when the CSV cell was not a
number (see ``csvdata.coerce``).
"""

from typing import Optional, TypedDict, Union

# One CSV row, keyed by header field in header order.
RawRecord = dict[str, str]


class JobRecord(TypedDict):
    """A row of job_data.csv (skills pipe-separated upstream)."""

    title: str
    impact: int
    tasks: int
    aiModels: int
    aiWorkloadRatio: float
    domain: str
    automationLevel: str
    augmentationPotential: str
    timeToDisruption: str
    keySkillsToKeep: list[str]


class AugmentedJobRecord(TypedDict):
    """A row of augmented_final_data.csv (skills comma-space-separated upstream)."""

    title: str
    impact: int
    tasks: int
    aiModels: int
    aiWorkloadRatio: float
    domain: str
    keySkillsToKeep: list[str]
    howToBeAIProof: str
    timeToDisruption: str
    aiImpactAssessment: str


class SectorRecord(TypedDict):
    label: str
    # Percentage, 0-100
    value: int
    color: Optional[str]
    description: Optional[str]


class Skill(TypedDict):
    name: str
    value: int


class SkillCategoryRecord(TypedDict):
    category: str
    skills: list[Skill]


class TimelineEventRecord(TypedDict):
    # Integer year, or the original label for eras such as "Beyond 2030"
    year: Union[int, str]
    title: str
    description: str
    iconColor: Optional[str]
    icon: Optional[str]


class BubbleRecord(TypedDict, total=False):
    id: str
    value: float
    label: str
    category: str
    color: Optional[str]
    description: Optional[str]


class HeatCellRecord(TypedDict, total=False):
    x: str
    y: str
    value: float
    tooltip: Optional[str]


class TrendPointRecord(TypedDict):
    year: int
    value: float
    label: str
    category: str
