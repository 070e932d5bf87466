"""
Scoring Tables

Immutable lookup configuration consumed by every scorer. Built once from the
module defaults in constants.py; tests and callers may build alternates.
"""

from typing import Dict, Tuple
from pydantic import BaseModel, Field

from .constants import (
    PATHWAY_BAND_MAP,
    LEVEL_PREFERENCE_MAP,
    CATEGORY_SKILL_KEYWORDS,
    WEIGHTED_FACTOR_WEIGHTS,
    LOW_BAND_CEILING,
    HIGH_BAND_FLOOR,
    LEVEL_PREFERENCE_LOW_MAX,
    LEVEL_PREFERENCE_MEDIUM_MAX,
    MAX_PATHWAYS,
    PATHWAY_MATCH_POINTS,
    DEFAULT_LEVEL_POINTS,
)


class ScoringTables(BaseModel):
    """
    Lookup tables and tunable numbers for the scoring engine.

    Category keys are stored lower-cased so lookups are case-insensitive.
    """
    pathway_bands: Dict[str, Dict[str, Tuple[str, ...]]] = Field(default_factory=dict)
    level_preferences: Dict[str, Dict[str, Tuple[int, int, int]]] = Field(default_factory=dict)
    category_keywords: Dict[str, Tuple[str, ...]] = Field(default_factory=dict)
    weighted_factor_weights: Dict[str, float] = Field(default_factory=dict)

    low_band_ceiling: float = LOW_BAND_CEILING
    high_band_floor: float = HIGH_BAND_FLOOR
    level_preference_low_max: float = LEVEL_PREFERENCE_LOW_MAX
    level_preference_medium_max: float = LEVEL_PREFERENCE_MEDIUM_MAX
    max_pathways: int = MAX_PATHWAYS
    pathway_match_points: Tuple[int, int, int] = PATHWAY_MATCH_POINTS
    default_level_points: int = DEFAULT_LEVEL_POINTS

    class Config:
        frozen = True

    @classmethod
    def build(
        cls,
        pathway_bands: Dict[str, Dict[str, list]],
        level_preferences: Dict[str, Dict[str, Tuple[int, int, int]]],
        category_keywords: Dict[str, list],
        weighted_factor_weights: Dict[str, float],
        **overrides
    ) -> "ScoringTables":
        """Normalize plain dict/list tables into an immutable ScoringTables."""
        return cls(
            pathway_bands={
                category.lower(): {band: tuple(labels) for band, labels in bands.items()}
                for category, bands in pathway_bands.items()
            },
            level_preferences={
                category.lower(): {level.lower(): tuple(points) for level, points in levels.items()}
                for category, levels in level_preferences.items()
            },
            category_keywords={
                category.lower(): tuple(k.lower() for k in keywords)
                for category, keywords in category_keywords.items()
            },
            weighted_factor_weights=dict(weighted_factor_weights),
            **overrides
        )

    def band_for(self, score: float) -> str:
        """Map a single assessment score onto low/medium/high."""
        if score < self.low_band_ceiling:
            return "low"
        if score < self.high_band_floor:
            return "medium"
        return "high"

    def level_column(self, average_score: float) -> int:
        """Column of the level preference matrix for an average score."""
        if average_score <= self.level_preference_low_max:
            return 0
        if average_score <= self.level_preference_medium_max:
            return 1
        return 2

    def all_pathways(self) -> Tuple[str, ...]:
        """Every label in table order, for the empty-result fallback."""
        labels = []
        for bands in self.pathway_bands.values():
            for band_labels in bands.values():
                labels.extend(band_labels)
        return tuple(labels)


DEFAULT_TABLES = ScoringTables.build(
    pathway_bands=PATHWAY_BAND_MAP,
    level_preferences=LEVEL_PREFERENCE_MAP,
    category_keywords=CATEGORY_SKILL_KEYWORDS,
    weighted_factor_weights=WEIGHTED_FACTOR_WEIGHTS,
)
