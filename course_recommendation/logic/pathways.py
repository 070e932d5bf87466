"""
Pathway Deriver

Maps categorized assessment scores to a short list of candidate career
pathway labels using the score-band tables.
"""

import logging
from typing import Dict, Iterable, List

from .contracts import AssessmentScore
from .tables import ScoringTables, DEFAULT_TABLES

logger = logging.getLogger(__name__)


def derive_pathways(
    scores: Iterable[AssessmentScore],
    tables: ScoringTables = DEFAULT_TABLES
) -> List[str]:
    """
    Derive career pathways from assessment scores.

    Each score selects the low/medium/high band of its category; the labels of
    all selected bands are unioned (case-insensitively, first spelling kept).
    Unknown categories are skipped. When nothing matches, every label in the
    table is used instead so that recommendations never come back empty.

    Args:
        scores: Assessment scores for the current user
        tables: Lookup tables to use

    Returns:
        At most `tables.max_pathways` unique labels, in first-encountered order
    """
    selected: Dict[str, str] = {}  # lower-cased label -> label

    for score in scores:
        bands = tables.pathway_bands.get(score.category.lower())
        if not bands:
            logger.debug("No pathway table for category %r", score.category)
            continue
        for label in bands.get(tables.band_for(score.score), ()):
            selected.setdefault(label.lower(), label)

    if not selected:
        logger.info("No recognised assessment categories; using full pathway table")
        for label in tables.all_pathways():
            selected.setdefault(label.lower(), label)

    return list(selected.values())[:tables.max_pathways]
