# ============================================================================
# src/prescription_analysis/classifiers/disease_keyword_matcher.py
# ============================================================================
"""
Disease Keyword Matcher

Detects chronic diseases named explicitly in prescription text.

Scoring per disease:
1. Whole-word matching of three dictionary tiers on normalized text
   - keywords        x1.0
   - abbreviations   x1.2
   - related terms   x0.8
2. confidence = min(0.5 + weighted_matches * 0.1, 0.9)
3. +0.1 when more than one distinct term matched
4. +0.1 when a context snippet carries a clinical marker word
   (diagnosis, prescribed, treatment, ...)

Context snippets come from the original text, not the normalized one.
A disease with no matched term is never reported.
"""

from typing import Dict, List, Optional, Tuple
import logging
import re

from prescription_analysis.config import AnalysisSettings, analysis_settings
from prescription_analysis.constants.chronic_diseases import get_disease_name
from prescription_analysis.constants.disease_keywords import (
    DISEASE_KEYWORDS,
    CLINICAL_CONTEXT_MARKERS,
)
from prescription_analysis.core.context.detected_disease import DetectedDisease
from prescription_analysis.core.context.enums import DetectionSource
from prescription_analysis.utils.text_normalizer import normalize_text, whole_word_pattern

logger = logging.getLogger(__name__)


# (tier name, weight, display abbreviations upper-case)
TIER_WEIGHTS: List[Tuple[str, float, bool]] = [
    ("keywords", 1.0, False),
    ("abbreviations", 1.2, True),
    ("related_terms", 0.8, False),
]

BASE_CONFIDENCE = 0.5
PER_MATCH_INCREMENT = 0.1
MATCH_CONFIDENCE_CAP = 0.9
MULTI_TERM_BONUS = 0.1
CLINICAL_CONTEXT_BONUS = 0.1


class DiseaseKeywordMatcher:
    """
    Weighted keyword classifier over a static disease dictionary.
    """

    def __init__(
        self,
        keywords: Optional[Dict[str, Dict[str, List[str]]]] = None,
        settings: Optional[AnalysisSettings] = None
    ):
        self.keywords = keywords if keywords is not None else DISEASE_KEYWORDS
        self.settings = settings or analysis_settings

    def detect_diseases(self, text: str) -> List[DetectedDisease]:
        """
        Detect diseases mentioned in text.

        Args:
            text: Full original prescription text

        Returns:
            Detected diseases, highest confidence first
        """
        normalized = normalize_text(text)
        if not normalized:
            return []

        detected = []
        for disease_id, tiers in self.keywords.items():
            detection = self._detect_disease(disease_id, tiers, normalized, text)
            if detection is not None:
                detected.append(detection)

        detected.sort(key=lambda d: d.confidence, reverse=True)

        logger.info(
            f"Keyword matching found {len(detected)} diseases: "
            f"{[d.disease_id for d in detected]}"
        )
        return detected

    def _detect_disease(
        self,
        disease_id: str,
        tiers: Dict[str, List[str]],
        normalized_text: str,
        original_text: str
    ) -> Optional[DetectedDisease]:
        matched_terms: List[str] = []
        seen_terms = set()
        weighted_matches = 0.0
        snippets: List[str] = []

        for tier, weight, upper in TIER_WEIGHTS:
            for term in tiers.get(tier, []):
                normalized_term = normalize_text(term)
                if not normalized_term:
                    continue

                count = len(whole_word_pattern(normalized_term).findall(normalized_text))
                if count == 0:
                    continue

                weighted_matches += count * weight

                display = term.upper() if upper else term
                if display.lower() not in seen_terms:
                    seen_terms.add(display.lower())
                    matched_terms.append(display)

                remaining = self.settings.MAX_CONTEXT_SNIPPETS - len(snippets)
                if remaining > 0:
                    snippets.extend(self.extract_context(original_text, term, remaining))

        if not matched_terms:
            return None

        confidence = self.calculate_confidence(weighted_matches, len(matched_terms), snippets)

        logger.debug(
            f"{disease_id}: terms={matched_terms} weighted={weighted_matches:.1f} "
            f"confidence={confidence:.2f}"
        )

        return DetectedDisease(
            disease_id=disease_id,
            disease_name=get_disease_name(disease_id),
            confidence=confidence,
            matched_terms=matched_terms,
            context=" ... ".join(snippets),
            source=DetectionSource.EXPLICIT,
            related_medications=[],
        )

    def extract_context(self, text: str, term: str, limit: int) -> List[str]:
        """
        Snippets of up to CONTEXT_WINDOW_CHARS on each side of a term.

        Snippets never cross a line break.
        """
        window = self.settings.CONTEXT_WINDOW_CHARS
        pattern = re.compile(
            rf'(.{{0,{window}}})\b{re.escape(term)}\b(.{{0,{window}}})',
            re.IGNORECASE
        )

        snippets = []
        for match in pattern.finditer(text):
            snippets.append(match.group(0).strip())
            if len(snippets) >= limit:
                break
        return snippets

    def calculate_confidence(
        self,
        weighted_matches: float,
        distinct_terms: int,
        snippets: List[str]
    ) -> float:
        confidence = min(
            BASE_CONFIDENCE + weighted_matches * PER_MATCH_INCREMENT,
            MATCH_CONFIDENCE_CAP
        )

        if distinct_terms > 1:
            confidence += MULTI_TERM_BONUS

        if any(
            marker in snippet.lower()
            for snippet in snippets
            for marker in CLINICAL_CONTEXT_MARKERS
        ):
            confidence += CLINICAL_CONTEXT_BONUS

        return min(max(confidence, 0.0), 1.0)
