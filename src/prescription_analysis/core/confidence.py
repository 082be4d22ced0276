# ============================================================================
# src/prescription_analysis/core/confidence.py
# ============================================================================
"""
Confidence Scoring and Aggregation

Provides utilities for:
- Aggregating multiple confidence values
- Combining per-stage confidences into the overall score
- Determining confidence levels
"""

from typing import List, Optional, Sequence
from enum import Enum
from dataclasses import dataclass
import statistics

from prescription_analysis.config import AnalysisSettings, analysis_settings
from prescription_analysis.core.context.enums import ConfidenceLevel
from prescription_analysis.core.context.analysis_result import OverallConfidence


# Overall = ocr * 0.3 + disease detection * 0.4 + medication parsing * 0.3
OVERALL_WEIGHTS = {
    "ocr": 0.3,
    "disease_detection": 0.4,
    "medication_parsing": 0.3,
}


class AggregationMethod(Enum):
    """Methods for aggregating multiple confidence scores"""
    AVERAGE = "average"  # Mean of all scores
    WEIGHTED_AVERAGE = "weighted_average"  # Weighted mean


@dataclass
class ConfidenceThresholds:
    """Confidence level thresholds"""
    high: float = 0.85
    medium: float = 0.70

    @classmethod
    def from_settings(cls, settings: AnalysisSettings) -> "ConfidenceThresholds":
        return cls(high=settings.HIGH_CONFIDENCE, medium=settings.MEDIUM_CONFIDENCE)

    def get_level(self, score: float) -> ConfidenceLevel:
        """
        Get confidence level from score.

        Args:
            score: Confidence score (0.0-1.0)

        Returns:
            ConfidenceLevel.HIGH, MEDIUM or LOW
        """
        if score >= self.high:
            return ConfidenceLevel.HIGH
        elif score >= self.medium:
            return ConfidenceLevel.MEDIUM
        else:
            return ConfidenceLevel.LOW


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


class ConfidenceCalculator:
    """
    Utility class for calculating and aggregating confidence scores.
    """

    def __init__(
        self,
        thresholds: Optional[ConfidenceThresholds] = None,
        settings: Optional[AnalysisSettings] = None
    ):
        """
        Initialize calculator.

        Args:
            thresholds: Custom confidence thresholds
            settings: Analysis settings used when no thresholds are given
        """
        self.thresholds = thresholds or ConfidenceThresholds.from_settings(
            settings or analysis_settings
        )

    def aggregate(
        self,
        scores: Sequence[float],
        method: AggregationMethod = AggregationMethod.AVERAGE,
        weights: Optional[Sequence[float]] = None,
    ) -> float:
        """
        Aggregate multiple confidence scores into single value.

        Args:
            scores: Confidence scores (0.0-1.0)
            method: Aggregation method
            weights: Weights for WEIGHTED_AVERAGE, one per score, positive sum

        Returns:
            Aggregated confidence score (0.0-1.0), 0.0 for no scores
        """
        if not scores:
            return 0.0

        scores = [clamp(s) for s in scores]

        if method == AggregationMethod.WEIGHTED_AVERAGE:
            return sum(s * w for s, w in zip(scores, weights)) / sum(weights)

        return statistics.mean(scores)

    def calculate_overall(
        self,
        ocr_confidence: float,
        disease_confidences: List[float],
        medication_confidences: List[float],
    ) -> OverallConfidence:
        """
        Per-stage breakdown plus weighted overall score.

        Stage scores are means, 0.0 when the stage produced nothing.
        """
        ocr = clamp(ocr_confidence)
        disease = self.aggregate(disease_confidences, AggregationMethod.AVERAGE)
        medication = self.aggregate(medication_confidences, AggregationMethod.AVERAGE)

        overall = self.aggregate(
            [ocr, disease, medication],
            AggregationMethod.WEIGHTED_AVERAGE,
            [
                OVERALL_WEIGHTS["ocr"],
                OVERALL_WEIGHTS["disease_detection"],
                OVERALL_WEIGHTS["medication_parsing"],
            ],
        )

        return OverallConfidence(
            overall=overall,
            ocr=ocr,
            disease_detection=disease,
            medication_parsing=medication,
        )

    def get_level(self, score: float) -> ConfidenceLevel:
        return self.thresholds.get_level(score)
