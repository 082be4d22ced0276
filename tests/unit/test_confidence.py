# ============================================================================
# FILE: tests/unit/test_confidence.py
# ============================================================================
"""
Unit tests for confidence aggregation
"""

import pytest

from prescription_analysis.config import AnalysisSettings
from prescription_analysis.core.confidence import (
    AggregationMethod,
    ConfidenceCalculator,
    ConfidenceThresholds,
)
from prescription_analysis.core.context import ConfidenceLevel


def test_thresholds_levels():
    """Scores map to high / medium / low"""
    thresholds = ConfidenceThresholds()

    assert thresholds.get_level(0.9) == ConfidenceLevel.HIGH
    assert thresholds.get_level(0.85) == ConfidenceLevel.HIGH
    assert thresholds.get_level(0.7) == ConfidenceLevel.MEDIUM
    assert thresholds.get_level(0.69) == ConfidenceLevel.LOW


def test_thresholds_from_settings():
    """Thresholds follow the analysis settings"""
    settings = AnalysisSettings(HIGH_CONFIDENCE=0.95, MEDIUM_CONFIDENCE=0.5)
    calculator = ConfidenceCalculator(settings=settings)

    assert calculator.get_level(0.9) == ConfidenceLevel.MEDIUM
    assert calculator.get_level(0.4) == ConfidenceLevel.LOW


def test_aggregate_methods():
    """Average and weighted average"""
    calculator = ConfidenceCalculator()
    scores = [0.6, 0.8, 1.0]

    assert calculator.aggregate(scores, AggregationMethod.AVERAGE) == pytest.approx(0.8)
    assert calculator.aggregate(
        scores, AggregationMethod.WEIGHTED_AVERAGE, [1.0, 0.0, 1.0]
    ) == pytest.approx(0.8)


def test_aggregate_empty():
    """No scores aggregate to 0"""
    assert ConfidenceCalculator().aggregate([]) == 0.0


def test_aggregate_clamps_scores():
    """Out-of-range stage scores are clamped before averaging"""
    assert ConfidenceCalculator().aggregate([1.4, -0.2]) == pytest.approx(0.5)


def test_calculate_overall():
    """overall = ocr * 0.3 + diseases * 0.4 + medications * 0.3"""
    confidence = ConfidenceCalculator().calculate_overall(0.9, [0.901, 0.7], [1.0])

    assert confidence.ocr == pytest.approx(0.9)
    assert confidence.disease_detection == pytest.approx(0.8005)
    assert confidence.medication_parsing == pytest.approx(1.0)
    assert confidence.overall == pytest.approx(0.9 * 0.3 + 0.8005 * 0.4 + 1.0 * 0.3)


def test_calculate_overall_empty_stages():
    """Stages with nothing found count as 0"""
    confidence = ConfidenceCalculator().calculate_overall(0.8, [], [])

    assert confidence.disease_detection == 0.0
    assert confidence.medication_parsing == 0.0
    assert confidence.overall == pytest.approx(0.24)
