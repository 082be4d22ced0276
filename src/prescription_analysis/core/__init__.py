# ============================================================================
# src/prescription_analysis/core/__init__.py
# ============================================================================
"""
Core components for the prescription analysis engine.

The pipeline itself is imported from `prescription_analysis.core.pipeline`
(it depends on the processors, classifiers and enrichers, which in turn
depend on `core.context`).
"""

from .context import AnalysisResult, OCRResult, DetectedDisease, ParsedMedication
from .confidence import ConfidenceCalculator, ConfidenceThresholds, AggregationMethod
from .evidence_fusion import EvidenceFusion

__all__ = [
    'AnalysisResult',
    'OCRResult',
    'DetectedDisease',
    'ParsedMedication',
    'ConfidenceCalculator',
    'ConfidenceThresholds',
    'AggregationMethod',
    'EvidenceFusion',
]
