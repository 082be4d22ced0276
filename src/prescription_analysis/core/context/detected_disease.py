# ============================================================================
# src/prescription_analysis/core/context/detected_disease.py
# ============================================================================
"""
Chronic disease detected in a prescription, with its evidence
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .enums import DetectionSource


@dataclass
class DetectedDisease:
    disease_id: str
    disease_name: str
    confidence: float
    matched_terms: List[str] = field(default_factory=list)
    context: str = ""
    source: DetectionSource = DetectionSource.EXPLICIT
    related_medications: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "disease_id": self.disease_id,
            "disease_name": self.disease_name,
            "confidence": self.confidence,
            "matched_terms": list(self.matched_terms),
            "context": self.context,
            "source": self.source.value,
            "related_medications": list(self.related_medications),
        }
