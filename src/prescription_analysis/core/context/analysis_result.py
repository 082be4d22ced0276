# ============================================================================
# src/prescription_analysis/core/context/analysis_result.py
# ============================================================================
"""
Pipeline input and output
- OCRResult: what the text-recognition collaborator hands over
- Precaution: informational / warning entries shown to the user
- OverallConfidence: per-stage confidence breakdown
- AnalysisResult: everything the user confirms before any write
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .detected_disease import DetectedDisease
from .enums import ConfidenceLevel, PrecautionType
from .parsed_medication import ParsedMedication


@dataclass
class OCRResult:
    text: str
    confidence: float


@dataclass
class Precaution:
    id: str
    type: PrecautionType
    title: str
    description: str
    related_medications: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "related_medications": list(self.related_medications),
        }


@dataclass
class OverallConfidence:
    overall: float = 0.0
    ocr: float = 0.0
    disease_detection: float = 0.0
    medication_parsing: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "overall": self.overall,
            "ocr": self.ocr,
            "disease_detection": self.disease_detection,
            "medication_parsing": self.medication_parsing,
        }


@dataclass
class AnalysisResult:
    id: str
    ocr: OCRResult
    detected_diseases: List[DetectedDisease] = field(default_factory=list)
    parsed_medications: List[ParsedMedication] = field(default_factory=list)
    precautions: List[Precaution] = field(default_factory=list)
    confidence: OverallConfidence = field(default_factory=OverallConfidence)
    confidence_level: ConfidenceLevel = ConfidenceLevel.LOW
    status: str = "pending"  # "pending", "reviewed", "confirmed", "rejected"
    analyzed_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "analyzed_at": self.analyzed_at.isoformat() if self.analyzed_at else None,
            "ocr": {"text": self.ocr.text, "confidence": self.ocr.confidence},
            "detected_diseases": [d.to_dict() for d in self.detected_diseases],
            "parsed_medications": [m.to_dict() for m in self.parsed_medications],
            "precautions": [p.to_dict() for p in self.precautions],
            "confidence": self.confidence.to_dict(),
            "confidence_level": self.confidence_level.value,
            "status": self.status,
        }
