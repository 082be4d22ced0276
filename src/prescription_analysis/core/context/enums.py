# ============================================================================
# src/prescription_analysis/core/context/enums.py
# ============================================================================
"""
Analysis Enums
- Prescription sections
- Medicine forms
- Frequency variants
- Detection sources
- Confidence levels
"""

from enum import Enum


class SectionName(str, Enum):
    PRECAUTIONS = "precautions"
    GUIDELINES = "guidelines"
    MEDICATIONS = "medications"
    GENERAL = "general"


class MedicineForm(str, Enum):
    TABLET = "tablet"
    CAPSULE = "capsule"
    LIQUID = "liquid"
    INJECTION = "injection"
    OTHER = "other"


class FrequencyType(str, Enum):
    DAILY = "DAILY"
    WEEKDAYS = "WEEKDAYS"
    CUSTOM_DAYS = "CUSTOM_DAYS"
    EVERY_X_DAYS = "EVERY_X_DAYS"
    EVERY_X_HOURS = "EVERY_X_HOURS"
    AS_NEEDED = "AS_NEEDED"


class DetectionSource(str, Enum):
    EXPLICIT = "explicit"       # Named in the prescription text
    MEDICATION = "medication"   # Implied by a prescribed medication
    COMBINED = "combined"       # Both


class PrecautionType(str, Enum):
    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"


class ConfidenceLevel(str, Enum):
    HIGH = "high"       # >= 0.85
    MEDIUM = "medium"   # 0.70 - 0.85
    LOW = "low"         # < 0.70
