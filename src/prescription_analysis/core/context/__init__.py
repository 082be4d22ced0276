# ============================================================================
# src/prescription_analysis/core/context/__init__.py
# ============================================================================

from .enums import (
    SectionName,
    MedicineForm,
    FrequencyType,
    DetectionSource,
    PrecautionType,
    ConfidenceLevel,
)
from .frequency import (
    Frequency,
    DailyFrequency,
    WeekdaysFrequency,
    CustomDaysFrequency,
    EveryXDaysFrequency,
    EveryXHoursFrequency,
    AsNeededFrequency,
    ONCE_DAILY,
    is_default_frequency,
    frequency_from_dict,
)
from .parsed_medication import Dosage, ParsedMedication
from .detected_disease import DetectedDisease
from .analysis_result import OCRResult, Precaution, OverallConfidence, AnalysisResult

__all__ = [
    'SectionName',
    'MedicineForm',
    'FrequencyType',
    'DetectionSource',
    'PrecautionType',
    'ConfidenceLevel',
    'Frequency',
    'DailyFrequency',
    'WeekdaysFrequency',
    'CustomDaysFrequency',
    'EveryXDaysFrequency',
    'EveryXHoursFrequency',
    'AsNeededFrequency',
    'ONCE_DAILY',
    'is_default_frequency',
    'frequency_from_dict',
    'Dosage',
    'ParsedMedication',
    'DetectedDisease',
    'OCRResult',
    'Precaution',
    'OverallConfidence',
    'AnalysisResult',
]
