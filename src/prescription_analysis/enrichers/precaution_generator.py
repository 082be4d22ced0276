# ============================================================================
# src/prescription_analysis/enrichers/precaution_generator.py
# ============================================================================
"""
Static precaution rules applied to every analysis.

Per-disease guideline text lives outside this package.
"""

from typing import List, Optional
import logging

from prescription_analysis.config import AnalysisSettings, analysis_settings
from prescription_analysis.core.context.analysis_result import Precaution
from prescription_analysis.core.context.detected_disease import DetectedDisease
from prescription_analysis.core.context.enums import PrecautionType
from prescription_analysis.core.context.parsed_medication import ParsedMedication

logger = logging.getLogger(__name__)


class PrecautionGenerator:

    def __init__(self, settings: Optional[AnalysisSettings] = None):
        self.settings = settings or analysis_settings

    def generate(
        self,
        diseases: List[DetectedDisease],
        medications: List[ParsedMedication],
        ocr_confidence: float
    ) -> List[Precaution]:
        precautions = []

        if diseases:
            precautions.append(Precaution(
                id="general-precaution",
                type=PrecautionType.INFO,
                title="Review with Healthcare Provider",
                description=(
                    "This analysis is for informational purposes only. Please review all "
                    "detected information with your healthcare provider before making any "
                    "changes to your medication regimen."
                ),
            ))

        if len(medications) > self.settings.MULTIPLE_MEDICATIONS_WARNING_COUNT:
            precautions.append(Precaution(
                id="multiple-meds",
                type=PrecautionType.WARNING,
                title="Multiple Medications Detected",
                description=(
                    "You have multiple medications. Be aware of potential drug interactions "
                    "and take medications as prescribed."
                ),
                related_medications=[m.name for m in medications],
            ))

        if ocr_confidence < self.settings.LOW_OCR_CONFIDENCE_THRESHOLD:
            precautions.append(Precaution(
                id="low-ocr-confidence",
                type=PrecautionType.INFO,
                title="Low Text Recognition Confidence",
                description=(
                    "The prescription text was hard to read. Please check every detected "
                    "medication and condition against the original prescription."
                ),
            ))

        as_needed = [
            m.name for m in medications
            if m.as_needed
        ]
        if as_needed:
            precautions.append(Precaution(
                id="as-needed-medication",
                type=PrecautionType.INFO,
                title="As-Needed Medication",
                description=(
                    "Some medications are taken only when required. No fixed reminder "
                    "times can be derived for them."
                ),
                related_medications=as_needed,
            ))

        logger.debug(f"Generated {len(precautions)} precautions")
        return precautions
