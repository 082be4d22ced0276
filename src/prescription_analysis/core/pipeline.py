# ============================================================================
# src/prescription_analysis/core/pipeline.py
# ============================================================================
"""
Prescription Analysis Pipeline

OCR result -> AnalysisResult:

1. Validate input (empty text aborts the analysis)
2. Section-based medication extraction
3. Explicit disease detection on the full text
4. Disease inference from medication names
5. Evidence fusion
6. Static precautions
7. Confidence breakdown

Pure and synchronous. Services are constructed once and hold no
per-request state, so one pipeline can serve concurrent requests.
"""

from datetime import datetime, timezone
from numbers import Real
from typing import Any, Mapping, Optional, Union
import logging
import math
import uuid

from prescription_analysis.classifiers.disease_keyword_matcher import DiseaseKeywordMatcher
from prescription_analysis.config import AnalysisSettings, analysis_settings
from prescription_analysis.core.confidence import ConfidenceCalculator
from prescription_analysis.core.context.analysis_result import AnalysisResult, OCRResult
from prescription_analysis.core.evidence_fusion import EvidenceFusion
from prescription_analysis.enrichers.medication_disease_inferencer import MedicationDiseaseInferencer
from prescription_analysis.enrichers.precaution_generator import PrecautionGenerator
from prescription_analysis.processors.prescription.processor import SectionBasedExtractor
from prescription_analysis.utils.exceptions import EmptyInputError, InvalidInputError

logger = logging.getLogger(__name__)


class PrescriptionAnalysisPipeline:
    """
    Runs every analysis stage over one OCR result.
    """

    def __init__(
        self,
        settings: Optional[AnalysisSettings] = None,
        extractor: Optional[SectionBasedExtractor] = None,
        matcher: Optional[DiseaseKeywordMatcher] = None,
        inferencer: Optional[MedicationDiseaseInferencer] = None,
        fusion: Optional[EvidenceFusion] = None,
        precautions: Optional[PrecautionGenerator] = None,
        confidence: Optional[ConfidenceCalculator] = None,
    ):
        self.settings = settings or analysis_settings
        self.extractor = extractor or SectionBasedExtractor()
        self.matcher = matcher or DiseaseKeywordMatcher(settings=self.settings)
        self.inferencer = inferencer or MedicationDiseaseInferencer()
        self.fusion = fusion or EvidenceFusion()
        self.precautions = precautions or PrecautionGenerator(settings=self.settings)
        self.confidence = confidence or ConfidenceCalculator(settings=self.settings)

    def _log_step(self, step: str, details: str = None):
        """Log a processing step."""
        if details:
            logger.info(f"[STEP] {step}: {details}", extra={"stage": step})
        else:
            logger.info(f"[STEP] {step}", extra={"stage": step})

    def analyze(self, ocr_result: Union[OCRResult, Mapping[str, Any]]) -> AnalysisResult:
        """
        Analyze one prescription.

        Args:
            ocr_result: OCRResult or mapping with `text` and `confidence`

        Returns:
            AnalysisResult with status "pending"

        Raises:
            EmptyInputError: text is empty or whitespace only
            InvalidInputError: input is not an OCR result
        """
        ocr = self.validate_input(ocr_result)
        self._log_step("Input validated", f"{len(ocr.text)} characters, OCR confidence {ocr.confidence:.2f}")

        medications = self.extractor.extract_from_sections(ocr.text)
        self._log_step("Medications extracted", ", ".join(m.name for m in medications) or "none")

        explicit = self.matcher.detect_diseases(ocr.text)
        self._log_step("Explicit diseases detected", ", ".join(d.disease_id for d in explicit) or "none")

        inferred = self.inferencer.infer_diseases_from_medications(
            [m.name.lower() for m in medications]
        )
        self._log_step("Diseases inferred from medications", ", ".join(d.disease_id for d in inferred) or "none")

        diseases = self.fusion.combine(explicit, inferred)
        self._log_step("Evidence fused", f"{len(diseases)} diseases")

        precautions = self.precautions.generate(diseases, medications, ocr.confidence)
        self._log_step("Precautions generated", f"{len(precautions)} precautions")

        confidence = self.confidence.calculate_overall(
            ocr.confidence,
            [d.confidence for d in diseases],
            [m.confidence for m in medications],
        )
        level = self.confidence.get_level(confidence.overall)
        self._log_step("Confidence calculated", f"overall {confidence.overall:.2f} ({level.value})")

        return AnalysisResult(
            id=str(uuid.uuid4()),
            ocr=ocr,
            detected_diseases=diseases,
            parsed_medications=medications,
            precautions=precautions,
            confidence=confidence,
            confidence_level=level,
            status="pending",
            analyzed_at=datetime.now(timezone.utc),
        )

    def validate_input(self, ocr_result: Union[OCRResult, Mapping[str, Any]]) -> OCRResult:
        """
        Check the OCR result shape and normalise its confidence.

        Confidence outside [0, 1] is clamped with a warning.
        """
        if isinstance(ocr_result, OCRResult):
            text, confidence = ocr_result.text, ocr_result.confidence
        elif isinstance(ocr_result, Mapping):
            if "text" not in ocr_result:
                raise InvalidInputError("OCR result has no 'text'", field_name="text")
            text = ocr_result["text"]
            confidence = ocr_result.get("confidence", 0.0)
        else:
            raise InvalidInputError(
                f"Expected OCR result, got {type(ocr_result).__name__}",
                field_name="ocr_result"
            )

        if text is None:
            text = ""
        if not isinstance(text, str):
            raise InvalidInputError("OCR text must be a string", field_name="text")
        if isinstance(confidence, bool) or not isinstance(confidence, Real):
            raise InvalidInputError("OCR confidence must be a number", field_name="confidence")

        if not text.strip():
            logger.warning("Analysis aborted: OCR produced no text")
            raise EmptyInputError()

        confidence = float(confidence)
        if not math.isfinite(confidence):
            raise InvalidInputError("OCR confidence must be a finite number", field_name="confidence")
        if not 0.0 <= confidence <= 1.0:
            clamped = min(max(confidence, 0.0), 1.0)
            logger.warning(f"OCR confidence {confidence} outside [0, 1], clamped to {clamped}")
            confidence = clamped

        return OCRResult(text=text, confidence=confidence)
