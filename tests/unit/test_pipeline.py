# ============================================================================
# FILE: tests/unit/test_pipeline.py
# ============================================================================
"""
Unit tests for the end-to-end analysis pipeline
"""

import logging

import pytest

from prescription_analysis.core.context import (
    ConfidenceLevel,
    DetectionSource,
    OCRResult,
    SectionName,
)
from prescription_analysis.utils.exceptions import EmptyInputError, InvalidInputError


def test_diabetes_scenario(pipeline, diabetes_text):
    """Explicit diagnosis + matching medication gives a combined detection"""
    result = pipeline.analyze({"text": diabetes_text, "confidence": 0.9})

    assert [d.disease_id for d in result.detected_diseases] == ["diabetes"]
    diabetes = result.detected_diseases[0]
    assert diabetes.source == DetectionSource.COMBINED
    assert diabetes.confidence == pytest.approx(0.88 * 0.7 + 0.95 * 0.3)
    assert diabetes.related_medications == ["metformin"]

    assert len(result.parsed_medications) == 1
    metformin = result.parsed_medications[0]
    assert metformin.name == "Metformin"
    assert metformin.strength == "500mg"
    assert metformin.frequency.times_per_day == 2


def test_precautions_scenario(pipeline):
    """Medication in precautions and medications is attributed to precautions"""
    text = "PRECAUTIONS\nAvoid Aspirin 81mg\nMEDICATIONS\nAspirin 81mg once daily"
    result = pipeline.analyze(OCRResult(text=text, confidence=0.95))

    assert [m.name for m in result.parsed_medications] == ["Aspirin"]
    assert result.parsed_medications[0].source_section == SectionName.PRECAUTIONS
    assert [d.disease_id for d in result.detected_diseases] == ["heart-disease"]
    assert result.detected_diseases[0].source == DetectionSource.MEDICATION


@pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
def test_empty_text_raises(pipeline, text):
    """Empty OCR text aborts with no partial result"""
    with pytest.raises(EmptyInputError):
        pipeline.analyze({"text": text, "confidence": 0.9})


def test_empty_text_does_not_segment(pipeline):
    """Segmentation is never reached for empty input"""
    calls = []
    original = pipeline.extractor.extract_from_sections
    pipeline.extractor.extract_from_sections = lambda text: calls.append(text) or original(text)

    with pytest.raises(EmptyInputError):
        pipeline.analyze({"text": "  ", "confidence": 0.9})
    assert calls == []


@pytest.mark.parametrize("ocr_result,field", [
    ({"confidence": 0.9}, "text"),
    ({"text": 42, "confidence": 0.9}, "text"),
    ({"text": "Aspirin 81mg", "confidence": "high"}, "confidence"),
    ({"text": "Aspirin 81mg", "confidence": True}, "confidence"),
    ({"text": "Aspirin 81mg", "confidence": float("nan")}, "confidence"),
    ({"text": "Aspirin 81mg", "confidence": float("inf")}, "confidence"),
    ("Aspirin 81mg", "ocr_result"),
])
def test_invalid_input(pipeline, ocr_result, field):
    """Inputs that are not OCR results are rejected"""
    with pytest.raises(InvalidInputError) as excinfo:
        pipeline.analyze(ocr_result)
    assert excinfo.value.field_name == field


def test_out_of_range_confidence_is_clamped(pipeline, caplog):
    """OCR confidence outside [0, 1] is clamped with a warning"""
    with caplog.at_level(logging.WARNING):
        result = pipeline.analyze({"text": "Aspirin 81mg", "confidence": 1.7})

    assert result.confidence.ocr == 1.0
    assert result.ocr.confidence == 1.0
    assert "clamped" in caplog.text


def test_low_ocr_confidence_adds_precaution(pipeline):
    """Low OCR confidence is reported, not raised"""
    result = pipeline.analyze({"text": "Aspirin 81mg once daily", "confidence": 0.3})

    assert "low-ocr-confidence" in [p.id for p in result.precautions]
    assert result.confidence.ocr == pytest.approx(0.3)


def test_confidence_breakdown(pipeline, diabetes_text):
    """Overall is the weighted mix of OCR, disease and medication confidence"""
    result = pipeline.analyze({"text": diabetes_text, "confidence": 0.9})
    confidence = result.confidence

    assert confidence.disease_detection == pytest.approx(0.901)
    assert confidence.medication_parsing == pytest.approx(1.0)
    assert confidence.overall == pytest.approx(0.9 * 0.3 + 0.901 * 0.4 + 1.0 * 0.3)
    assert result.confidence_level == ConfidenceLevel.HIGH


def test_nothing_found(pipeline):
    """Text without medications or diseases still produces a result"""
    result = pipeline.analyze({"text": "Follow up in two weeks", "confidence": 0.9})

    assert result.detected_diseases == []
    assert result.parsed_medications == []
    assert result.precautions == []
    assert result.confidence.overall == pytest.approx(0.27)
    assert result.confidence_level == ConfidenceLevel.LOW


def test_result_is_pending(pipeline, diabetes_text):
    """Results wait for human confirmation"""
    result = pipeline.analyze({"text": diabetes_text, "confidence": 0.9})

    assert result.status == "pending"
    assert result.id
    assert result.analyzed_at is not None


def test_all_confidences_in_range(pipeline, sectioned_prescription_text):
    """Every emitted confidence lies in [0, 1]"""
    text = sectioned_prescription_text + "\nHistory of HTN, DM, CAD, high blood pressure, hypertension"
    result = pipeline.analyze({"text": text, "confidence": 0.8})

    assert result.detected_diseases
    for disease in result.detected_diseases:
        assert 0.0 <= disease.confidence <= 1.0
    for medication in result.parsed_medications:
        assert 0.0 <= medication.confidence <= 1.0
    assert 0.0 <= result.confidence.overall <= 1.0


def test_to_dict(pipeline, diabetes_text):
    """Serialised result uses plain JSON types"""
    data = pipeline.analyze({"text": diabetes_text, "confidence": 0.9}).to_dict()

    assert data["status"] == "pending"
    assert data["ocr"] == {"text": diabetes_text, "confidence": 0.9}
    assert data["detected_diseases"][0]["source"] == "combined"
    assert data["parsed_medications"][0]["frequency"] == {"type": "DAILY", "times_per_day": 2}
    assert data["parsed_medications"][0]["source_section"] == "general"
    assert data["confidence_level"] == "high"


def test_steps_are_logged(pipeline, diabetes_text, caplog):
    """Each stage is logged as a [STEP] line"""
    with caplog.at_level(logging.INFO, logger="prescription_analysis.core.pipeline"):
        pipeline.analyze({"text": diabetes_text, "confidence": 0.9})

    steps = [r.getMessage() for r in caplog.records if r.getMessage().startswith("[STEP]")]
    assert len(steps) == 7
    assert steps[1] == "[STEP] Medications extracted: Metformin"
