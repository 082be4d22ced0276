# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import itertools
from datetime import datetime, timezone

import pytest

from prescription_analysis.core.context import (
    DetectedDisease,
    DetectionSource,
    Dosage,
    DailyFrequency,
    MedicineForm,
    ParsedMedication,
    SectionName,
)
from prescription_analysis.core.pipeline import PrescriptionAnalysisPipeline
from prescription_analysis.reconciliation import ProfileReconciler


FIXED_NOW = datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def diabetes_text():
    """Explicit diagnosis followed by a medication line"""
    return "Patient has Type 2 Diabetes.\nMetformin 500mg twice daily"


@pytest.fixture
def sectioned_prescription_text():
    """Prescription with all three named sections and a header block"""
    return (
        "City Clinic\n"
        "Dr. A. Smith\n"
        "\n"
        "PRECAUTIONS:\n"
        "Avoid Aspirin 81mg with alcohol\n"
        "\n"
        "Instructions\n"
        "Take Lisinopril 10mg once daily in the morning\n"
        "\n"
        "MEDICATIONS\n"
        "Aspirin 81mg once daily\n"
        "Metformin 500mg twice daily after meals\n"
        "Atorvastatin 20mg at bedtime\n"
    )


@pytest.fixture
def pipeline():
    """Pipeline with default settings"""
    return PrescriptionAnalysisPipeline()


@pytest.fixture
def fixed_now():
    """Clock value used by the reconciler fixture"""
    return FIXED_NOW


@pytest.fixture
def reconciler():
    """Reconciler with sequential ids and a fixed clock"""
    counter = itertools.count(1)
    return ProfileReconciler(
        id_factory=lambda: f"id-{next(counter)}",
        now=lambda: FIXED_NOW,
    )


@pytest.fixture
def make_medication():
    """Factory for parsed medications"""
    def _make(name="Metformin", strength="500mg", frequency=None, **kwargs):
        return ParsedMedication(
            name=name,
            strength=strength,
            form=kwargs.pop("form", MedicineForm.TABLET),
            dosage=kwargs.pop("dosage", Dosage()),
            frequency=frequency or DailyFrequency(times_per_day=2),
            instructions=kwargs.pop("instructions", ""),
            confidence=kwargs.pop("confidence", 1.0),
            source_section=kwargs.pop("source_section", SectionName.MEDICATIONS),
        )
    return _make


@pytest.fixture
def make_disease():
    """Factory for detected diseases"""
    def _make(disease_id="hypertension", confidence=0.8, **kwargs):
        return DetectedDisease(
            disease_id=disease_id,
            disease_name=kwargs.pop("disease_name", disease_id.title()),
            confidence=confidence,
            matched_terms=kwargs.pop("matched_terms", [disease_id]),
            context=kwargs.pop("context", ""),
            source=kwargs.pop("source", DetectionSource.EXPLICIT),
            related_medications=kwargs.pop("related_medications", []),
        )
    return _make
