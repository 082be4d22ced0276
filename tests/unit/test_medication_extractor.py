# ============================================================================
# FILE: tests/unit/test_medication_extractor.py
# ============================================================================
"""
Unit tests for line-level medication extraction
"""

import pytest

from prescription_analysis.core.context import (
    AsNeededFrequency,
    CustomDaysFrequency,
    DailyFrequency,
    EveryXDaysFrequency,
    EveryXHoursFrequency,
    MedicineForm,
    ONCE_DAILY,
    SectionName,
    WeekdaysFrequency,
)
from prescription_analysis.processors.prescription.agents import MedicationExtractor


@pytest.fixture
def extractor():
    return MedicationExtractor()


def test_parse_full_line(extractor):
    """Name, strength and frequency from a typical line"""
    medication = extractor.parse_line("Metformin 500mg twice daily")

    assert medication.name == "Metformin"
    assert medication.strength == "500mg"
    assert medication.form == MedicineForm.TABLET
    assert medication.dosage.amount == 1
    assert medication.dosage.unit == "tablet"
    assert medication.frequency == DailyFrequency(times_per_day=2)
    assert medication.confidence == pytest.approx(1.0)


def test_default_frequency_lowers_confidence(extractor):
    """No frequency on the line gives the once-daily default and no bonus"""
    medication = extractor.parse_line("Aspirin 81mg")

    assert medication.frequency == ONCE_DAILY
    assert medication.confidence == pytest.approx(0.8)


def test_leading_imperative_is_not_part_of_name(extractor):
    """Boilerplate verbs are dropped from the name"""
    assert extractor.parse_line("Avoid Aspirin 81mg").name == "Aspirin"
    assert extractor.parse_line("Continue Lisinopril 10mg daily").name == "Lisinopril"


def test_multi_word_name(extractor):
    """Consecutive capitalised words form one name"""
    medication = extractor.parse_line("Metformin Hydrochloride 500mg bid")

    assert medication.name == "Metformin Hydrochloride"


def test_name_fallback_to_first_capitalised_word(extractor):
    """A name later in the line is still found"""
    medication = extractor.parse_line("take 2 tablets of Paracetamol 500mg every 6 hours")

    assert medication.name == "Paracetamol"
    assert medication.dosage.amount == 2
    assert medication.dosage.unit == "tablet"
    assert medication.frequency == EveryXHoursFrequency(interval=6)


@pytest.mark.parametrize("line", [
    "Take with food",
    "500mg twice daily",
    "vitamin d 1000 iu daily",
    "",
    "Dr. Smith, City Clinic",
])
def test_lines_without_name_or_strength_are_skipped(extractor, line):
    """Both a name and a strength are required"""
    assert extractor.parse_line(line) is None


@pytest.mark.parametrize("line,strength", [
    ("Insulin 10 units before meals", "10 units"),
    ("Levothyroxine 0.05mg in the morning", "0.05mg"),
    ("Potassium 20 mEq daily", "20 mEq"),
    ("Salbutamol 100mcg prn", "100mcg"),
    ("Lactulose 15ml at bedtime", "15ml"),
])
def test_strength_units(extractor, line, strength):
    """Recognised strength units"""
    assert extractor.parse_line(line).strength == strength


@pytest.mark.parametrize("line,form", [
    ("Amoxicillin 250mg capsules tds", MedicineForm.CAPSULE),
    ("Amoxicillin 250mg/5ml suspension", MedicineForm.LIQUID),
    ("Cough Syrup 5ml at bedtime", MedicineForm.LIQUID),
    ("Insulin 10 units injection", MedicineForm.INJECTION),
    ("Ventolin inhaler 100mcg prn", MedicineForm.OTHER),
    ("Diclofenac 1g cream", MedicineForm.OTHER),
    ("Lisinopril 10mg tablets", MedicineForm.TABLET),
])
def test_form_normalisation(extractor, line, form):
    """Form vocabulary is normalised to the five medicine forms"""
    assert extractor.parse_line(line).form == form


@pytest.mark.parametrize("text,expected", [
    ("once daily", DailyFrequency(times_per_day=1)),
    ("QD", DailyFrequency(times_per_day=1)),
    ("twice a day", DailyFrequency(times_per_day=2)),
    ("bd", DailyFrequency(times_per_day=2)),
    ("three times daily", DailyFrequency(times_per_day=3)),
    ("tid", DailyFrequency(times_per_day=3)),
    ("qds", DailyFrequency(times_per_day=4)),
    ("four times a day", DailyFrequency(times_per_day=4)),
    ("q8h", EveryXHoursFrequency(interval=8)),
    ("every 12 hours", EveryXHoursFrequency(interval=12)),
    ("every 4 hours as needed", EveryXHoursFrequency(interval=4)),
    ("as needed for pain", AsNeededFrequency()),
    ("PRN", AsNeededFrequency()),
    ("when required", AsNeededFrequency()),
    ("every 3 days", EveryXDaysFrequency(interval=3)),
    ("on weekdays", WeekdaysFrequency(times_per_day=1)),
    ("every Monday and Thursday", CustomDaysFrequency(days=("monday", "thursday"), times_per_day=1)),
    ("at 8:00 am and at 8:00 pm", DailyFrequency(times_per_day=None, specific_times=("08:00", "20:00"))),
    ("at 12:15 am", DailyFrequency(times_per_day=None, specific_times=("00:15",))),
    ("nothing here", ONCE_DAILY),
])
def test_extract_frequency(extractor, text, expected):
    """Frequency phrases, abbreviations, intervals, days and clock times"""
    assert extractor.extract_frequency(text) == expected


def test_abbreviations_match_whole_words_only(extractor):
    """'od' inside 'food' and 'qd' inside 'qds' are not matches"""
    assert extractor.extract_frequency("take with food every 2 days") == EveryXDaysFrequency(interval=2)
    assert extractor.extract_frequency("qds") == DailyFrequency(times_per_day=4)


def test_instructions_joined(extractor):
    """All instruction phrases on a line are kept in order"""
    medication = extractor.parse_line("Metformin 500mg twice daily after meals with water")

    assert medication.instructions == "after meals, with water"


def test_interval_with_prn_keeps_as_needed_note(extractor):
    """A PRN note next to a fixed interval survives in the instructions"""
    medication = extractor.parse_line("Ibuprofen 400mg every 6 hours as needed with food")

    assert medication.frequency == EveryXHoursFrequency(interval=6)
    assert medication.instructions == "with food, as needed"
    assert medication.as_needed


def test_plain_as_needed_has_no_extra_note(extractor):
    medication = extractor.parse_line("Salbutamol 100mcg prn")

    assert medication.frequency == AsNeededFrequency()
    assert medication.instructions == ""
    assert medication.as_needed


def test_no_instructions(extractor):
    """Missing instructions are an empty string"""
    assert extractor.parse_line("Aspirin 81mg once daily").instructions == ""


def test_explicit_dosage_unit(extractor):
    """'take N <unit>' keeps the unit"""
    medication = extractor.parse_line("Omeprazole 20mg take 1 capsule before meals")

    assert medication.dosage.amount == 1
    assert medication.dosage.unit == "capsule"


def test_parse_medications_multiple_lines(extractor):
    """Every parseable line yields a candidate, in order"""
    text = "Metformin 500mg bid\nTake with food\nLisinopril 10mg od"
    medications = extractor.parse_medications(text, source_section=SectionName.MEDICATIONS)

    assert [m.name for m in medications] == ["Metformin", "Lisinopril"]
    assert all(m.source_section == SectionName.MEDICATIONS for m in medications)


def test_confidence_bounds(extractor):
    """Confidence is always within [0, 1]"""
    lines = [
        "Metformin 500mg twice daily",
        "Aspirin 81mg",
        "Insulin 10 units every 8 hours",
        "Ventolin inhaler 100mcg prn",
    ]
    for line in lines:
        assert 0.0 <= extractor.parse_line(line).confidence <= 1.0
