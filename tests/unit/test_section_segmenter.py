# ============================================================================
# FILE: tests/unit/test_section_segmenter.py
# ============================================================================
"""
Unit tests for section segmentation
"""

import pytest

from prescription_analysis.core.context import SectionName
from prescription_analysis.processors.prescription.agents import SectionSegmenter


@pytest.fixture
def segmenter():
    return SectionSegmenter()


def test_no_headers_returns_whole_text_as_general(segmenter):
    """Without headers the original text is returned untouched"""
    text = "  Metformin 500mg twice daily\n\nLisinopril 10mg  "
    sections = segmenter.identify_sections(text)

    assert sections.general == text
    assert sections.precautions == ""
    assert sections.guidelines == ""
    assert sections.medications == ""
    assert not segmenter.has_sections(sections)


def test_lines_before_first_header_go_to_general(segmenter):
    """Preamble goes to general, section lines to their buffers"""
    text = "City Clinic\nRx\nMetformin 500mg\nWarnings:\nNo alcohol"
    sections = segmenter.identify_sections(text)

    assert sections.general == "City Clinic"
    assert sections.medications == "Metformin 500mg"
    assert sections.precautions == "No alcohol"
    assert segmenter.has_sections(sections)


@pytest.mark.parametrize("header,section", [
    ("PRECAUTIONS", SectionName.PRECAUTIONS),
    ("Warning:", SectionName.PRECAUTIONS),
    ("Contraindications", SectionName.PRECAUTIONS),
    ("Important Information", SectionName.PRECAUTIONS),
    ("Directions:", SectionName.GUIDELINES),
    ("Dosage and Administration", SectionName.GUIDELINES),
    ("how to use", SectionName.GUIDELINES),
    ("Medicines", SectionName.MEDICATIONS),
    ("RX:", SectionName.MEDICATIONS),
    ("Treatment", SectionName.MEDICATIONS),
])
def test_header_synonyms(segmenter, header, section):
    """Header synonyms map to their section"""
    assert segmenter.match_header(header) == section


def test_header_must_match_whole_line(segmenter):
    """A header word inside a sentence is not a header"""
    assert segmenter.match_header("Warnings apply to this drug") is None
    assert segmenter.match_header("Take as per instructions") is None


def test_sections_are_mutually_exclusive(segmenter):
    """Each line ends up in exactly one buffer"""
    text = (
        "Header line\n"
        "PRECAUTIONS\nLine A\n"
        "GUIDELINES\nLine B\n"
        "MEDICATIONS\nLine C\nLine D"
    )
    sections = segmenter.identify_sections(text)
    buffers = [sections.precautions, sections.guidelines, sections.medications, sections.general]
    lines = [line for buffer in buffers for line in buffer.split("\n") if line]

    assert sorted(lines) == ["Header line", "Line A", "Line B", "Line C", "Line D"]
    assert sections.medications == "Line C\nLine D"


def test_crlf_and_blank_lines(segmenter):
    """CRLF line endings and blank lines are handled"""
    text = "MEDICATIONS\r\n\r\n  Aspirin 81mg  \r\nMetformin 500mg\r\n"
    sections = segmenter.identify_sections(text)

    assert sections.medications == "Aspirin 81mg\nMetformin 500mg"


def test_reopened_section_accumulates(segmenter):
    """A section opened twice keeps the lines of both blocks"""
    text = "MEDICATIONS\nAspirin 81mg\nWARNINGS\nNo alcohol\nMEDICATIONS\nMetformin 500mg"
    sections = segmenter.identify_sections(text)

    assert sections.medications == "Aspirin 81mg\nMetformin 500mg"
    assert sections.precautions == "No alcohol"


def test_empty_text(segmenter):
    """Empty text gives four empty buffers"""
    sections = segmenter.identify_sections("")

    assert sections.to_dict() == {
        "precautions": "",
        "guidelines": "",
        "medications": "",
        "general": "",
    }
