# ============================================================================
# src/prescription_analysis/processors/prescription/processor.py
# ============================================================================
"""
Section-Based Medication Extraction

Assembles medication candidates across prescription sections:
- Segments the text
- Extracts from precautions, then guidelines, then medications
- Keeps the first candidate per lowercase name
- Falls back to the general region only when nothing else was found
"""

from typing import Any, Dict, List, Optional
import logging
import re

from prescription_analysis.core.context.enums import SectionName
from prescription_analysis.core.context.parsed_medication import ParsedMedication
from .agents.medication_extractor import MedicationExtractor
from .agents.section_segmenter import SectionContent, SectionSegmenter

logger = logging.getLogger(__name__)


PRIORITY_SECTIONS = [
    SectionName.PRECAUTIONS,
    SectionName.GUIDELINES,
    SectionName.MEDICATIONS,
]

# Capitalised words ending in a common pharmacological suffix
DRUG_NAME_PATTERN = re.compile(
    r'\b([A-Z][a-z]+(?:in|ol|ide|ate|ine|one|pam|zole|mycin|cillin|cycline|'
    r'floxacin|statin|pril|sartan|dipine))\b'
)

SUMMARY_PREVIEW_CHARS = 200


class SectionBasedExtractor:
    """
    Extracts medications from a whole prescription using its sections.

    Output is deterministic: the same text always yields the same ordered
    list.
    """

    def __init__(
        self,
        segmenter: Optional[SectionSegmenter] = None,
        extractor: Optional[MedicationExtractor] = None
    ):
        self.segmenter = segmenter or SectionSegmenter()
        self.extractor = extractor or MedicationExtractor()

    def extract_from_sections(self, text: str) -> List[ParsedMedication]:
        """
        Extract unique medications from prescription text.

        Args:
            text: Full OCR text

        Returns:
            Medications in section priority order, one per lowercase name
        """
        sections = self.segmenter.identify_sections(text)
        medications: List[ParsedMedication] = []
        seen = set()

        for section in PRIORITY_SECTIONS:
            self._collect(sections, section, medications, seen)

        if not medications:
            self._collect(sections, SectionName.GENERAL, medications, seen)

        logger.info(f"Extracted {len(medications)} medications from sections")
        return medications

    def _collect(
        self,
        sections: SectionContent,
        section: SectionName,
        medications: List[ParsedMedication],
        seen: set
    ) -> None:
        content = sections.get(section)
        if not content:
            return

        for medication in self.extractor.parse_medications(content, source_section=section):
            if medication.key in seen:
                logger.debug(
                    f"Dropping duplicate {medication.name!r} from {section.value} section"
                )
                continue
            seen.add(medication.key)
            medications.append(medication)

    def extract_medication_names(self, text: str) -> List[str]:
        """
        Drug-like names mentioned in precautions and guidelines.

        Catches medications referenced without full details, e.g.
        "Do not combine with Simvastatin".
        """
        sections = self.segmenter.identify_sections(text)
        names: List[str] = []

        for section in (SectionName.PRECAUTIONS, SectionName.GUIDELINES):
            for match in DRUG_NAME_PATTERN.finditer(sections.get(section)):
                if match.group(1) not in names:
                    names.append(match.group(1))

        return names

    def get_section_summaries(self, text: str) -> List[Dict[str, Any]]:
        """
        Summary of each non-empty section for display.

        Returns:
            List of dicts with section title, content preview and
            medication count
        """
        sections = self.segmenter.identify_sections(text)
        summaries = []

        for section in SectionName:
            content = sections.get(section)
            if not content or not content.strip():
                continue

            preview = content[:SUMMARY_PREVIEW_CHARS]
            if len(content) > SUMMARY_PREVIEW_CHARS:
                preview += '...'

            summaries.append({
                'section': section.value.capitalize(),
                'content': preview,
                'medication_count': len(
                    self.extractor.parse_medications(content, source_section=section)
                ),
            })

        return summaries
