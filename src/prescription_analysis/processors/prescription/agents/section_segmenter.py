# ============================================================================
# src/prescription_analysis/processors/prescription/agents/section_segmenter.py
# ============================================================================
"""
Section Segmentation Agent

Splits prescription text into named regions:
- precautions (warnings, contraindications, safety information)
- guidelines (instructions, directions, dosage and administration)
- medications (medicines, drugs, rx)
- general (everything before the first header)
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging
import re

from prescription_analysis.core.context.enums import SectionName
from prescription_analysis.utils.text_normalizer import normalize_line_endings

logger = logging.getLogger(__name__)


# Header lines must match in full (optional trailing colon/whitespace)
SECTION_PATTERNS = {
    SectionName.PRECAUTIONS: re.compile(
        r'^(precautions?|warnings?|cautions?|important\s+information|'
        r'safety\s+information|contraindications?)[\s:]*$',
        re.IGNORECASE
    ),
    SectionName.GUIDELINES: re.compile(
        r'^(guidelines?|instructions?|directions?|how\s+to\s+use|usage|'
        r'administration|dosage\s+and\s+administration)[\s:]*$',
        re.IGNORECASE
    ),
    SectionName.MEDICATIONS: re.compile(
        r'^(medications?|medicines?|drugs?|prescriptions?|rx|treatment)[\s:]*$',
        re.IGNORECASE
    ),
}


@dataclass
class SectionContent:
    """The four text buffers produced by segmentation."""
    precautions: str = ""
    guidelines: str = ""
    medications: str = ""
    general: str = ""
    header_found: bool = False

    def get(self, section: SectionName) -> str:
        return getattr(self, section.value)

    def has_sections(self) -> bool:
        return self.header_found

    def to_dict(self) -> Dict[str, str]:
        return {
            "precautions": self.precautions,
            "guidelines": self.guidelines,
            "medications": self.medications,
            "general": self.general,
        }


class SectionSegmenter:
    """
    Line-oriented state machine over prescription text.

    A header line closes the open buffer and opens the named one. Other
    non-empty lines go to the open buffer, or to `general` before the
    first header.
    """

    def __init__(self, patterns: Optional[Dict[SectionName, re.Pattern]] = None):
        self.patterns = patterns or SECTION_PATTERNS

    def match_header(self, line: str) -> Optional[SectionName]:
        """Return the section a header line opens, or None."""
        for section, pattern in self.patterns.items():
            if pattern.match(line):
                return section
        return None

    def identify_sections(self, text: str) -> SectionContent:
        """
        Segment text into precautions / guidelines / medications / general.

        When no header is recognised the whole original text is returned
        as `general`.
        """
        buffers: Dict[SectionName, List[str]] = {
            section: [] for section in SectionName
        }
        current: Optional[SectionName] = None
        header_found = False

        for raw_line in normalize_line_endings(text or "").split('\n'):
            line = raw_line.strip()

            section = self.match_header(line)
            if section is not None:
                header_found = True
                current = section
                continue

            if not line:
                continue

            buffers[current or SectionName.GENERAL].append(line)

        if not header_found:
            logger.debug("No section headers found, using whole text as general")
            return SectionContent(general=text or "")

        content = SectionContent(
            precautions='\n'.join(buffers[SectionName.PRECAUTIONS]),
            guidelines='\n'.join(buffers[SectionName.GUIDELINES]),
            medications='\n'.join(buffers[SectionName.MEDICATIONS]),
            general='\n'.join(buffers[SectionName.GENERAL]),
            header_found=True,
        )
        logger.debug(
            "Sections identified: %s",
            {k: len(v) for k, v in content.to_dict().items()}
        )
        return content

    def has_sections(self, content: SectionContent) -> bool:
        """True when at least one header line was recognised."""
        return content.has_sections()
