# ============================================================================
# src/prescription_analysis/processors/prescription/agents/__init__.py
# ============================================================================
"""
Prescription processing agents.
"""

from .section_segmenter import SectionSegmenter, SectionContent
from .medication_extractor import MedicationExtractor

__all__ = [
    'SectionSegmenter',
    'SectionContent',
    'MedicationExtractor',
]
