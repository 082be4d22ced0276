# ============================================================================
# src/prescription_analysis/processors/prescription/__init__.py
# ============================================================================
"""
Prescription processing module.
"""

from .processor import SectionBasedExtractor

__all__ = ['SectionBasedExtractor']
