# ============================================================================
# src/prescription_analysis/processors/__init__.py
# ============================================================================
"""
Text processors.
"""

from .prescription import SectionBasedExtractor

__all__ = ['SectionBasedExtractor']
