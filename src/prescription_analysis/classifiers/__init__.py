# ============================================================================
# src/prescription_analysis/classifiers/__init__.py
# ============================================================================
"""
Text classifiers.
"""

from .disease_keyword_matcher import DiseaseKeywordMatcher

__all__ = ['DiseaseKeywordMatcher']
