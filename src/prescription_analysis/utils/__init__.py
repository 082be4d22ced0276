# ============================================================================
# src/prescription_analysis/utils/__init__.py
# ============================================================================
"""
Shared utilities: exceptions, logging setup, text normalization.
"""

from .exceptions import PrescriptionAnalysisError, EmptyInputError, InvalidInputError
from .logging import setup_logging, JsonFormatter
from .text_normalizer import (
    normalize_text,
    normalize_line_endings,
    whole_word_pattern,
    unique_preserving_order,
)

__all__ = [
    'PrescriptionAnalysisError',
    'EmptyInputError',
    'InvalidInputError',
    'setup_logging',
    'JsonFormatter',
    'normalize_text',
    'normalize_line_endings',
    'whole_word_pattern',
    'unique_preserving_order',
]
