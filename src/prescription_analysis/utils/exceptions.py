# ============================================================================
# src/prescription_analysis/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for the prescription analysis engine.

Only input problems are raised. Everything downstream of a valid input
(unparseable lines, unmatched diseases, ambiguous merges) degrades to
"absent from output" and is reported through confidence scores,
precautions and reconciliation records instead.
"""


class PrescriptionAnalysisError(Exception):
    """Base exception for all prescription analysis errors."""
    pass


class EmptyInputError(PrescriptionAnalysisError):
    """OCR produced no usable text; the analysis attempt is aborted."""

    def __init__(self, message: str = "No text found in prescription. Please try a clearer image."):
        super().__init__(message)


class InvalidInputError(PrescriptionAnalysisError):
    """Input does not have the shape of an OCR result."""

    def __init__(self, message: str, field_name: str):
        super().__init__(message)
        self.field_name = field_name
