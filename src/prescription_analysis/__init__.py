# ============================================================================
# src/prescription_analysis/__init__.py
# ============================================================================
"""
Prescription Analysis Engine

Turns OCR text from a prescription into structured medications, detected
chronic diseases and a reconciliation plan against a user's records.
"""

__version__ = "1.0.0"
