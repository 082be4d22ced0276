# ============================================================================
# src/prescription_analysis/api/__init__.py
# ============================================================================
"""
HTTP API for the prescription analysis engine.
"""
