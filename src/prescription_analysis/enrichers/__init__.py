# ============================================================================
# src/prescription_analysis/enrichers/__init__.py
# ============================================================================
"""
Enrichers add derived information on top of extracted data:
- Diseases inferred from medications
- Static precautions
"""

from .medication_disease_inferencer import MedicationDiseaseInferencer
from .precaution_generator import PrecautionGenerator

__all__ = [
    'MedicationDiseaseInferencer',
    'PrecautionGenerator',
]
