# ============================================================================
# src/prescription_analysis/constants/__init__.py
# ============================================================================
"""
Convenient imports for all constants
"""

from .chronic_diseases import CHRONIC_DISEASES, get_disease_name, get_disease_category
from .disease_keywords import DISEASE_KEYWORDS, CLINICAL_CONTEXT_MARKERS
from .medication_disease_map import MEDICATION_DISEASE_MAP, DiseaseMapping
