# ============================================================================
# src/prescription_analysis/constants/chronic_diseases.py
# ============================================================================
"""
Chronic Disease Catalogue
- Stable disease ids used as keys across all dictionaries
- Display names and categories
"""

from typing import Dict, Optional

CHRONIC_DISEASES: Dict[str, Dict[str, str]] = {
    "diabetes": {"name": "Diabetes", "category": "metabolic"},
    "hypertension": {"name": "Hypertension", "category": "cardiovascular"},
    "asthma": {"name": "Asthma", "category": "respiratory"},
    "copd": {"name": "COPD", "category": "respiratory"},
    "heart-disease": {"name": "Heart Disease", "category": "cardiovascular"},
    "arthritis": {"name": "Arthritis", "category": "musculoskeletal"},
    "thyroid-disorder": {"name": "Thyroid Disorders", "category": "endocrine"},
    "kidney-disease": {"name": "Chronic Kidney Disease", "category": "renal"},
    "epilepsy": {"name": "Epilepsy", "category": "neurological"},
    "chronic-pain": {"name": "Chronic Pain Syndrome", "category": "other"},
    "osteoporosis": {"name": "Osteoporosis", "category": "musculoskeletal"},
    "depression": {"name": "Clinical Depression", "category": "neurological"},
}


def get_disease_name(disease_id: str) -> str:
    """Display name for a disease id; unknown ids fall back to the id itself."""
    disease = CHRONIC_DISEASES.get(disease_id)
    return disease["name"] if disease else disease_id


def get_disease_category(disease_id: str) -> Optional[str]:
    disease = CHRONIC_DISEASES.get(disease_id)
    return disease["category"] if disease else None
