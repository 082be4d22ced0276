# ============================================================================
# src/prescription_analysis/constants/disease_keywords.py
# ============================================================================
"""
Disease Keyword Dictionary

Three tiers per disease, weighted differently by the keyword matcher:
- keywords: the condition's own names
- abbreviations: clinical shorthand (HTN, DM, CKD ...)
- related_terms: findings and vocabulary that suggest the condition
"""

from typing import Dict, List

DISEASE_KEYWORDS: Dict[str, Dict[str, List[str]]] = {
    "diabetes": {
        "keywords": ["diabetes", "diabetic", "hyperglycemia", "blood sugar", "glucose"],
        "abbreviations": ["dm", "t1d", "t2d", "iddm", "niddm"],
        "related_terms": [
            "insulin resistance", "high blood sugar", "elevated glucose",
            "type 1", "type 2", "type i", "type ii",
        ],
    },
    "hypertension": {
        "keywords": ["hypertension", "high blood pressure", "elevated blood pressure"],
        "abbreviations": ["htn", "bp", "hbp"],
        "related_terms": ["systolic", "diastolic", "blood pressure control", "elevated bp"],
    },
    "asthma": {
        "keywords": ["asthma", "asthmatic", "bronchial asthma"],
        "abbreviations": [],
        "related_terms": ["wheezing", "bronchospasm", "reactive airway", "airway inflammation"],
    },
    "copd": {
        "keywords": ["copd", "chronic obstructive pulmonary disease", "emphysema", "chronic bronchitis"],
        "abbreviations": ["copd", "coad"],
        "related_terms": ["obstructive lung disease", "chronic airway obstruction"],
    },
    "heart-disease": {
        "keywords": [
            "heart disease", "coronary artery disease", "cardiac disease",
            "cardiovascular disease", "heart failure", "chf",
        ],
        "abbreviations": ["cad", "cvd", "chf", "ihd"],
        "related_terms": ["coronary", "myocardial", "angina", "cardiac", "congestive heart failure"],
    },
    "arthritis": {
        "keywords": ["arthritis", "osteoarthritis", "rheumatoid arthritis", "joint inflammation"],
        "abbreviations": ["oa", "ra"],
        "related_terms": ["joint pain", "arthritic", "inflammatory arthritis", "degenerative joint"],
    },
    "thyroid-disorder": {
        "keywords": ["thyroid disorder", "hypothyroidism", "hyperthyroidism", "thyroid disease"],
        "abbreviations": ["hypo", "hyper"],
        "related_terms": ["thyroid", "tsh", "thyroid hormone", "goiter", "thyroiditis"],
    },
    "kidney-disease": {
        "keywords": [
            "kidney disease", "chronic kidney disease", "renal disease",
            "renal failure", "nephropathy",
        ],
        "abbreviations": ["ckd", "esrd", "arf"],
        "related_terms": ["renal", "kidney function", "creatinine", "dialysis", "nephrotic"],
    },
    "epilepsy": {
        "keywords": ["epilepsy", "seizure disorder", "convulsions"],
        "abbreviations": [],
        "related_terms": ["seizure", "epileptic", "convulsive", "anticonvulsant"],
    },
    "chronic-pain": {
        "keywords": ["chronic pain", "persistent pain", "pain syndrome"],
        "abbreviations": [],
        "related_terms": ["chronic pain management", "pain control", "neuropathic pain", "fibromyalgia"],
    },
    "osteoporosis": {
        "keywords": ["osteoporosis", "bone loss", "low bone density"],
        "abbreviations": [],
        "related_terms": ["osteopenia", "bone mineral density", "fracture risk", "bone health"],
    },
    "depression": {
        "keywords": ["depression", "major depressive disorder", "clinical depression"],
        "abbreviations": ["mdd"],
        "related_terms": ["depressive", "mood disorder", "antidepressant", "mental health"],
    },
}

# Words near a matched term that indicate a clinical statement rather than a
# passing mention
CLINICAL_CONTEXT_MARKERS: List[str] = [
    "diagnosis", "prescribed", "treatment", "condition", "patient", "history",
]
