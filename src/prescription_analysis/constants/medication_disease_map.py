# ============================================================================
# src/prescription_analysis/constants/medication_disease_map.py
# ============================================================================
"""
Medication -> Disease Map

Static table of which chronic conditions a medication is typically
prescribed for, with a prior likelihood and the drug class.
Keys are lowercase generic names.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class DiseaseMapping:
    disease_id: str
    disease_name: str
    likelihood: float
    medication_class: str


def _m(disease_id: str, disease_name: str, likelihood: float, medication_class: str) -> DiseaseMapping:
    return DiseaseMapping(disease_id, disease_name, likelihood, medication_class)


MEDICATION_DISEASE_MAP: Dict[str, List[DiseaseMapping]] = {
    # Diabetes
    "metformin": [_m("diabetes", "Diabetes", 0.95, "Biguanide")],
    "insulin": [_m("diabetes", "Diabetes", 0.98, "Insulin")],
    "glipizide": [_m("diabetes", "Diabetes", 0.90, "Sulfonylurea")],
    "glyburide": [_m("diabetes", "Diabetes", 0.90, "Sulfonylurea")],
    "glimepiride": [_m("diabetes", "Diabetes", 0.90, "Sulfonylurea")],
    "sitagliptin": [_m("diabetes", "Diabetes", 0.92, "DPP-4 Inhibitor")],
    "empagliflozin": [_m("diabetes", "Diabetes", 0.93, "SGLT2 Inhibitor")],

    # Hypertension
    "lisinopril": [_m("hypertension", "Hypertension", 0.90, "ACE Inhibitor")],
    "enalapril": [_m("hypertension", "Hypertension", 0.90, "ACE Inhibitor")],
    "ramipril": [_m("hypertension", "Hypertension", 0.90, "ACE Inhibitor")],
    "losartan": [_m("hypertension", "Hypertension", 0.88, "ARB")],
    "valsartan": [_m("hypertension", "Hypertension", 0.88, "ARB")],
    "amlodipine": [_m("hypertension", "Hypertension", 0.85, "Calcium Channel Blocker")],
    "nifedipine": [_m("hypertension", "Hypertension", 0.85, "Calcium Channel Blocker")],
    "hydrochlorothiazide": [_m("hypertension", "Hypertension", 0.80, "Diuretic")],
    "furosemide": [_m("hypertension", "Hypertension", 0.70, "Diuretic")],

    # Asthma
    "albuterol": [_m("asthma", "Asthma", 0.95, "Bronchodilator")],
    "salbutamol": [_m("asthma", "Asthma", 0.95, "Bronchodilator")],
    "fluticasone": [
        _m("asthma", "Asthma", 0.80, "Corticosteroid"),
        _m("copd", "COPD", 0.60, "Corticosteroid"),
    ],
    "budesonide": [
        _m("asthma", "Asthma", 0.80, "Corticosteroid"),
        _m("copd", "COPD", 0.60, "Corticosteroid"),
    ],
    "montelukast": [_m("asthma", "Asthma", 0.90, "Leukotriene Modifier")],

    # COPD
    "tiotropium": [_m("copd", "COPD", 0.95, "Anticholinergic")],
    "ipratropium": [_m("copd", "COPD", 0.90, "Anticholinergic")],

    # Heart disease
    "atorvastatin": [_m("heart-disease", "Heart Disease", 0.85, "Statin")],
    "simvastatin": [_m("heart-disease", "Heart Disease", 0.85, "Statin")],
    "rosuvastatin": [_m("heart-disease", "Heart Disease", 0.85, "Statin")],
    "aspirin": [_m("heart-disease", "Heart Disease", 0.70, "Antiplatelet")],
    "clopidogrel": [_m("heart-disease", "Heart Disease", 0.85, "Antiplatelet")],
    "metoprolol": [_m("heart-disease", "Heart Disease", 0.75, "Beta Blocker")],
    "carvedilol": [_m("heart-disease", "Heart Disease", 0.80, "Beta Blocker")],

    # Arthritis
    "ibuprofen": [_m("arthritis", "Arthritis", 0.70, "NSAID")],
    "naproxen": [_m("arthritis", "Arthritis", 0.75, "NSAID")],
    "celecoxib": [_m("arthritis", "Arthritis", 0.85, "COX-2 Inhibitor")],
    "methotrexate": [_m("arthritis", "Arthritis", 0.90, "DMARD")],

    # Thyroid
    "levothyroxine": [_m("thyroid-disorder", "Thyroid Disorders", 0.95, "Thyroid Hormone")],
    "liothyronine": [_m("thyroid-disorder", "Thyroid Disorders", 0.95, "Thyroid Hormone")],
    "methimazole": [_m("thyroid-disorder", "Thyroid Disorders", 0.90, "Antithyroid")],

    # Kidney disease
    "erythropoietin": [_m("kidney-disease", "Chronic Kidney Disease", 0.90, "ESA")],
    "sevelamer": [_m("kidney-disease", "Chronic Kidney Disease", 0.85, "Phosphate Binder")],

    # Epilepsy
    "levetiracetam": [_m("epilepsy", "Epilepsy", 0.95, "Anticonvulsant")],
    "valproate": [_m("epilepsy", "Epilepsy", 0.90, "Anticonvulsant")],
    "carbamazepine": [_m("epilepsy", "Epilepsy", 0.90, "Anticonvulsant")],
    "phenytoin": [_m("epilepsy", "Epilepsy", 0.90, "Anticonvulsant")],
    "lamotrigine": [_m("epilepsy", "Epilepsy", 0.88, "Anticonvulsant")],

    # Chronic pain
    "gabapentin": [_m("chronic-pain", "Chronic Pain Syndrome", 0.80, "Neuropathic Pain")],
    "pregabalin": [_m("chronic-pain", "Chronic Pain Syndrome", 0.85, "Neuropathic Pain")],
    "tramadol": [_m("chronic-pain", "Chronic Pain Syndrome", 0.75, "Opioid")],

    # Osteoporosis
    "alendronate": [_m("osteoporosis", "Osteoporosis", 0.95, "Bisphosphonate")],
    "risedronate": [_m("osteoporosis", "Osteoporosis", 0.95, "Bisphosphonate")],
    "ibandronate": [_m("osteoporosis", "Osteoporosis", 0.95, "Bisphosphonate")],

    # Depression
    "sertraline": [_m("depression", "Clinical Depression", 0.90, "SSRI")],
    "fluoxetine": [_m("depression", "Clinical Depression", 0.90, "SSRI")],
    "escitalopram": [_m("depression", "Clinical Depression", 0.90, "SSRI")],
    "venlafaxine": [_m("depression", "Clinical Depression", 0.88, "SNRI")],
    "duloxetine": [_m("depression", "Clinical Depression", 0.88, "SNRI")],
    "bupropion": [_m("depression", "Clinical Depression", 0.85, "NDRI")],
}
