# ============================================================================
# src/prescription_analysis/reconciliation/__init__.py
# ============================================================================
"""
Reconciliation of analysis results against a user's existing records.
"""

from .records import DiseaseProfile, Medicine, Schedule, PersonalInfo, Lifestyle
from .instructions import (
    CreateDiseaseProfile,
    MergeDiseaseProfile,
    CreateMedicine,
    UpdateMedicineStock,
    CreateSchedule,
    MergeConflict,
    ReconciliationPlan,
)
from .schedule_builder import ScheduleBuilder
from .profile_reconciler import ProfileReconciler, COLOR_PALETTE

__all__ = [
    'DiseaseProfile',
    'Medicine',
    'Schedule',
    'PersonalInfo',
    'Lifestyle',
    'CreateDiseaseProfile',
    'MergeDiseaseProfile',
    'CreateMedicine',
    'UpdateMedicineStock',
    'CreateSchedule',
    'MergeConflict',
    'ReconciliationPlan',
    'ScheduleBuilder',
    'ProfileReconciler',
    'COLOR_PALETTE',
]
