# ============================================================================
# src/prescription_analysis/reconciliation/instructions.py
# ============================================================================
"""
Reconciliation instructions

What the persistence layer should do with an analysis result:
- CreateDiseaseProfile / MergeDiseaseProfile
- CreateMedicine / UpdateMedicineStock
- CreateSchedule
- MergeConflict records for ambiguous matches
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from .records import DiseaseProfile, Medicine, Schedule


@dataclass
class CreateDiseaseProfile:
    profile: DiseaseProfile

    action = "create_disease_profile"

    def to_dict(self) -> Dict[str, Any]:
        return {"action": self.action, "profile": self.profile.to_dict()}


@dataclass
class MergeDiseaseProfile:
    existing_id: str
    profile: DiseaseProfile

    action = "merge_disease_profile"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "action": self.action,
            "existing_id": self.existing_id,
            "profile": self.profile.to_dict(),
        }


@dataclass
class CreateMedicine:
    medicine: Medicine

    action = "create_medicine"

    def to_dict(self) -> Dict[str, Any]:
        return {"action": self.action, "medicine": self.medicine.to_dict()}


@dataclass
class UpdateMedicineStock:
    medicine_id: str
    added_quantity: int
    new_stock_count: int

    action = "update_medicine_stock"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "action": self.action,
            "medicine_id": self.medicine_id,
            "added_quantity": self.added_quantity,
            "new_stock_count": self.new_stock_count,
        }


@dataclass
class CreateSchedule:
    schedule: Schedule

    action = "create_schedule"

    def to_dict(self) -> Dict[str, Any]:
        return {"action": self.action, "schedule": self.schedule.to_dict()}


@dataclass
class MergeConflict:
    """More than one existing record matched; `chosen_id` was used."""
    entity_type: str  # "disease_profile" or "medicine"
    key: str
    candidate_ids: List[str]
    chosen_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "entity_type": self.entity_type,
            "key": self.key,
            "candidate_ids": list(self.candidate_ids),
            "chosen_id": self.chosen_id,
        }


ProfileInstruction = Union[CreateDiseaseProfile, MergeDiseaseProfile]
MedicineInstruction = Union[CreateMedicine, UpdateMedicineStock]


@dataclass
class ReconciliationPlan:
    user_id: str
    profiles: List[ProfileInstruction] = field(default_factory=list)
    medicines: List[MedicineInstruction] = field(default_factory=list)
    schedules: List[CreateSchedule] = field(default_factory=list)
    conflicts: List[MergeConflict] = field(default_factory=list)

    # Nothing usable was extracted; ask the user to enter data manually
    requires_manual_entry: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.profiles or self.medicines or self.schedules)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "profiles": [i.to_dict() for i in self.profiles],
            "medicines": [i.to_dict() for i in self.medicines],
            "schedules": [i.to_dict() for i in self.schedules],
            "conflicts": [c.to_dict() for c in self.conflicts],
            "requires_manual_entry": self.requires_manual_entry,
        }
