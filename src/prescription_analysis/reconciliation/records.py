# ============================================================================
# src/prescription_analysis/reconciliation/records.py
# ============================================================================
"""
Persisted-entity snapshots

The persistence layer owns these records. The reconciler reads existing
ones and describes new or updated ones; it never stores anything.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from prescription_analysis.core.context.enums import FrequencyType, MedicineForm


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are taken to be UTC."""
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class PersonalInfo:
    age: int

    def to_dict(self) -> Dict[str, Any]:
        return {"age": self.age}


@dataclass
class Lifestyle:
    diet: str = "average"
    exercise_frequency: str = "weekly"
    smoking_status: str = "never"
    alcohol_consumption: str = "none"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diet": self.diet,
            "exercise_frequency": self.exercise_frequency,
            "smoking_status": self.smoking_status,
            "alcohol_consumption": self.alcohol_consumption,
        }


@dataclass
class DiseaseProfile:
    id: str
    user_id: str
    disease_id: str
    disease_name: str
    personal_info: PersonalInfo
    symptoms: List[str] = field(default_factory=list)
    lifestyle: Lifestyle = field(default_factory=Lifestyle)
    medication_history: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.created_at = ensure_utc(self.created_at)
        self.updated_at = ensure_utc(self.updated_at)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "disease_id": self.disease_id,
            "disease_name": self.disease_name,
            "personal_info": self.personal_info.to_dict(),
            "symptoms": list(self.symptoms),
            "lifestyle": self.lifestyle.to_dict(),
            "medication_history": self.medication_history,
            "created_at": _isoformat(self.created_at),
            "updated_at": _isoformat(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiseaseProfile":
        personal = data.get("personal_info") or {}
        lifestyle = data.get("lifestyle") or {}
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            disease_id=data["disease_id"],
            disease_name=data.get("disease_name", data["disease_id"]),
            personal_info=PersonalInfo(age=personal.get("age", 0)),
            symptoms=list(data.get("symptoms") or []),
            lifestyle=Lifestyle(**lifestyle),
            medication_history=data.get("medication_history") or "",
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass
class Medicine:
    id: str
    user_id: str
    name: str
    strength: str
    form: MedicineForm = MedicineForm.TABLET
    color_tag: str = "blue"
    stock_count: int = 0
    refill_threshold: int = 0
    instructions: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        self.form = MedicineForm(self.form)
        self.created_at = ensure_utc(self.created_at)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "strength": self.strength,
            "form": self.form.value,
            "color_tag": self.color_tag,
            "stock_count": self.stock_count,
            "refill_threshold": self.refill_threshold,
            "instructions": self.instructions,
            "created_at": _isoformat(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Medicine":
        return cls(
            id=data["id"],
            user_id=data["user_id"],
            name=data["name"],
            strength=data.get("strength", ""),
            form=data.get("form", MedicineForm.TABLET.value),
            color_tag=data.get("color_tag", "blue"),
            stock_count=data.get("stock_count", 0),
            refill_threshold=data.get("refill_threshold", 0),
            instructions=data.get("instructions"),
            created_at=data.get("created_at"),
        )


@dataclass
class Schedule:
    id: str
    medicine_id: str
    frequency_type: FrequencyType
    times_of_day: List[str] = field(default_factory=list)
    interval_hours: Optional[int] = None
    interval_days: Optional[int] = None
    days_of_week: Optional[List[str]] = None
    dosage_amount: int = 1
    dosage_unit: str = "tablet"
    start_date: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "medicine_id": self.medicine_id,
            "frequency_type": self.frequency_type.value,
            "times_of_day": list(self.times_of_day),
            "interval_hours": self.interval_hours,
            "interval_days": self.interval_days,
            "days_of_week": list(self.days_of_week) if self.days_of_week is not None else None,
            "dosage_amount": self.dosage_amount,
            "dosage_unit": self.dosage_unit,
            "start_date": _isoformat(self.start_date),
        }
