# ============================================================================
# src/prescription_analysis/api/models.py
# ============================================================================
"""
Request models for the HTTP API.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from prescription_analysis.core.context.enums import MedicineForm


class AnalyzeRequest(BaseModel):
    """OCR output to analyze"""
    text: str = Field(..., description="Text recognised on the prescription")
    confidence: float = Field(..., allow_inf_nan=False, description="OCR confidence in [0, 1]")


class PersonalInfoModel(BaseModel):
    age: int = 0


class LifestyleModel(BaseModel):
    diet: str = "average"
    exercise_frequency: str = "weekly"
    smoking_status: str = "never"
    alcohol_consumption: str = "none"


class ExistingProfileModel(BaseModel):
    """Disease profile already stored for the user"""
    id: str
    user_id: str
    disease_id: str
    disease_name: str = ""
    personal_info: PersonalInfoModel = Field(default_factory=PersonalInfoModel)
    symptoms: List[str] = Field(default_factory=list)
    lifestyle: LifestyleModel = Field(default_factory=LifestyleModel)
    medication_history: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ExistingMedicineModel(BaseModel):
    """Medicine already stored for the user"""
    id: str
    user_id: str
    name: str
    strength: str = ""
    form: MedicineForm = MedicineForm.TABLET
    color_tag: str = "blue"
    stock_count: int = 0
    refill_threshold: int = 0
    instructions: Optional[str] = None
    created_at: Optional[datetime] = None


class ReconcileRequest(AnalyzeRequest):
    """OCR output plus the user's current records"""
    user_id: str = Field(..., description="Owner of the records")
    user_age: Optional[int] = Field(default=None, ge=0, le=130, description="Age for new disease profiles")
    existing_profiles: List[ExistingProfileModel] = Field(default_factory=list)
    existing_medicines: List[ExistingMedicineModel] = Field(default_factory=list)
