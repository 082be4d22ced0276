# ============================================================================
# src/prescription_analysis/core/context/parsed_medication.py
# ============================================================================
"""
Single medication candidate extracted from one prescription line
- Name, strength, form, dosage, frequency, instructions
- Confidence and the section it was found in
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from .enums import FrequencyType, MedicineForm, SectionName
from .frequency import Frequency, DailyFrequency

# Added to `instructions` when a PRN note accompanies a fixed frequency
AS_NEEDED_INSTRUCTION = "as needed"


@dataclass
class Dosage:
    amount: int = 1
    unit: str = "tablet"

    def to_dict(self) -> Dict[str, Any]:
        return {"amount": self.amount, "unit": self.unit}


@dataclass
class ParsedMedication:
    name: str
    strength: str
    form: MedicineForm = MedicineForm.TABLET
    dosage: Dosage = field(default_factory=Dosage)
    frequency: Frequency = field(default_factory=DailyFrequency)
    instructions: str = ""
    confidence: float = 0.0

    # Provenance
    source_section: SectionName = SectionName.GENERAL
    source_text: str = ""

    @property
    def key(self) -> str:
        """Identity used for de-duplication."""
        return self.name.lower()

    @property
    def as_needed(self) -> bool:
        """Taken only when required, alone or on top of an interval."""
        if self.frequency.type == FrequencyType.AS_NEEDED:
            return True
        return AS_NEEDED_INSTRUCTION in self.instructions.split(", ")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "strength": self.strength,
            "form": self.form.value,
            "dosage": self.dosage.to_dict(),
            "frequency": self.frequency.to_dict(),
            "instructions": self.instructions,
            "confidence": self.confidence,
            "source_section": self.source_section.value,
        }
