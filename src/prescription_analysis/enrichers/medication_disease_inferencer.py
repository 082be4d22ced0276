# ============================================================================
# src/prescription_analysis/enrichers/medication_disease_inferencer.py
# ============================================================================
"""
Medication -> Disease Inference

Infers chronic conditions from the medications on a prescription using
the static medication map.

Lookup:
- Exact match on the lowercase name
- Otherwise the first table key contained in the name (or containing it)

Each additional medication pointing at the same disease raises its
confidence by 0.1, capped at 1.0.
"""

from typing import Dict, List, Optional
import logging

from prescription_analysis.constants.medication_disease_map import (
    MEDICATION_DISEASE_MAP,
    DiseaseMapping,
)
from prescription_analysis.core.context.detected_disease import DetectedDisease
from prescription_analysis.core.context.enums import DetectionSource

logger = logging.getLogger(__name__)


CORROBORATION_BOOST = 0.1

# Shorter side of a containment match must be at least this long, so that
# fragments like "in" do not hit "insulin"
MIN_PARTIAL_MATCH_LENGTH = 4


class MedicationDiseaseInferencer:
    """
    Maps medication names to the diseases they are usually prescribed for.
    """

    def __init__(self, medication_map: Optional[Dict[str, List[DiseaseMapping]]] = None):
        self.medication_map = medication_map if medication_map is not None else MEDICATION_DISEASE_MAP

    def map_medication_to_diseases(self, medication_name: str) -> List[DiseaseMapping]:
        """
        Candidate diseases for one medication.

        Args:
            medication_name: Medication name (any case)

        Returns:
            Disease mappings, empty when the medication is unknown
        """
        name = (medication_name or "").lower().strip()
        if not name:
            return []

        if name in self.medication_map:
            return self.medication_map[name]

        for key, mappings in self.medication_map.items():
            if min(len(key), len(name)) < MIN_PARTIAL_MATCH_LENGTH:
                continue
            if key in name or name in key:
                logger.debug(f"Partial medication match: {name!r} -> {key!r}")
                return mappings

        return []

    def infer_diseases_from_medications(self, medication_names: List[str]) -> List[DetectedDisease]:
        """
        Infer diseases from a list of medication names.

        Args:
            medication_names: Lowercase medication names

        Returns:
            Inferred diseases, highest confidence first
        """
        inferred: Dict[str, DetectedDisease] = {}

        for medication in medication_names:
            for mapping in self.map_medication_to_diseases(medication):
                existing = inferred.get(mapping.disease_id)

                if existing is None:
                    inferred[mapping.disease_id] = DetectedDisease(
                        disease_id=mapping.disease_id,
                        disease_name=mapping.disease_name,
                        confidence=mapping.likelihood,
                        matched_terms=[mapping.medication_class],
                        context=f"Inferred from medication: {medication}",
                        source=DetectionSource.MEDICATION,
                        related_medications=[medication],
                    )
                    continue

                # Same medication listed twice is not corroboration
                if medication in existing.related_medications:
                    continue

                existing.confidence = min(existing.confidence + CORROBORATION_BOOST, 1.0)
                existing.related_medications.append(medication)
                if mapping.medication_class not in existing.matched_terms:
                    existing.matched_terms.append(mapping.medication_class)

        results = sorted(inferred.values(), key=lambda d: d.confidence, reverse=True)
        logger.info(
            f"Inferred {len(results)} diseases from {len(medication_names)} medications"
        )
        return results
