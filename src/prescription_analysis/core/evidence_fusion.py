# ============================================================================
# src/prescription_analysis/core/evidence_fusion.py
# ============================================================================
"""
Evidence Fusion

Merges explicitly detected diseases with diseases inferred from
medications, one entry per disease id:

- Both sources:  confidence = min(explicit * 0.7 + inferred * 0.3, 1.0),
                 source = combined
- Explicit only: unchanged, source = explicit
- Inferred only: unchanged, source = medication
"""

from dataclasses import replace
from typing import Dict, List
import logging

from prescription_analysis.core.context.detected_disease import DetectedDisease
from prescription_analysis.core.context.enums import DetectionSource
from prescription_analysis.utils.text_normalizer import unique_preserving_order

logger = logging.getLogger(__name__)


EXPLICIT_WEIGHT = 0.7
INFERRED_WEIGHT = 0.3


class EvidenceFusion:

    def combine(
        self,
        explicit: List[DetectedDisease],
        inferred: List[DetectedDisease]
    ) -> List[DetectedDisease]:
        """
        Fuse explicit and inferred detections.

        Inputs are not modified.

        Returns:
            One entry per disease id, highest confidence first (stable)
        """
        fused: Dict[str, DetectedDisease] = {}

        for disease in explicit:
            fused[disease.disease_id] = replace(
                disease,
                source=DetectionSource.EXPLICIT,
                matched_terms=list(disease.matched_terms),
                related_medications=list(disease.related_medications),
            )

        for disease in inferred:
            existing = fused.get(disease.disease_id)

            if existing is None:
                fused[disease.disease_id] = replace(
                    disease,
                    source=DetectionSource.MEDICATION,
                    matched_terms=list(disease.matched_terms),
                    related_medications=list(disease.related_medications),
                )
                continue

            combined = existing.confidence * EXPLICIT_WEIGHT + disease.confidence * INFERRED_WEIGHT
            fused[disease.disease_id] = replace(
                existing,
                confidence=min(combined, 1.0),
                source=DetectionSource.COMBINED,
                matched_terms=unique_preserving_order(
                    existing.matched_terms + disease.matched_terms
                ),
                related_medications=unique_preserving_order(
                    existing.related_medications + disease.related_medications
                ),
            )
            logger.debug(
                f"Combined {disease.disease_id}: explicit={existing.confidence:.2f} "
                f"inferred={disease.confidence:.2f} -> {combined:.2f}"
            )

        return sorted(fused.values(), key=lambda d: d.confidence, reverse=True)
