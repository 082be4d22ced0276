# ============================================================================
# src/prescription_analysis/reconciliation/profile_reconciler.py
# ============================================================================
"""
Profile Reconciler

Matches an analysis result against a user's existing records and
describes the writes needed, without performing any of them.

Disease profiles:
- Same (user, disease_id) on file -> merge (medication history appended)
- Otherwise -> create with placeholder personal info and lifestyle

Medicines:
- Same (user, lowercase name) on file -> add restock quantity
- Otherwise -> create with a round-robin colour tag

Every created or matched medicine gets one schedule.

When several existing records match, the earliest created wins and a
MergeConflict is recorded on the plan. Matching is a linear scan over the
user's records.

Callers must not apply two plans for the same user concurrently.
"""

from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence, TypeVar
import logging
import uuid

from prescription_analysis.config import ReconciliationSettings, reconciliation_settings
from prescription_analysis.core.context.detected_disease import DetectedDisease
from prescription_analysis.core.context.parsed_medication import ParsedMedication
from .instructions import (
    CreateDiseaseProfile,
    MergeDiseaseProfile,
    CreateMedicine,
    UpdateMedicineStock,
    CreateSchedule,
    MergeConflict,
    ReconciliationPlan,
)
from .records import DiseaseProfile, Lifestyle, Medicine, PersonalInfo
from .schedule_builder import ScheduleBuilder

logger = logging.getLogger(__name__)


COLOR_PALETTE = ["blue", "green", "purple", "orange", "pink", "teal", "red", "yellow"]

HISTORY_SEPARATOR = ", "

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)

T = TypeVar("T", DiseaseProfile, Medicine)


def _default_id() -> str:
    return str(uuid.uuid4())


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ProfileReconciler:
    """
    Produces a ReconciliationPlan from fused diseases and parsed medications.

    `id_factory` and `now` are injectable so plans can be reproduced in
    tests.
    """

    def __init__(
        self,
        settings: Optional[ReconciliationSettings] = None,
        schedule_builder: Optional[ScheduleBuilder] = None,
        id_factory: Callable[[], str] = _default_id,
        now: Callable[[], datetime] = _utc_now,
    ):
        self.settings = settings or reconciliation_settings
        self.schedule_builder = schedule_builder or ScheduleBuilder(self.settings)
        self.id_factory = id_factory
        self.now = now

    def reconcile(
        self,
        diseases: List[DetectedDisease],
        medications: List[ParsedMedication],
        user_id: str,
        existing_profiles: Sequence[DiseaseProfile] = (),
        existing_medicines: Sequence[Medicine] = (),
        user_age: Optional[int] = None,
    ) -> ReconciliationPlan:
        """
        Build the create / merge plan for one analysis result.

        Args:
            diseases: Fused disease detections
            medications: Parsed medications
            user_id: Owner of the records
            existing_profiles: User's disease profiles (read-only)
            existing_medicines: User's medicines (read-only)
            user_age: Age for new profiles, defaults to DEFAULT_PATIENT_AGE

        Returns:
            ReconciliationPlan; `requires_manual_entry` is set when there
            is nothing to reconcile
        """
        plan = ReconciliationPlan(user_id=user_id)

        if not diseases and not medications:
            logger.info(f"Nothing to reconcile for user {user_id}, manual entry required")
            plan.requires_manual_entry = True
            return plan

        now = self.now()
        self._reconcile_diseases(plan, diseases, medications, existing_profiles, user_age, now)
        self._reconcile_medicines(plan, medications, existing_medicines, now)

        logger.info(
            f"Reconciled user {user_id}: {len(plan.profiles)} profile, "
            f"{len(plan.medicines)} medicine, {len(plan.schedules)} schedule instructions, "
            f"{len(plan.conflicts)} conflicts"
        )
        return plan

    # ------------------------------------------------------------------
    # Disease profiles
    # ------------------------------------------------------------------

    def _reconcile_diseases(
        self,
        plan: ReconciliationPlan,
        diseases: List[DetectedDisease],
        medications: List[ParsedMedication],
        existing_profiles: Sequence[DiseaseProfile],
        user_age: Optional[int],
        now: datetime,
    ) -> None:
        seen = set()

        for disease in diseases:
            if disease.disease_id in seen:
                continue
            seen.add(disease.disease_id)

            profile = self.create_profile(disease, plan.user_id, user_age, now)

            matches = [
                p for p in existing_profiles
                if p.disease_id == disease.disease_id and p.user_id == plan.user_id
            ]
            existing = self._choose(matches, "disease_profile", disease.disease_id, plan)

            if existing is None:
                plan.profiles.append(CreateDiseaseProfile(profile=profile))
            else:
                plan.profiles.append(MergeDiseaseProfile(
                    existing_id=existing.id,
                    profile=self.merge_profiles(existing, profile, now),
                ))

    def create_profile(
        self,
        disease: DetectedDisease,
        user_id: str,
        user_age: Optional[int],
        now: datetime,
    ) -> DiseaseProfile:
        return DiseaseProfile(
            id=self.id_factory(),
            user_id=user_id,
            disease_id=disease.disease_id,
            disease_name=disease.disease_name,
            personal_info=PersonalInfo(
                age=user_age if user_age is not None else self.settings.DEFAULT_PATIENT_AGE
            ),
            symptoms=[],
            lifestyle=Lifestyle(),
            medication_history=HISTORY_SEPARATOR.join(disease.related_medications),
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def merge_profiles(existing: DiseaseProfile, new: DiseaseProfile, now: datetime) -> DiseaseProfile:
        """
        New values win, except identity and creation time.

        Medication history is appended to the existing history.
        """
        if existing.medication_history and new.medication_history:
            history = f"{existing.medication_history}{HISTORY_SEPARATOR}{new.medication_history}"
        else:
            history = existing.medication_history or new.medication_history

        return DiseaseProfile(
            id=existing.id,
            user_id=existing.user_id,
            disease_id=existing.disease_id,
            disease_name=new.disease_name,
            personal_info=new.personal_info,
            symptoms=list(new.symptoms),
            lifestyle=new.lifestyle,
            medication_history=history,
            created_at=existing.created_at,
            updated_at=now,
        )

    # ------------------------------------------------------------------
    # Medicines and schedules
    # ------------------------------------------------------------------

    def _reconcile_medicines(
        self,
        plan: ReconciliationPlan,
        medications: List[ParsedMedication],
        existing_medicines: Sequence[Medicine],
        now: datetime,
    ) -> None:
        seen = set()
        created = 0

        for medication in medications:
            key = medication.key
            if key in seen:
                continue
            seen.add(key)

            matches = [
                m for m in existing_medicines
                if m.name.lower() == key and m.user_id == plan.user_id
            ]
            existing = self._choose(matches, "medicine", key, plan)

            if existing is None:
                medicine = Medicine(
                    id=self.id_factory(),
                    user_id=plan.user_id,
                    name=medication.name,
                    strength=medication.strength,
                    form=medication.form,
                    color_tag=COLOR_PALETTE[created % len(COLOR_PALETTE)],
                    stock_count=self.settings.DEFAULT_STOCK_COUNT,
                    refill_threshold=self.settings.DEFAULT_REFILL_THRESHOLD,
                    instructions=medication.instructions or None,
                    created_at=now,
                )
                created += 1
                plan.medicines.append(CreateMedicine(medicine=medicine))
                medicine_id = medicine.id
            else:
                plan.medicines.append(UpdateMedicineStock(
                    medicine_id=existing.id,
                    added_quantity=self.settings.RESTOCK_QUANTITY,
                    new_stock_count=existing.stock_count + self.settings.RESTOCK_QUANTITY,
                ))
                medicine_id = existing.id

            schedule = self.schedule_builder.build(
                schedule_id=self.id_factory(),
                medicine_id=medicine_id,
                medication=medication,
                start_date=now,
            )
            plan.schedules.append(CreateSchedule(schedule=schedule))

    # ------------------------------------------------------------------
    # Ambiguous matches
    # ------------------------------------------------------------------

    @staticmethod
    def _choose(
        matches: List[T],
        entity_type: str,
        key: str,
        plan: ReconciliationPlan
    ) -> Optional[T]:
        """Earliest created match; input order breaks ties."""
        if not matches:
            return None
        if len(matches) == 1:
            return matches[0]

        chosen = min(
            enumerate(matches),
            key=lambda item: (item[1].created_at or _EPOCH, item[0])
        )[1]

        plan.conflicts.append(MergeConflict(
            entity_type=entity_type,
            key=key,
            candidate_ids=[m.id for m in matches],
            chosen_id=chosen.id,
        ))
        logger.warning(
            f"{len(matches)} existing {entity_type} records match {key!r} "
            f"for user {plan.user_id}; using {chosen.id}"
        )
        return chosen
