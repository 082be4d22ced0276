# ============================================================================
# src/prescription_analysis/reconciliation/schedule_builder.py
# ============================================================================
"""
Derives a dosing schedule from a parsed medication's frequency.

- Explicit clock times are used as given
- N times per day are spread evenly over 24h from the anchor hour
- Hour / day intervals carry the interval and no clock times
- Weekday and named-day schedules add the days of the week
- As-needed or unknown frequencies get a single anchor-time dose
"""

from datetime import datetime
from typing import List, Optional
import logging

from prescription_analysis.config import ReconciliationSettings, reconciliation_settings
from prescription_analysis.core.context.enums import FrequencyType
from prescription_analysis.core.context.frequency import (
    Frequency,
    DailyFrequency,
    WeekdaysFrequency,
    CustomDaysFrequency,
    EveryXDaysFrequency,
    EveryXHoursFrequency,
)
from prescription_analysis.core.context.parsed_medication import ParsedMedication
from .records import Schedule

logger = logging.getLogger(__name__)


MINUTES_PER_DAY = 24 * 60
WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday"]


class ScheduleBuilder:

    def __init__(self, settings: Optional[ReconciliationSettings] = None):
        self.settings = settings or reconciliation_settings

    def build(
        self,
        schedule_id: str,
        medicine_id: str,
        medication: ParsedMedication,
        start_date: Optional[datetime] = None
    ) -> Schedule:
        frequency = medication.frequency
        schedule = Schedule(
            id=schedule_id,
            medicine_id=medicine_id,
            frequency_type=frequency.type,
            times_of_day=self.times_of_day(frequency),
            dosage_amount=medication.dosage.amount,
            dosage_unit=medication.dosage.unit,
            start_date=start_date,
        )

        if isinstance(frequency, EveryXHoursFrequency):
            schedule.interval_hours = frequency.interval
        elif isinstance(frequency, EveryXDaysFrequency):
            schedule.interval_days = frequency.interval
        elif isinstance(frequency, WeekdaysFrequency):
            schedule.days_of_week = list(WEEKDAYS)
        elif isinstance(frequency, CustomDaysFrequency):
            schedule.days_of_week = list(frequency.days)

        return schedule

    def times_of_day(self, frequency: Frequency) -> List[str]:
        """Clock times (HH:MM) for one day of the schedule."""
        if frequency.type in (FrequencyType.EVERY_X_HOURS, FrequencyType.EVERY_X_DAYS):
            return []

        if isinstance(frequency, DailyFrequency) and frequency.specific_times:
            return list(frequency.specific_times)

        times_per_day = getattr(frequency, "times_per_day", None)
        if times_per_day:
            return self.evenly_spaced_times(times_per_day)

        return [self._format(self.settings.SCHEDULE_ANCHOR_HOUR * 60)]

    def evenly_spaced_times(self, times_per_day: int) -> List[str]:
        """
        Spread doses over 24h starting at the anchor hour.

        3 per day from 08:00 -> 08:00, 16:00, 00:00
        """
        anchor = self.settings.SCHEDULE_ANCHOR_HOUR * 60
        return [
            self._format(anchor + (i * MINUTES_PER_DAY) // times_per_day)
            for i in range(times_per_day)
        ]

    @staticmethod
    def _format(minutes: int) -> str:
        minutes %= MINUTES_PER_DAY
        return f"{minutes // 60:02d}:{minutes % 60:02d}"
