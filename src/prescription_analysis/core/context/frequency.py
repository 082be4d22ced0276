# ============================================================================
# src/prescription_analysis/core/context/frequency.py
# ============================================================================
"""
Dosing Frequency

Tagged union over FrequencyType. Each variant only carries the fields
that make sense for it; `type` is the discriminator.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .enums import FrequencyType


@dataclass(frozen=True)
class DailyFrequency:
    times_per_day: Optional[int] = 1
    specific_times: Optional[Tuple[str, ...]] = None

    @property
    def type(self) -> FrequencyType:
        return FrequencyType.DAILY

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type.value}
        if self.times_per_day is not None:
            data["times_per_day"] = self.times_per_day
        if self.specific_times:
            data["specific_times"] = list(self.specific_times)
        return data


@dataclass(frozen=True)
class WeekdaysFrequency:
    times_per_day: int = 1

    @property
    def type(self) -> FrequencyType:
        return FrequencyType.WEEKDAYS

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "times_per_day": self.times_per_day}


@dataclass(frozen=True)
class CustomDaysFrequency:
    days: Tuple[str, ...]
    times_per_day: int = 1

    @property
    def type(self) -> FrequencyType:
        return FrequencyType.CUSTOM_DAYS

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "days": list(self.days), "times_per_day": self.times_per_day}


@dataclass(frozen=True)
class EveryXDaysFrequency:
    interval: int

    @property
    def type(self) -> FrequencyType:
        return FrequencyType.EVERY_X_DAYS

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "interval": self.interval}


@dataclass(frozen=True)
class EveryXHoursFrequency:
    interval: int

    @property
    def type(self) -> FrequencyType:
        return FrequencyType.EVERY_X_HOURS

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "interval": self.interval}


@dataclass(frozen=True)
class AsNeededFrequency:

    @property
    def type(self) -> FrequencyType:
        return FrequencyType.AS_NEEDED

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value}


Frequency = Union[
    DailyFrequency,
    WeekdaysFrequency,
    CustomDaysFrequency,
    EveryXDaysFrequency,
    EveryXHoursFrequency,
    AsNeededFrequency,
]

ONCE_DAILY = DailyFrequency(times_per_day=1)


def is_default_frequency(frequency: Frequency) -> bool:
    """True for the bare once-daily fallback (no explicit times)."""
    return frequency == ONCE_DAILY


def frequency_from_dict(data: Dict[str, Any]) -> Frequency:
    """
    Rebuild a frequency from its `to_dict()` form.

    Raises:
        ValueError: unknown `type`
    """
    freq_type = FrequencyType(data.get("type", FrequencyType.DAILY.value))

    if freq_type == FrequencyType.DAILY:
        times = data.get("specific_times")
        return DailyFrequency(
            times_per_day=data.get("times_per_day"),
            specific_times=tuple(times) if times else None,
        )
    if freq_type == FrequencyType.WEEKDAYS:
        return WeekdaysFrequency(times_per_day=data.get("times_per_day", 1))
    if freq_type == FrequencyType.CUSTOM_DAYS:
        return CustomDaysFrequency(
            days=tuple(data.get("days", ())),
            times_per_day=data.get("times_per_day", 1),
        )
    if freq_type == FrequencyType.EVERY_X_DAYS:
        return EveryXDaysFrequency(interval=int(data["interval"]))
    if freq_type == FrequencyType.EVERY_X_HOURS:
        return EveryXHoursFrequency(interval=int(data["interval"]))
    return AsNeededFrequency()
