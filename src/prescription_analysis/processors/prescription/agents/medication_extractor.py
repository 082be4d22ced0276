# ============================================================================
# src/prescription_analysis/processors/prescription/agents/medication_extractor.py
# ============================================================================
"""
Medication Extraction Agent

Extracts medication candidates from a block of prescription text, one line
at a time:
- Drug name (leading capitalised words)
- Strength (number + unit)
- Dosage form
- Dosage amount ("take N")
- Frequency (phrases, clinical abbreviations, intervals, clock times)
- Special instructions

A line without both a name and a strength is skipped.
"""

from typing import List, Optional, Tuple
import logging
import re

from prescription_analysis.core.context.enums import MedicineForm, SectionName
from prescription_analysis.core.context.frequency import (
    Frequency,
    DailyFrequency,
    WeekdaysFrequency,
    CustomDaysFrequency,
    EveryXDaysFrequency,
    EveryXHoursFrequency,
    AsNeededFrequency,
    ONCE_DAILY,
    is_default_frequency,
)
from prescription_analysis.core.context.parsed_medication import (
    AS_NEEDED_INSTRUCTION,
    Dosage,
    ParsedMedication,
)
from prescription_analysis.utils.text_normalizer import normalize_line_endings

logger = logging.getLogger(__name__)


BASE_CONFIDENCE = 0.3
NAME_BONUS = 0.3
STRENGTH_BONUS = 0.2
FREQUENCY_BONUS = 0.2

# Words that open a line but are never part of a drug name
LEADING_STOP_WORDS = {
    'avoid', 'take', 'use', 'continue', 'start', 'stop', 'give', 'apply',
    'do', 'not', 'patient', 'inject', 'inhale', 'discontinue', 'resume',
    'tab', 'tabs', 'cap', 'caps', 'the', 'and', 'with', 'no',
}

FORM_MAP = {
    'tablet': MedicineForm.TABLET,
    'capsule': MedicineForm.CAPSULE,
    'liquid': MedicineForm.LIQUID,
    'syrup': MedicineForm.LIQUID,
    'suspension': MedicineForm.LIQUID,
    'injection': MedicineForm.INJECTION,
    'cream': MedicineForm.OTHER,
    'ointment': MedicineForm.OTHER,
    'patch': MedicineForm.OTHER,
    'inhaler': MedicineForm.OTHER,
}

# Checked in order; the first phrase found wins
FREQUENCY_PHRASES: List[Tuple[str, Frequency]] = [
    ('once daily', DailyFrequency(times_per_day=1)),
    ('once a day', DailyFrequency(times_per_day=1)),
    ('one time daily', DailyFrequency(times_per_day=1)),
    ('1 time daily', DailyFrequency(times_per_day=1)),
    ('qd', DailyFrequency(times_per_day=1)),
    ('od', DailyFrequency(times_per_day=1)),

    ('twice daily', DailyFrequency(times_per_day=2)),
    ('twice a day', DailyFrequency(times_per_day=2)),
    ('two times daily', DailyFrequency(times_per_day=2)),
    ('2 times daily', DailyFrequency(times_per_day=2)),
    ('2 times a day', DailyFrequency(times_per_day=2)),
    ('bid', DailyFrequency(times_per_day=2)),
    ('bd', DailyFrequency(times_per_day=2)),

    ('three times daily', DailyFrequency(times_per_day=3)),
    ('three times a day', DailyFrequency(times_per_day=3)),
    ('3 times daily', DailyFrequency(times_per_day=3)),
    ('3 times a day', DailyFrequency(times_per_day=3)),
    ('tid', DailyFrequency(times_per_day=3)),
    ('tds', DailyFrequency(times_per_day=3)),

    ('four times daily', DailyFrequency(times_per_day=4)),
    ('four times a day', DailyFrequency(times_per_day=4)),
    ('4 times daily', DailyFrequency(times_per_day=4)),
    ('4 times a day', DailyFrequency(times_per_day=4)),
    ('qid', DailyFrequency(times_per_day=4)),
    ('qds', DailyFrequency(times_per_day=4)),
]

FREQUENCY_PATTERNS = [
    (re.compile(r'\b' + re.escape(phrase) + r'\b', re.IGNORECASE), frequency)
    for phrase, frequency in FREQUENCY_PHRASES
]

EVERY_HOURS_PATTERN = re.compile(r'\b(?:every\s+(\d+)\s+hours?|q(\d+)h)\b', re.IGNORECASE)
AS_NEEDED_PATTERN = re.compile(r'\b(?:as\s+needed|prn|when\s+required)\b', re.IGNORECASE)
EVERY_DAYS_PATTERN = re.compile(r'\bevery\s+(\d+)\s+days?\b', re.IGNORECASE)
WEEKDAYS_PATTERN = re.compile(r'\b(?:on\s+)?weekdays\b', re.IGNORECASE)
TIME_PATTERN = re.compile(r'\bat\s+(\d{1,2}):(\d{2})(?:\s*([ap])\.?m\.?)?', re.IGNORECASE)

DAY_NAMES = {
    'monday': 'monday', 'mon': 'monday',
    'tuesday': 'tuesday', 'tue': 'tuesday', 'tues': 'tuesday',
    'wednesday': 'wednesday', 'wed': 'wednesday',
    'thursday': 'thursday', 'thu': 'thursday', 'thurs': 'thursday',
    'friday': 'friday', 'fri': 'friday',
    'saturday': 'saturday', 'sat': 'saturday',
    'sunday': 'sunday', 'sun': 'sunday',
}
WEEK_ORDER = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']
_DAY_ALTERNATION = '|'.join(sorted(DAY_NAMES, key=len, reverse=True))
DAY_PATTERN = re.compile(r'\b(' + _DAY_ALTERNATION + r')s?\b', re.IGNORECASE)
# Named days only count as a schedule when introduced by "on" or "every"
DAY_SCHEDULE_PATTERN = re.compile(r'\b(?:on|every)\s+(?:' + _DAY_ALTERNATION + r')s?\b', re.IGNORECASE)

STRENGTH_PATTERN = re.compile(r'(\d+(?:\.\d+)?)\s*(mg|mcg|g|ml|units?|iu|meq)\b', re.IGNORECASE)
FORM_PATTERN = re.compile(
    r'\b(tablet|capsule|liquid|injection|syrup|suspension|cream|ointment|patch|inhaler)(?:e?s)?\b',
    re.IGNORECASE
)
DOSAGE_PATTERN = re.compile(
    r'\btake\s+(\d+)(?:\s+(tablet|capsule|puff|drop|ml|unit|spoon|teaspoon)s?\b)?',
    re.IGNORECASE
)
CAPITALISED_WORD = re.compile(r'\b[A-Z][a-z]+\b')

INSTRUCTION_PATTERNS = [
    re.compile(r'\bbefore meals?\b', re.IGNORECASE),
    re.compile(r'\bafter meals?\b', re.IGNORECASE),
    re.compile(r'\bwith food\b', re.IGNORECASE),
    re.compile(r'\bon (?:an )?empty stomach\b', re.IGNORECASE),
    re.compile(r'\bat bedtime\b', re.IGNORECASE),
    re.compile(r'\bin the morning\b', re.IGNORECASE),
    re.compile(r'\bin the evening\b', re.IGNORECASE),
    re.compile(r'\bwith water\b', re.IGNORECASE),
    re.compile(r'\bdo not crush\b', re.IGNORECASE),
    re.compile(r'\bswallow whole\b', re.IGNORECASE),
]


class MedicationExtractor:
    """
    Extracts medication candidates from prescription text.

    Stateless: all vocabularies are module constants, so one instance can
    be shared across requests.
    """

    def parse_medications(
        self,
        text: str,
        source_section: SectionName = SectionName.GENERAL
    ) -> List[ParsedMedication]:
        """
        Parse every line of a text block.

        Args:
            text: One section of prescription text
            source_section: Section the text came from

        Returns:
            Medication candidates in line order
        """
        medications = []
        for line in normalize_line_endings(text or "").split('\n'):
            medication = self.parse_line(line, source_section)
            if medication is not None:
                medications.append(medication)
        return medications

    def parse_line(
        self,
        line: str,
        source_section: SectionName = SectionName.GENERAL
    ) -> Optional[ParsedMedication]:
        """Parse a single line, or None when it has no name or no strength."""
        name = self.extract_name(line)
        if not name:
            if line.strip():
                logger.debug(f"Skipping line without drug name: {line.strip()!r}")
            return None

        strength = self.extract_strength(line)
        if not strength:
            logger.debug(f"Skipping line without strength: {line.strip()!r}")
            return None

        frequency = self.extract_frequency(line)
        instructions = self.extract_instructions(line)
        if not isinstance(frequency, AsNeededFrequency) and AS_NEEDED_PATTERN.search(line):
            instructions = ", ".join(filter(None, [instructions, AS_NEEDED_INSTRUCTION]))

        return ParsedMedication(
            name=name,
            strength=strength,
            form=self.extract_form(line),
            dosage=self.extract_dosage(line),
            frequency=frequency,
            instructions=instructions,
            confidence=self.calculate_confidence(name, strength, frequency),
            source_section=source_section,
            source_text=line.strip(),
        )

    def extract_name(self, line: str) -> str:
        """
        Leading run of capitalised words, after boilerplate verbs.

        "Avoid Aspirin 81mg" -> "Aspirin"
        "Metformin Hydrochloride 500mg" -> "Metformin Hydrochloride"
        """
        tokens = line.strip().split()

        # Skip leading imperative / boilerplate words
        index = 0
        while index < len(tokens) and tokens[index].strip(':,.-').lower() in LEADING_STOP_WORDS:
            index += 1

        words = []
        for token in tokens[index:]:
            if re.fullmatch(r'[A-Z][a-z]+', token):
                words.append(token)
            elif words and re.fullmatch(r'[A-Z][a-z]+[,:]', token):
                words.append(token[:-1])
                break
            else:
                break
        if words:
            return ' '.join(words)

        # Fallback: first capitalised word that is not boilerplate
        for match in CAPITALISED_WORD.finditer(line):
            if match.group(0).lower() not in LEADING_STOP_WORDS:
                return match.group(0)

        return ""

    def extract_strength(self, line: str) -> str:
        match = STRENGTH_PATTERN.search(line)
        return match.group(0) if match else ""

    def extract_form(self, line: str) -> MedicineForm:
        match = FORM_PATTERN.search(line)
        if not match:
            return MedicineForm.TABLET
        return FORM_MAP.get(match.group(1).lower(), MedicineForm.OTHER)

    def extract_dosage(self, line: str) -> Dosage:
        match = DOSAGE_PATTERN.search(line)
        if match:
            unit = (match.group(2) or 'tablet').lower()
            return Dosage(amount=int(match.group(1)), unit=unit)
        return Dosage()

    def extract_frequency(self, text: str) -> Frequency:
        """
        Determine dosing frequency.

        Order: fixed phrases and abbreviations, every-N-hours, as-needed,
        every-N-days, weekday and named-day schedules, explicit clock
        times, then once daily.
        """
        for pattern, frequency in FREQUENCY_PATTERNS:
            if pattern.search(text):
                return frequency

        hours_match = EVERY_HOURS_PATTERN.search(text)
        if hours_match:
            interval = int(hours_match.group(1) or hours_match.group(2))
            if interval > 0:
                return EveryXHoursFrequency(interval=interval)

        if AS_NEEDED_PATTERN.search(text):
            return AsNeededFrequency()

        days_match = EVERY_DAYS_PATTERN.search(text)
        if days_match and int(days_match.group(1)) > 0:
            return EveryXDaysFrequency(interval=int(days_match.group(1)))

        times = self.extract_times(text)
        times_per_day = len(times) or 1

        if WEEKDAYS_PATTERN.search(text):
            return WeekdaysFrequency(times_per_day=times_per_day)

        if DAY_SCHEDULE_PATTERN.search(text):
            days = {DAY_NAMES[m.group(1).lower()] for m in DAY_PATTERN.finditer(text)}
            return CustomDaysFrequency(
                days=tuple(day for day in WEEK_ORDER if day in days),
                times_per_day=times_per_day,
            )

        if times:
            return DailyFrequency(times_per_day=None, specific_times=tuple(times))

        return ONCE_DAILY

    def extract_times(self, text: str) -> List[str]:
        """Explicit "at HH:MM [am|pm]" mentions as 24-hour HH:MM."""
        times = []
        for match in TIME_PATTERN.finditer(text):
            hour, minute = int(match.group(1)), int(match.group(2))
            meridiem = (match.group(3) or '').lower()
            if meridiem == 'p' and hour < 12:
                hour += 12
            elif meridiem == 'a' and hour == 12:
                hour = 0
            if hour > 23 or minute > 59:
                continue
            formatted = f"{hour:02d}:{minute:02d}"
            if formatted not in times:
                times.append(formatted)
        return times

    def extract_instructions(self, line: str) -> str:
        found = []
        for pattern in INSTRUCTION_PATTERNS:
            match = pattern.search(line)
            if match:
                found.append(match.group(0))
        return ', '.join(found)

    def calculate_confidence(self, name: str, strength: str, frequency: Frequency) -> float:
        confidence = BASE_CONFIDENCE
        if name:
            confidence += NAME_BONUS
        if strength:
            confidence += STRENGTH_BONUS
        if not is_default_frequency(frequency):
            confidence += FREQUENCY_BONUS
        return min(confidence, 1.0)
