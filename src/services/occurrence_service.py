# src/services/occurrence_service.py
from datetime import datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional

from ..common.errors import ValidationError
from ..common.logging import logger
from ..domain.models import MeetingOccurrence, OccurrenceMatch

NO_MATCH_ERROR = "Selected session time does not match any Zoom occurrence"


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parsuje ISO-8601 (data albo data+czas, "Z" lub offset liczbowy).
    Wartości bez strefy traktujemy jako UTC. Zwraca None, gdy się nie da.
    """
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None
    if s[-1] in ("Z", "z"):
        s = s[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def occurrences_from_meeting(meeting: dict) -> List[MeetingOccurrence]:
    raw = meeting.get("occurrences")
    if not isinstance(raw, list):
        return []
    return [MeetingOccurrence.from_api(item) for item in raw if isinstance(item, dict)]


def find_closest_occurrence(
    target: datetime,
    occurrences: Iterable[MeetingOccurrence],
) -> Optional[OccurrenceMatch]:
    """
    Wystąpienie z najmniejszym |start_time - target|.

    Nieparsowalne start_time są pomijane. Przy remisie wygrywa pierwsze
    na liście (porównanie ostre).
    """
    best: Optional[OccurrenceMatch] = None
    for occ in occurrences:
        start = parse_timestamp(occ.start_time)
        if start is None:
            continue
        diff = abs((start - target).total_seconds())
        if best is None or diff < best.diff_seconds:
            best = OccurrenceMatch(occurrence=occ, diff_seconds=diff)
    return best


def select_occurrence(
    target: datetime,
    occurrences: List[MeetingOccurrence],
    max_diff: timedelta,
    allow_meeting_wide: bool = True,
) -> Optional[OccurrenceMatch]:
    """
    Dopasowanie + guardrail.

    - brak dopasowania: None (rejestracja na całe spotkanie),
      chyba że allow_meeting_wide=False,
    - dopasowanie dalej niż max_diff: ValidationError zamiast rejestracji
      na niewłaściwy termin.
    """
    match = find_closest_occurrence(target, occurrences)

    if match is None:
        if not allow_meeting_wide:
            logger.warning({"zoom": "no_occurrence_match", "occurrences": len(occurrences)})
            raise ValidationError(NO_MATCH_ERROR)
        return None

    if match.diff_seconds > max_diff.total_seconds():
        logger.error(
            {
                "zoom": "occurrence_too_far",
                "target": target.isoformat(),
                "best": match.occurrence.start_time,
                "best_diff_seconds": match.diff_seconds,
            }
        )
        raise ValidationError(NO_MATCH_ERROR)

    return match
