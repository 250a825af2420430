from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class RegistrationRequest:
    full_name: str
    email: str
    session_time_selected: str
    role: Optional[str] = None

    @classmethod
    def from_body(cls, body: Dict[str, Any]) -> "RegistrationRequest":
        return cls(
            full_name=body.get("fullName") or "",
            email=body.get("email") or "",
            session_time_selected=body.get("sessionTimeSelected") or "",
            role=body.get("role") or None,
        )


@dataclass
class MeetingOccurrence:
    occurrence_id: str
    start_time: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "MeetingOccurrence":
        return cls(
            occurrence_id=str(item.get("occurrence_id") or ""),
            start_time=item.get("start_time") or "",
            raw=item,
        )


@dataclass
class OccurrenceMatch:
    occurrence: MeetingOccurrence
    diff_seconds: float


@dataclass
class RegistrationResult:
    success: bool
    join_url: str = ""
    registrant_id: str = ""
    occurrence_id: str = ""
    matched_start_time: str = ""
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "join_url": self.join_url,
            "registrant_id": self.registrant_id,
            "occurrence_id": self.occurrence_id,
            "matched_start_time": self.matched_start_time,
        }
