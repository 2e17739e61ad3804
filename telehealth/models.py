"""
Domain dataclasses used across the application.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Identity:
    """The acting user's profile and role. Replaced as a whole, never edited."""
    id: str
    display_name: str
    role: str                        # "patient", "doctor", "pharmacy" or "admin"
    contact_handle: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Doctor:
    """Read-only doctor directory entry."""
    id: str
    name: str
    specialty: str
    consultation_fee: int
    rating: float
    is_online: bool
    experience_years: int
    qualification: str = ""
    total_consultations: int = 0
    name_hi: Optional[str] = None
    name_pa: Optional[str] = None
    specialty_hi: Optional[str] = None
    specialty_pa: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Booking:
    """A finalized consultation request."""
    doctor: Doctor
    date: str                  # ISO calendar date, e.g. "2024-01-26"
    time: str                  # "HH:MM"
    consultation_type: str     # "video" or "phone"
    symptom_notes: str
    patient: Optional[Identity] = None

    @property
    def fee(self) -> int:
        return self.doctor.consultation_fee

    def to_dict(self) -> Dict[str, Any]:
        return {
            "doctor": self.doctor.to_dict(),
            "date": self.date,
            "time": self.time,
            "consultation_type": self.consultation_type,
            "symptom_notes": self.symptom_notes,
            "patient": self.patient.to_dict() if self.patient else None,
            "fee": self.fee,
        }
