"""
Consultation booking wizard.

Stages run in a fixed order:

    SelectingDoctor -> SelectingSlot -> EnteringDetails -> Confirmed

Each stage is its own frozen dataclass carrying exactly the fields that
stage guarantees, so e.g. a Confirmed stage without a time cannot exist.
Operations return True when they moved the wizard and False when the input
was rejected; a rejected call never changes state.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple, Union

from telehealth.config import AVAILABLE_SLOTS, BOOKING_DAY_OFFSETS, CONSULTATION_TYPES
from telehealth.directory import DOCTORS
from telehealth.models import Booking, Doctor

_ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


class Stage(str, Enum):
    """Wizard stage, in order."""

    SELECTING_DOCTOR = "selecting_doctor"
    SELECTING_SLOT = "selecting_slot"
    ENTERING_DETAILS = "entering_details"
    CONFIRMED = "confirmed"


# ── Stage states ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class SelectingDoctor:
    previous_doctor: Optional[Doctor] = None   # kept when stepping back
    stage = Stage.SELECTING_DOCTOR


@dataclass(frozen=True)
class SelectingSlot:
    doctor: Doctor
    offered_days: Tuple[str, ...]
    date: Optional[str] = None                 # kept when stepping back
    time: Optional[str] = None
    stage = Stage.SELECTING_SLOT


@dataclass(frozen=True)
class EnteringDetails:
    doctor: Doctor
    date: str
    time: str
    consultation_type: Optional[str] = None
    symptom_notes: Optional[str] = None
    stage = Stage.ENTERING_DETAILS


@dataclass(frozen=True)
class Confirmed:
    booking: Booking
    stage = Stage.CONFIRMED


BookingState = Union[SelectingDoctor, SelectingSlot, EnteringDetails, Confirmed]


@dataclass(frozen=True)
class BookingDraft:
    """Flat read-only view of whatever the wizard has collected so far."""
    stage: Stage
    doctor: Optional[Doctor] = None
    date: Optional[str] = None
    time: Optional[str] = None
    consultation_type: Optional[str] = None
    symptom_notes: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "stage": self.stage.value,
            "doctor": self.doctor.to_dict() if self.doctor else None,
            "date": self.date,
            "time": self.time,
            "consultation_type": self.consultation_type,
            "symptom_notes": self.symptom_notes,
        }


EMPTY_DRAFT = BookingDraft(stage=Stage.SELECTING_DOCTOR)


def offered_days(today: date) -> Tuple[str, ...]:
    """Calendar days offered for booking, relative to *today*."""
    return tuple((today + timedelta(days=n)).isoformat() for n in BOOKING_DAY_OFFSETS)


def is_iso_date(value) -> bool:
    if not isinstance(value, str) or not _ISO_DATE_RE.fullmatch(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


# ── Workflow ─────────────────────────────────────────────────────────

class BookingWorkflow:
    """One booking attempt for the patient acting in *session*.

    No availability check is done against other bookings: every offered day
    exposes the same canonical slot set.
    """

    def __init__(
        self,
        session=None,
        doctors: Sequence[Doctor] = DOCTORS,
        today: Callable[[], date] = date.today,
    ):
        self.session = session
        self.doctors = tuple(doctors)
        self._today = today
        self._state: BookingState = SelectingDoctor()

    # ── Views ────────────────────────────────────────────────────────

    @property
    def state(self) -> BookingState:
        return self._state

    @property
    def stage(self) -> Stage:
        return self._state.stage

    @property
    def available_slots(self) -> Tuple[str, ...]:
        return AVAILABLE_SLOTS

    @property
    def offered_days(self) -> Tuple[str, ...]:
        if isinstance(self._state, SelectingSlot):
            return self._state.offered_days
        return ()

    @property
    def booking(self) -> Optional[Booking]:
        if isinstance(self._state, Confirmed):
            return self._state.booking
        return None

    @property
    def draft(self) -> BookingDraft:
        state = self._state
        if isinstance(state, SelectingDoctor):
            return BookingDraft(Stage.SELECTING_DOCTOR, doctor=state.previous_doctor)
        if isinstance(state, SelectingSlot):
            return BookingDraft(Stage.SELECTING_SLOT, state.doctor, state.date, state.time)
        if isinstance(state, EnteringDetails):
            return BookingDraft(
                Stage.ENTERING_DETAILS, state.doctor, state.date, state.time,
                state.consultation_type, state.symptom_notes,
            )
        b = state.booking
        return BookingDraft(
            Stage.CONFIRMED, b.doctor, b.date, b.time,
            b.consultation_type, b.symptom_notes,
        )

    # ── Transitions ──────────────────────────────────────────────────

    def select_doctor(self, doctor: Doctor) -> bool:
        """Pick a doctor. Offline doctors cannot be booked."""
        if not isinstance(self._state, SelectingDoctor):
            return False
        if doctor is None or not doctor.is_online:
            return False
        self._state = SelectingSlot(doctor=doctor, offered_days=offered_days(self._today()))
        return True

    def select_slot(self, date: str, time: str) -> bool:
        state = self._state
        if not isinstance(state, SelectingSlot):
            return False
        if time not in AVAILABLE_SLOTS or not is_iso_date(date):
            return False
        self._state = EnteringDetails(doctor=state.doctor, date=date, time=time)
        return True

    def update_details(self, consultation_type: Optional[str] = None,
                       symptom_notes: Optional[str] = None) -> bool:
        """Record details while still on the details stage."""
        state = self._state
        if not isinstance(state, EnteringDetails):
            return False
        if consultation_type is not None and consultation_type not in CONSULTATION_TYPES:
            return False
        if symptom_notes is not None and not isinstance(symptom_notes, str):
            return False
        self._state = EnteringDetails(
            doctor=state.doctor,
            date=state.date,
            time=state.time,
            consultation_type=consultation_type or state.consultation_type,
            symptom_notes=symptom_notes if symptom_notes is not None else state.symptom_notes,
        )
        return True

    def confirm(self, consultation_type: Optional[str] = None,
                symptom_notes: Optional[str] = None) -> bool:
        """Finalize the booking. Notes may be empty but must be given."""
        state = self._state
        if not isinstance(state, EnteringDetails):
            return False

        kind = consultation_type if consultation_type is not None else state.consultation_type
        notes = symptom_notes if symptom_notes is not None else state.symptom_notes
        if kind not in CONSULTATION_TYPES or not isinstance(notes, str):
            return False

        patient = self.session.identity if self.session is not None else None
        booking = Booking(
            doctor=state.doctor,
            date=state.date,
            time=state.time,
            consultation_type=kind,
            symptom_notes=notes,
            patient=patient,
        )
        self._state = Confirmed(booking=booking)
        print(f"[booking] Confirmed {booking.doctor.name} on {booking.date} at {booking.time} ({kind})")
        return True

    def back(self) -> bool:
        state = self._state
        if isinstance(state, SelectingSlot):
            self._state = SelectingDoctor(previous_doctor=state.doctor)
            return True
        if isinstance(state, EnteringDetails):
            self._state = SelectingSlot(
                doctor=state.doctor,
                offered_days=offered_days(self._today()),
                date=state.date,
                time=state.time,
            )
            return True
        return False

    def restart(self) -> bool:
        """Start a new booking; everything collected so far is dropped."""
        self._state = SelectingDoctor()
        return True
