"""
Unit tests for the consultation booking wizard.
"""

import dataclasses
from datetime import date

import pytest

from telehealth.booking import (
    EMPTY_DRAFT,
    BookingWorkflow,
    Stage,
    is_iso_date,
    offered_days,
)
from telehealth.config import AVAILABLE_SLOTS
from telehealth.directory import DOCTORS, IDENTITIES
from telehealth.session import SessionStore
from telehealth.storage import MemoryStorage

TODAY = date(2024, 1, 25)
ONLINE = next(d for d in DOCTORS if d.is_online)
OFFLINE = next(d for d in DOCTORS if not d.is_online)


# ── Helpers ──────────────────────────────────────────────────────────

def make_workflow(session=None):
    return BookingWorkflow(session=session, today=lambda: TODAY)


def at_details(session=None):
    wf = make_workflow(session)
    assert wf.select_doctor(ONLINE)
    assert wf.select_slot("2024-01-26", "10:00")
    return wf


# ── Tests: doctor selection ──────────────────────────────────────────

def test_new_workflow_starts_with_empty_draft():
    wf = make_workflow()
    assert wf.stage == Stage.SELECTING_DOCTOR
    assert wf.draft == EMPTY_DRAFT
    assert wf.booking is None


def test_offline_doctor_is_rejected():
    wf = make_workflow()
    assert wf.select_doctor(OFFLINE) is False
    assert wf.stage == Stage.SELECTING_DOCTOR
    assert wf.draft == EMPTY_DRAFT


def test_online_doctor_moves_to_slot_selection():
    wf = make_workflow()
    assert wf.select_doctor(ONLINE) is True
    assert wf.stage == Stage.SELECTING_SLOT
    assert wf.draft.doctor == ONLINE
    assert wf.offered_days == ("2024-01-26", "2024-01-27")


# ── Tests: slots ─────────────────────────────────────────────────────

def test_canonical_slots_skip_lunch_hour():
    assert len(AVAILABLE_SLOTS) == 12
    assert AVAILABLE_SLOTS[0] == "09:00"
    assert AVAILABLE_SLOTS[-1] == "16:30"
    for lunch in ("12:00", "12:30", "13:00", "13:30"):
        assert lunch not in AVAILABLE_SLOTS


def test_offered_days_cross_month_boundary():
    assert offered_days(date(2024, 1, 31)) == ("2024-02-01", "2024-02-02")


def test_offered_days_follow_the_clock_when_slot_stage_is_entered():
    days = iter([date(2024, 1, 25), date(2024, 3, 1)])
    wf = BookingWorkflow(today=lambda: next(days))
    wf.select_doctor(ONLINE)
    assert wf.offered_days == ("2024-01-26", "2024-01-27")
    wf.select_slot("2024-01-26", "09:30")
    wf.back()
    assert wf.offered_days == ("2024-03-02", "2024-03-03")


@pytest.mark.parametrize("day,slot", [
    ("2024-01-26", "12:00"),
    ("2024-01-26", "10:15"),
    ("26-01-2024", "10:00"),
    ("2024-02-30", "10:00"),
    (None, "10:00"),
])
def test_bad_slot_is_rejected(day, slot):
    wf = make_workflow()
    wf.select_doctor(ONLINE)
    assert wf.select_slot(day, slot) is False
    assert wf.stage == Stage.SELECTING_SLOT
    assert wf.draft.date is None


def test_is_iso_date():
    assert is_iso_date("2024-01-26") is True
    assert is_iso_date("2024-1-26") is False
    assert is_iso_date(20240126) is False


# ── Tests: happy path ────────────────────────────────────────────────

def test_full_booking_happy_path():
    wf = make_workflow()
    assert wf.select_doctor(ONLINE)
    assert wf.stage == Stage.SELECTING_SLOT

    assert wf.select_slot("2024-01-26", "10:00")
    assert wf.stage == Stage.ENTERING_DETAILS
    assert (wf.draft.date, wf.draft.time) == ("2024-01-26", "10:00")

    assert wf.confirm("video", "fever")
    assert wf.stage == Stage.CONFIRMED
    draft = wf.draft
    assert draft.doctor == ONLINE
    assert draft.date == "2024-01-26"
    assert draft.time == "10:00"
    assert draft.consultation_type == "video"
    assert draft.symptom_notes == "fever"
    assert wf.booking.fee == ONLINE.consultation_fee


def test_confirmed_booking_is_immutable():
    wf = at_details()
    wf.confirm("phone", "cough")
    booking = wf.booking

    with pytest.raises(dataclasses.FrozenInstanceError):
        booking.time = "11:00"
    assert wf.select_doctor(ONLINE) is False
    assert wf.select_slot("2024-01-27", "11:00") is False
    assert wf.confirm("video", "other") is False
    assert wf.back() is False
    assert wf.booking == booking


def test_confirm_records_acting_patient():
    session = SessionStore(MemoryStorage())
    session.login("9876543210", "1234", "patient")
    wf = at_details(session)
    wf.confirm("video", "")
    assert wf.booking.patient == IDENTITIES["patient"]


def test_confirm_prints_summary(capsys):
    wf = at_details()
    wf.confirm("video", "fever")
    assert "[booking] Confirmed" in capsys.readouterr().out


# ── Tests: confirm validation ────────────────────────────────────────

@pytest.mark.parametrize("kind,notes", [
    ("chat", "fever"),
    (None, "fever"),
    ("video", None),
    ("video", 42),
])
def test_confirm_requires_type_and_notes(kind, notes):
    wf = at_details()
    assert wf.confirm(kind, notes) is False
    assert wf.stage == Stage.ENTERING_DETAILS


def test_confirm_accepts_empty_notes():
    wf = at_details()
    assert wf.confirm("phone", "") is True
    assert wf.draft.symptom_notes == ""


def test_confirm_uses_details_entered_earlier():
    wf = at_details()
    assert wf.update_details("phone", "headache")
    assert wf.confirm() is True
    assert wf.booking.consultation_type == "phone"
    assert wf.booking.symptom_notes == "headache"


def test_update_details_rejects_unknown_type():
    wf = at_details()
    assert wf.update_details("sms", None) is False
    assert wf.draft.consultation_type is None


# ── Tests: ordering / back / restart ─────────────────────────────────

def test_out_of_order_operations_are_rejected():
    wf = make_workflow()
    assert wf.select_slot("2024-01-26", "10:00") is False
    assert wf.confirm("video", "x") is False
    assert wf.update_details("video", "x") is False
    assert wf.back() is False
    assert wf.draft == EMPTY_DRAFT


def test_back_from_slots_discards_slot():
    wf = make_workflow()
    wf.select_doctor(ONLINE)
    assert wf.back() is True
    assert wf.stage == Stage.SELECTING_DOCTOR
    assert wf.draft.date is None
    assert wf.draft.time is None


def test_back_from_details_keeps_slot_and_drops_details():
    wf = at_details()
    wf.update_details("phone", "rash")
    assert wf.back() is True
    draft = wf.draft
    assert draft.stage == Stage.SELECTING_SLOT
    assert (draft.date, draft.time) == ("2024-01-26", "10:00")
    assert draft.consultation_type is None
    assert draft.symptom_notes is None


def test_reselecting_slot_after_back():
    wf = at_details()
    wf.back()
    assert wf.select_slot("2024-01-27", "16:30")
    assert (wf.draft.date, wf.draft.time) == ("2024-01-27", "16:30")


def test_restart_after_confirm_yields_fresh_draft():
    wf = at_details()
    wf.confirm("video", "fever")
    assert wf.restart() is True
    assert wf.stage == Stage.SELECTING_DOCTOR
    assert wf.draft == EMPTY_DRAFT
    assert wf.booking is None


def test_restart_mid_wizard_discards_draft():
    wf = at_details()
    wf.restart()
    assert wf.draft == EMPTY_DRAFT
