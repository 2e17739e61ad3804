"""
Unit tests for the Portal context wiring and lifecycle.
"""

import threading
from datetime import date

from telehealth.booking import Stage
from telehealth.config import ROLE_KEY
from telehealth.directory import DOCTORS, IDENTITIES
from telehealth.portal import Portal, create_portal
from telehealth.routing import REDIRECT, RENDER
from telehealth.storage import MemoryStorage

ONLINE = DOCTORS[0]


def make_portal(storage=None, **kwargs):
    return Portal(storage or MemoryStorage(), today=lambda: date(2024, 1, 25), **kwargs).initialize()


def test_create_portal_restores_session_from_storage():
    storage = MemoryStorage()
    make_portal(storage).login("9876543210", "1234", "doctor")

    portal = create_portal(storage)
    assert portal.session.identity == IDENTITIES["doctor"]
    assert portal.navigate("/doctor").outcome == RENDER


def test_guard_and_workflow_share_the_session():
    portal = make_portal()
    assert portal.navigate("/patient/book").outcome == REDIRECT
    portal.login("9876543210", "1234", "patient")
    assert portal.navigate("/patient/book").outcome == RENDER
    assert portal.booking.session is portal.session


def test_leaving_booking_page_discards_draft():
    portal = make_portal()
    portal.login("9876543210", "1234", "patient")
    portal.navigate("/patient/book")
    portal.booking.select_doctor(ONLINE)

    portal.navigate("/patient/book")
    assert portal.booking.stage == Stage.SELECTING_SLOT

    portal.navigate("/patient/records")
    assert portal.booking.stage == Stage.SELECTING_DOCTOR
    assert portal.booking.draft.doctor is None


def test_logout_discards_draft_and_clears_session():
    portal = make_portal()
    portal.login("9876543210", "1234", "patient")
    portal.booking.select_doctor(ONLINE)
    portal.logout()
    assert portal.session.is_authenticated is False
    assert portal.booking.stage == Stage.SELECTING_DOCTOR
    assert portal.storage.get(ROLE_KEY) is None


def test_new_booking_replaces_confirmed_workflow():
    portal = make_portal()
    portal.login("9876543210", "1234", "patient")
    wf = portal.booking
    wf.select_doctor(ONLINE)
    wf.select_slot("2024-01-26", "10:00")
    wf.confirm("video", "fever")

    fresh = portal.new_booking()
    assert fresh is not wf
    assert fresh.stage == Stage.SELECTING_DOCTOR
    assert wf.stage == Stage.CONFIRMED


def test_navigation_menu_follows_role_and_locale():
    portal = make_portal()
    assert portal.navigation() == []
    portal.login("9876543210", "1234", "pharmacy")
    portal.locale.set_locale("hi")
    assert portal.navigation()[1] == {"label": "स्टॉक प्रबंधन", "path": "/pharmacy/stock"}


def test_teardown_drops_memory_but_not_storage():
    portal = make_portal()
    portal.login("9876543210", "1234", "admin")
    portal.teardown()
    assert portal.session.is_authenticated is False
    assert portal.storage.get(ROLE_KEY) == "admin"
    assert portal.initialize().session.current_role == "admin"


def test_find_doctor():
    portal = make_portal()
    assert portal.find_doctor("doc2").name == "Dr. Harpreet Singh"
    assert portal.find_doctor("nope") is None


def test_with_booking_runs_on_current_workflow():
    portal = make_portal()
    portal.login("9876543210", "1234", "patient")
    assert portal.with_booking(lambda w: w.select_doctor(ONLINE)) is True
    assert portal.booking.stage == Stage.SELECTING_SLOT


def test_with_booking_serializes_transitions():
    portal = make_portal()
    entered, release = threading.Event(), threading.Event()
    order = []

    def slow(workflow):
        entered.set()
        release.wait(2)
        order.append("first")

    first = threading.Thread(target=portal.with_booking, args=(slow,))
    first.start()
    assert entered.wait(2)

    second = threading.Thread(target=portal.with_booking, args=(lambda w: order.append("second"),))
    second.start()
    second.join(0.2)
    assert order == []

    release.set()
    first.join(2)
    second.join(2)
    assert order == ["first", "second"]
