"""
Portal context: the one object the shells (HTTP, terminal) talk to.

Wires storage, session, route guard, locale preference and the booking
wizard together, and owns their initialize/teardown lifecycle.
"""

import threading
from datetime import date
from typing import Callable, Optional, Sequence, TypeVar

from telehealth.booking import BookingWorkflow
from telehealth.config import ALLOW_ROLE_SWITCH, STRICT_ROUTE_ROLES
from telehealth.directory import DOCTORS
from telehealth.i18n import LocalePreference
from telehealth.models import Doctor
from telehealth.routing import RouteDecision, RouteGuard, navigation_for
from telehealth.session import SessionStore
from telehealth.storage import init_storage

BOOKING_PATH = "/patient/book"

T = TypeVar("T")


class Portal:
    def __init__(
        self,
        storage,
        strict_roles: bool = STRICT_ROUTE_ROLES,
        allow_role_switch: bool = ALLOW_ROLE_SWITCH,
        doctors: Sequence[Doctor] = DOCTORS,
        today: Callable[[], date] = date.today,
    ):
        self.storage = storage
        self.doctors = tuple(doctors)
        self.session = SessionStore(storage, allow_role_switch=allow_role_switch)
        self.guard = RouteGuard(self.session, strict_roles=strict_roles)
        self.locale = LocalePreference(storage)
        self._today = today
        self._booking: Optional[BookingWorkflow] = None
        self._lock = threading.RLock()

    # ── Lifecycle ────────────────────────────────────────────────────

    def initialize(self) -> "Portal":
        self.session.initialize()
        return self

    def teardown(self) -> None:
        with self._lock:
            self._booking = None
        self.session.teardown()

    # ── Session ──────────────────────────────────────────────────────

    def login(self, contact_handle: str, code: str, role: str) -> bool:
        ok = self.session.login(contact_handle, code, role)
        if ok:
            self.discard_booking()
        return ok

    def switch_role(self, role: str) -> None:
        self.session.switch_role(role)
        self.discard_booking()

    def logout(self) -> None:
        self.session.logout()
        self.discard_booking()

    # ── Navigation ───────────────────────────────────────────────────

    def navigate(self, path: str) -> RouteDecision:
        """Resolve a navigation; leaving the booking page drops its draft."""
        decision = self.guard.resolve(path)
        if not (decision.allowed and decision.path == BOOKING_PATH):
            self.discard_booking()
        return decision

    def navigation(self):
        role = self.session.current_role
        return navigation_for(role, self.locale.locale) if role else []

    # ── Booking ──────────────────────────────────────────────────────

    @property
    def booking(self) -> BookingWorkflow:
        """Current booking wizard, created on first use."""
        with self._lock:
            if self._booking is None:
                self._booking = BookingWorkflow(self.session, self.doctors, self._today)
            return self._booking

    def new_booking(self) -> BookingWorkflow:
        with self._lock:
            self._booking = BookingWorkflow(self.session, self.doctors, self._today)
            return self._booking

    def with_booking(self, fn: Callable[[BookingWorkflow], T]) -> T:
        """Run *fn* on the current wizard while holding the portal lock."""
        with self._lock:
            return fn(self.booking)

    def discard_booking(self) -> None:
        with self._lock:
            self._booking = None

    def find_doctor(self, doctor_id: str) -> Optional[Doctor]:
        for doctor in self.doctors:
            if doctor.id == doctor_id:
                return doctor
        return None


def create_portal(storage=None, **kwargs) -> Portal:
    """Build a Portal on *storage* (default: configured SQL storage) and rehydrate it."""
    if storage is None:
        storage = init_storage()
    return Portal(storage, **kwargs).initialize()
