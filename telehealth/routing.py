"""
Route table and the guard consulted on every navigation.
"""

from dataclasses import dataclass
from typing import List, Optional

from telehealth.config import DEFAULT_ROLE, ROLES, STRICT_ROUTE_ROLES
from telehealth.i18n import translate

RENDER = "render"
REDIRECT = "redirect"
FORBIDDEN = "forbidden"

LANDING_PATH = "/"
LOGIN_PATH = "/login"

PUBLIC_ROUTES = {LANDING_PATH: "landing", LOGIN_PATH: "login"}
PUBLIC_ROUTES.update({f"{LOGIN_PATH}/{role}": "login" for role in ROLES})

# path -> (view name, role the view belongs to)
PROTECTED_ROUTES = {
    "/patient": ("patient.dashboard", "patient"),
    "/patient/book": ("patient.book", "patient"),
    "/patient/records": ("patient.records", "patient"),
    "/patient/symptoms": ("patient.symptoms", "patient"),
    "/patient/profile": ("patient.profile", "patient"),
    "/doctor": ("doctor.dashboard", "doctor"),
    "/doctor/patients": ("doctor.patients", "doctor"),
    "/doctor/consultations": ("doctor.consultations", "doctor"),
    "/doctor/prescriptions": ("doctor.prescriptions", "doctor"),
    "/doctor/profile": ("doctor.profile", "doctor"),
    "/pharmacy": ("pharmacy.dashboard", "pharmacy"),
    "/pharmacy/stock": ("pharmacy.stock", "pharmacy"),
    "/pharmacy/orders": ("pharmacy.orders", "pharmacy"),
    "/pharmacy/profile": ("pharmacy.profile", "pharmacy"),
    "/admin": ("admin.dashboard", "admin"),
    "/admin/users": ("admin.users", "admin"),
    "/admin/appointments": ("admin.appointments", "admin"),
    "/admin/analytics": ("admin.analytics", "admin"),
    "/admin/settings": ("admin.settings", "admin"),
}

# Sidebar entries per role: (translation key or literal label, path)
NAVIGATION = {
    "patient": [
        ("common.dashboard", "/patient"),
        ("patient.bookConsultation", "/patient/book"),
        ("patient.healthRecords", "/patient/records"),
        ("patient.symptomChecker", "/patient/symptoms"),
        ("common.profile", "/patient/profile"),
    ],
    "doctor": [
        ("common.dashboard", "/doctor"),
        ("doctor.patientList", "/doctor/patients"),
        ("doctor.consultations", "/doctor/consultations"),
        ("doctor.prescriptions", "/doctor/prescriptions"),
        ("common.profile", "/doctor/profile"),
    ],
    "pharmacy": [
        ("common.dashboard", "/pharmacy"),
        ("pharmacy.stockManagement", "/pharmacy/stock"),
        ("pharmacy.prescriptionOrders", "/pharmacy/orders"),
        ("common.profile", "/pharmacy/profile"),
    ],
    "admin": [
        ("common.dashboard", "/admin"),
        ("admin.userManagement", "/admin/users"),
        ("admin.appointmentManagement", "/admin/appointments"),
        ("admin.analytics", "/admin/analytics"),
        ("Settings", "/admin/settings"),
    ],
}


@dataclass(frozen=True)
class RouteDecision:
    """What the shell should do with a navigation request."""
    outcome: str                # RENDER, REDIRECT or FORBIDDEN
    path: str                   # the normalised requested path
    target: str                 # path to render or redirect to
    view: Optional[str] = None  # view name when rendering

    @property
    def allowed(self) -> bool:
        return self.outcome == RENDER


def normalize_path(path: str) -> str:
    path = (path or "/").split("?", 1)[0].split("#", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or "/"
    return path


def login_target(role: str) -> str:
    """Dashboard a successful login for *role* lands on."""
    return f"/{role}"


class RouteGuard:
    """Decides per navigation whether a view renders or redirects.

    By default only the presence of an authenticated identity is checked,
    so any logged-in user can open any role's pages. Pass
    ``strict_roles=True`` to also require the identity's role to match the
    role the route belongs to; mismatches then come back as FORBIDDEN.
    """

    def __init__(self, session, strict_roles: bool = STRICT_ROUTE_ROLES):
        self.session = session
        self.strict_roles = strict_roles

    def resolve(self, path: str) -> RouteDecision:
        path = normalize_path(path)

        if path in PUBLIC_ROUTES:
            return RouteDecision(RENDER, path, path, PUBLIC_ROUTES[path])

        if path not in PROTECTED_ROUTES:
            return RouteDecision(REDIRECT, path, LANDING_PATH)

        view, role = PROTECTED_ROUTES[path]
        if not self.session.is_authenticated:
            return RouteDecision(REDIRECT, path, LOGIN_PATH)

        if self.strict_roles and self.session.current_role != role:
            return RouteDecision(FORBIDDEN, path, login_target(self.session.current_role))

        return RouteDecision(RENDER, path, path, view)

    def login_role(self, path: str) -> str:
        """Role a login page signs in as: ``/login/<role>`` or the current one."""
        path = normalize_path(path)
        suffix = path[len(LOGIN_PATH) + 1:] if path.startswith(LOGIN_PATH + "/") else ""
        if suffix in ROLES:
            return suffix
        return self.session.current_role or DEFAULT_ROLE


def navigation_for(role: str, locale: str) -> List[dict]:
    """Sidebar menu for *role* with labels in *locale*."""
    return [
        {"label": translate(locale, key), "path": path}
        for key, path in NAVIGATION.get(role, [])
    ]
