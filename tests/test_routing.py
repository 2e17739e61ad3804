"""
Unit tests for the route guard and role navigation.
"""

import pytest

from telehealth.routing import (
    FORBIDDEN,
    PROTECTED_ROUTES,
    REDIRECT,
    RENDER,
    RouteGuard,
    navigation_for,
    normalize_path,
)


# ── Helpers / Fakes ──────────────────────────────────────────────────

class FakeSession:
    def __init__(self, role=None):
        self.current_role = role

    @property
    def is_authenticated(self):
        return self.current_role is not None


# ── Tests: resolve ───────────────────────────────────────────────────

@pytest.mark.parametrize("path", sorted(PROTECTED_ROUTES))
def test_protected_view_redirects_to_login_when_logged_out(path):
    decision = RouteGuard(FakeSession()).resolve(path)
    assert decision.outcome == REDIRECT
    assert decision.target == "/login"
    assert decision.allowed is False


@pytest.mark.parametrize("path", sorted(PROTECTED_ROUTES))
@pytest.mark.parametrize("role", ["patient", "doctor", "pharmacy", "admin"])
def test_protected_view_renders_for_any_authenticated_role(path, role):
    decision = RouteGuard(FakeSession(role)).resolve(path)
    assert decision.outcome == RENDER
    assert decision.target == path
    assert decision.view == PROTECTED_ROUTES[path][0]


@pytest.mark.parametrize("role", [None, "patient"])
@pytest.mark.parametrize("path", ["/nowhere", "/patient/unknown", "/admin/users/42"])
def test_unknown_path_redirects_to_landing(path, role):
    decision = RouteGuard(FakeSession(role)).resolve(path)
    assert decision.outcome == REDIRECT
    assert decision.target == "/"


@pytest.mark.parametrize("path", ["/", "/login", "/login/patient", "/login/admin"])
def test_public_views_always_render(path):
    assert RouteGuard(FakeSession()).resolve(path).outcome == RENDER


def test_strict_mode_forbids_other_roles_views():
    guard = RouteGuard(FakeSession("patient"), strict_roles=True)
    decision = guard.resolve("/admin/users")
    assert decision.outcome == FORBIDDEN
    assert decision.target == "/patient"
    assert guard.resolve("/patient/book").outcome == RENDER


def test_strict_mode_still_redirects_logged_out_users():
    guard = RouteGuard(FakeSession(), strict_roles=True)
    assert guard.resolve("/admin").outcome == REDIRECT


# ── Tests: helpers ───────────────────────────────────────────────────

def test_normalize_path():
    assert normalize_path("/patient/book/") == "/patient/book"
    assert normalize_path("patient?tab=1") == "/patient"
    assert normalize_path("") == "/"
    assert normalize_path("/") == "/"


def test_login_role_from_path_or_session():
    assert RouteGuard(FakeSession()).login_role("/login/doctor") == "doctor"
    assert RouteGuard(FakeSession()).login_role("/login") == "patient"
    assert RouteGuard(FakeSession("pharmacy")).login_role("/login") == "pharmacy"
    assert RouteGuard(FakeSession()).login_role("/login/nurse") == "patient"


def test_navigation_for_translates_labels():
    items = navigation_for("patient", "hi")
    assert items[0] == {"label": "डैशबोर्ड", "path": "/patient"}
    assert [i["path"] for i in items][-1] == "/patient/profile"


def test_navigation_for_admin_settings_label_falls_back():
    items = navigation_for("admin", "pa")
    assert items[-1] == {"label": "Settings", "path": "/admin/settings"}


def test_navigation_for_unknown_role_is_empty():
    assert navigation_for("nurse", "en") == []
