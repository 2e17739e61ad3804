"""
Centralised configuration constants and environment helpers.
"""

import os
import sys

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# ── Roles ────────────────────────────────────────────────────────────
ROLES = ("patient", "doctor", "pharmacy", "admin")
DEFAULT_ROLE = "patient"

# ── Login policy ─────────────────────────────────────────────────────
OTP_LENGTH = 4
MIN_PHONE_LENGTH = 10

# Demo-only: role switch skips re-authentication.
ALLOW_ROLE_SWITCH = _env_flag("ALLOW_ROLE_SWITCH", True)

# When True the route guard also checks the identity's role against the route.
STRICT_ROUTE_ROLES = _env_flag("STRICT_ROUTE_ROLES", False)

# ── Durable storage ──────────────────────────────────────────────────
STORAGE_URI = os.getenv("TELEHEALTH_STORAGE_URI", "sqlite:///telehealth.db")
STORAGE_TABLE = "portal_storage"

USER_KEY = "telemedicine-user"
ROLE_KEY = "telemedicine-role"
LANGUAGE_KEY = "telemedicine-language"

# ── Locales ──────────────────────────────────────────────────────────
SUPPORTED_LOCALES = ("en", "hi", "pa")
DEFAULT_LOCALE = "en"

# ── Booking ──────────────────────────────────────────────────────────
MORNING_SLOTS = ("09:00", "09:30", "10:00", "10:30", "11:00", "11:30")
AFTERNOON_SLOTS = ("14:00", "14:30", "15:00", "15:30", "16:00", "16:30")
AVAILABLE_SLOTS = MORNING_SLOTS + AFTERNOON_SLOTS
BOOKING_DAY_OFFSETS = (1, 2)   # tomorrow, day after tomorrow
CONSULTATION_TYPES = ("video", "phone")

# ── API server ───────────────────────────────────────────────────────
SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-key-change-in-production")


def get_env(name: str) -> str:
    """Return an environment variable or exit with an error message."""
    value = os.getenv(name)
    if not value:
        print(f"ERROR: env var {name} is not set", file=sys.stderr)
        sys.exit(1)
    return value
