"""
Session store: who is acting, and as which role.

The in-memory identity and the durable record are always changed together.
Every mutation below rewrites (or deletes) both storage keys before it
returns, so a restarted process rehydrates exactly what was last visible.
"""

import sys
import threading
from typing import Callable, Optional

from telehealth.auth import is_valid_code, encode_identity, decode_identity
from telehealth.config import (
    ALLOW_ROLE_SWITCH,
    ROLES,
    ROLE_KEY,
    SECRET_KEY,
    USER_KEY,
)
from telehealth.directory import identity_for_role
from telehealth.models import Identity


class SessionStore:
    """Holds the current Identity and mirrors it to durable storage."""

    def __init__(
        self,
        storage,
        resolve_identity: Callable[[str], Identity] = identity_for_role,
        allow_role_switch: bool = ALLOW_ROLE_SWITCH,
        secret: str = SECRET_KEY,
    ):
        self.storage = storage
        self.allow_role_switch = allow_role_switch
        self._resolve_identity = resolve_identity
        self._secret = secret
        self._identity: Optional[Identity] = None
        self._lock = threading.RLock()

    # ── Read-only view ───────────────────────────────────────────────

    @property
    def identity(self) -> Optional[Identity]:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    @property
    def current_role(self) -> Optional[str]:
        return self._identity.role if self._identity else None

    # ── Lifecycle ────────────────────────────────────────────────────

    def initialize(self) -> bool:
        """Rehydrate from storage. Returns True if a session was restored."""
        with self._lock:
            record = self.storage.get(USER_KEY)
            role = self.storage.get(ROLE_KEY)

            if record is None and role is None:
                self._identity = None
                return False

            identity = decode_identity(record, self._secret)
            if identity is None or role != identity.role:
                print("[storage] Ignoring malformed session record", file=sys.stderr)
                self._clear()
                return False

            self._identity = identity
            print(f"[session] Restored {identity.display_name} (role={identity.role})")
            return True

    def teardown(self) -> None:
        """Forget the in-memory identity; storage is left as is."""
        with self._lock:
            self._identity = None

    # ── Operations ───────────────────────────────────────────────────

    def login(self, contact_handle: str, code: str, requested_role: str) -> bool:
        """Simulated OTP login. Any well-formed code is accepted."""
        if not is_valid_code(code) or requested_role not in ROLES:
            return False
        identity = self._resolve_identity(requested_role)
        with self._lock:
            self._replace(identity)
        print(f"[session] Logged in as {identity.display_name} (role={requested_role})")
        return True

    def switch_role(self, role: str) -> None:
        """Swap to the canned identity for *role* without re-authenticating.

        Demo-only shortcut. Disable it with ALLOW_ROLE_SWITCH=false, in which
        case callers must go through login() again.
        """
        if not self.allow_role_switch:
            raise PermissionError("Role switching is disabled; log in again instead.")
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role}")
        with self._lock:
            self._replace(self._resolve_identity(role))
        print(f"[session] Switched role to {role}")

    def logout(self) -> None:
        with self._lock:
            was_authenticated = self._identity is not None
            self._clear()
        if was_authenticated:
            print("[session] Logged out")

    # ── Internals ────────────────────────────────────────────────────

    def _replace(self, identity: Identity) -> None:
        self.storage.set(USER_KEY, encode_identity(identity, self._secret))
        self.storage.set(ROLE_KEY, identity.role)
        self._identity = identity

    def _clear(self) -> None:
        self.storage.remove(USER_KEY)
        self.storage.remove(ROLE_KEY)
        self._identity = None
