"""
Interactive terminal client for the Rural Health Connect portal.
Phone/OTP login, role-aware navigation and the consultation booking wizard.
"""

from typing import Optional, Sequence

import pandas as pd

from telehealth.auth import is_valid_phone
from telehealth.booking import Stage
from telehealth.config import CONSULTATION_TYPES, OTP_LENGTH, ROLES
from telehealth.directory import localized_name, localized_specialty
from telehealth.models import Doctor
from telehealth.portal import BOOKING_PATH, create_portal
from telehealth.routing import REDIRECT, FORBIDDEN, login_target

HELP = """Commands:
  whoami          show the current user
  menu            list pages for your role
  go <path>       open a page, e.g. 'go /patient/records'
  book            book a consultation
  switch <role>   switch role (demo shortcut)
  lang <code>     change language (en, hi, pa)
  logout          log out
  quit            exit"""


class Quit(Exception):
    pass


def ask(prompt: str) -> str:
    try:
        answer = input(prompt).strip()
    except (EOFError, KeyboardInterrupt):
        print("\nExiting.")
        raise Quit()
    if answer.lower() in {"quit", "exit"}:
        raise Quit()
    return answer


# ── Tables ───────────────────────────────────────────────────────────

def doctor_table(doctors: Sequence[Doctor], locale: str) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "id": d.id,
            "name": localized_name(d, locale),
            "specialty": localized_specialty(d, locale),
            "experience": f"{d.experience_years} yrs",
            "rating": d.rating,
            "fee": f"₹{d.consultation_fee}",
            "status": "Online" if d.is_online else "Offline",
        }
        for d in doctors
    ])


def slot_table(days: Sequence[str], slots: Sequence[str]) -> pd.DataFrame:
    """One column per offered day, one row per slot."""
    return pd.DataFrame({day: list(slots) for day in days}, index=range(1, len(slots) + 1))


# ── Login ────────────────────────────────────────────────────────────

def login_flow(portal, role: Optional[str] = None) -> bool:
    t = portal.locale.t
    if role is None:
        role = ask(f"Role ({', '.join(ROLES)}) [patient]: ").lower() or "patient"
        if role not in ROLES:
            print(f"[auth] Unknown role '{role}'.")
            return False

    phone = ask(f"{t('patient.phoneNumber')}: ")
    if not is_valid_phone(phone):
        print("[auth] Please enter a valid phone number.")
        return False
    print("[auth] OTP sent to your phone number (demo: enter any "
          f"{OTP_LENGTH} digits).")

    otp = ask(f"{t('patient.enterOTP')}: ")
    if not portal.login(phone, otp, role):
        print("[auth] Invalid OTP. Please try again.")
        return False

    identity = portal.session.identity
    print(f"\n[auth] {t('common.welcome')}, {identity.display_name} (role={identity.role})")
    open_page(portal, login_target(identity.role))
    return True


# ── Navigation ───────────────────────────────────────────────────────

def open_page(portal, path: str) -> None:
    decision = portal.navigate(path)
    if decision.outcome == REDIRECT:
        print(f"[nav] {decision.path} -> redirected to {decision.target}")
    elif decision.outcome == FORBIDDEN:
        print(f"[nav] {decision.path} is not available for your role")
    else:
        print(f"[nav] Showing {decision.view} ({decision.path})")


def show_menu(portal) -> None:
    items = portal.navigation()
    if not items:
        print("(log in to see your menu)")
        return
    for item in items:
        print(f"  {item['path']:<24} {item['label']}")


# ── Booking ──────────────────────────────────────────────────────────

def booking_flow(portal) -> None:
    decision = portal.navigate(BOOKING_PATH)
    if not decision.allowed:
        print(f"[nav] {decision.path} -> {decision.target}")
        return

    t = portal.locale.t
    locale = portal.locale.locale
    workflow = portal.booking

    while True:
        stage = workflow.stage

        if stage == Stage.SELECTING_DOCTOR:
            print(f"\n[{t('patient.selectDoctor')}]")
            print(doctor_table(portal.doctors, locale).to_string(index=False))
            choice = ask("\nDoctor id (or 'cancel'): ")
            if choice.lower() == "cancel":
                portal.discard_booking()
                return
            doctor = portal.find_doctor(choice)
            if doctor is None:
                print("Unknown doctor id.")
            elif not workflow.select_doctor(doctor):
                print(f"{doctor.name} is offline right now; please pick an online doctor.")

        elif stage == Stage.SELECTING_SLOT:
            draft = workflow.draft
            print(f"\n[{t('patient.selectTimeSlot')}] {localized_name(draft.doctor, locale)}")
            days = workflow.offered_days
            print(slot_table(days, workflow.available_slots).to_string())
            choice = ask("\nDay (1 = tomorrow, 2 = day after) and slot number, e.g. '1 3' (or 'back'): ")
            if choice.lower() == "back":
                workflow.back()
                continue
            try:
                day_no, slot_no = (int(p) for p in choice.split())
            except ValueError:
                day_no = slot_no = 0
            if not (1 <= day_no <= len(days) and 1 <= slot_no <= len(workflow.available_slots)):
                print("Please enter two numbers from the table.")
                continue
            day = days[day_no - 1]
            slot = workflow.available_slots[slot_no - 1]
            workflow.select_slot(day, slot)

        elif stage == Stage.ENTERING_DETAILS:
            draft = workflow.draft
            print(f"\n[Consultation Details] {localized_name(draft.doctor, locale)} "
                  f"on {draft.date} at {draft.time} – fee ₹{draft.doctor.consultation_fee}")
            kind = ask(f"Consultation type ({'/'.join(CONSULTATION_TYPES)}) [video] (or 'back'): ").lower()
            if kind == "back":
                workflow.back()
                continue
            notes = ask("Symptoms / reason for consultation: ")
            if not workflow.confirm(kind or "video", notes):
                print("Please choose 'video' or 'phone'.")

        else:
            booking = workflow.booking
            label = "Video Call" if booking.consultation_type == "video" else "Phone Call"
            print("\n[Booking Confirmed!]")
            print(f"  {localized_name(booking.doctor, locale)}")
            print(f"  {booking.date} at {booking.time}")
            print(f"  Type: {label}")
            again = ask("\nBook another consultation? [y/N]: ").lower()
            if again != "y":
                return
            portal.new_booking()
            workflow = portal.booking


# ── Main loop ────────────────────────────────────────────────────────

def handle(portal, line: str) -> None:
    cmd, _, arg = line.partition(" ")
    cmd, arg = cmd.lower(), arg.strip()

    if cmd == "help":
        print(HELP)
    elif cmd == "whoami":
        identity = portal.session.identity
        print(f"{identity.display_name} ({identity.role}, id={identity.id})" if identity else "(not logged in)")
    elif cmd == "menu":
        show_menu(portal)
    elif cmd == "go":
        open_page(portal, arg or "/")
    elif cmd == "book":
        booking_flow(portal)
    elif cmd == "switch":
        try:
            portal.switch_role(arg)
        except (ValueError, PermissionError) as e:
            print("[auth] Could not switch role.")
            print("Details:", e)
            return
        open_page(portal, login_target(arg))
    elif cmd == "lang":
        try:
            portal.locale.set_locale(arg)
        except ValueError as e:
            print("Details:", e)
            return
        print(f"[i18n] {portal.locale.t('patient.welcomeMessage')}")
    elif cmd == "logout":
        portal.logout()
        print("Logged out.")
    else:
        print(f"Unknown command '{cmd}'. Type 'help'.")


def main():
    print("=== Rural Health Connect: Telemedicine Portal ===\n")

    portal = create_portal()
    try:
        while True:
            if not portal.session.is_authenticated:
                login_flow(portal)
                continue

            line = ask("\n> ")
            if line:
                handle(portal, line)
    except Quit:
        print("Goodbye.")
    finally:
        portal.teardown()


if __name__ == "__main__":
    main()
