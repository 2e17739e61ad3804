"""
Flask route handlers for the REST API.
"""

import sys
import traceback

from flask import request, jsonify

from telehealth.api.auth import view_required
from telehealth.auth import is_valid_phone
from telehealth.directory import localized_name, localized_specialty
from telehealth.i18n import translate
from telehealth.portal import BOOKING_PATH
from telehealth.routing import LANDING_PATH, login_target


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _user_payload(identity):
    return identity.to_dict() if identity else None


def _doctor_payload(doctor, locale):
    data = doctor.to_dict()
    data["display_name"] = localized_name(doctor, locale)
    data["display_specialty"] = localized_specialty(doctor, locale)
    return data


def register_routes(app, portal):
    """Register all API routes on the Flask *app*."""

    def booking_payload():
        return portal.with_booking(snapshot)

    def snapshot(workflow):
        booking = workflow.booking
        return {
            "draft": workflow.draft.to_dict(),
            "offered_days": list(workflow.offered_days),
            "available_slots": list(workflow.available_slots),
            "booking": booking.to_dict() if booking else None,
        }

    def rejected(message):
        return jsonify({"success": False, "error": message, **booking_payload()}), 422

    # ── Health / info ────────────────────────────────────────────────

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "service": "Rural Health Connect API",
            "version": "1.0.0",
            "status": "running",
            "endpoints": {
                "otp": "/api/auth/otp",
                "login": "/api/auth/login",
                "logout": "/api/auth/logout",
                "session": "/api/session",
                "navigate": "/api/navigate",
                "booking": "/api/booking",
                "health": "/health",
            },
        })

    @app.route("/health", methods=["GET"])
    def health():
        checks = {"storage": False}
        try:
            portal.storage.keys()
            checks["storage"] = True
        except Exception as e:
            print(f"[WARN] Storage health check failed: {e}", file=sys.stderr)

        all_healthy = all(checks.values())
        return jsonify({
            "status": "healthy" if all_healthy else "unhealthy",
            "checks": checks,
            "authenticated": portal.session.is_authenticated,
        }), 200 if all_healthy else 503

    # ── Auth ─────────────────────────────────────────────────────────

    @app.route("/api/auth/otp", methods=["POST"])
    def request_otp():
        phone = str(_json_body().get("phone", ""))
        if not is_valid_phone(phone):
            return jsonify({"success": False, "error": "Please enter a valid phone number"}), 400
        return jsonify({"success": True, "message": "OTP sent to your phone number"}), 200

    @app.route("/api/auth/login", methods=["POST"])
    def login():
        if not request.is_json:
            return jsonify({"error": "Content-Type must be application/json"}), 400

        data = _json_body()
        phone = str(data.get("phone", "")).strip()
        otp = str(data.get("otp", "")).strip()
        role = data.get("role") or portal.guard.login_role(data.get("path", "/login"))

        if not portal.login(phone, otp, role):
            return jsonify({"success": False, "error": "Invalid OTP. Please try again."}), 401

        identity = portal.session.identity
        return jsonify({
            "success": True,
            "message": "Login successful!",
            "user": _user_payload(identity),
            "redirect": login_target(identity.role),
        }), 200

    @app.route("/api/auth/logout", methods=["POST"])
    def logout():
        portal.logout()
        return jsonify({"success": True, "message": "Logged out successfully", "redirect": LANDING_PATH}), 200

    @app.route("/api/auth/switch-role", methods=["POST"])
    def switch_role():
        role = str(_json_body().get("role", ""))
        try:
            portal.switch_role(role)
        except PermissionError as e:
            return jsonify({"success": False, "error": str(e)}), 403
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400

        return jsonify({
            "success": True,
            "user": _user_payload(portal.session.identity),
            "redirect": login_target(role),
        }), 200

    @app.route("/api/session", methods=["GET"])
    def get_session():
        session = portal.session
        return jsonify({
            "authenticated": session.is_authenticated,
            "role": session.current_role,
            "user": _user_payload(session.identity),
        }), 200

    # ── Locale ───────────────────────────────────────────────────────

    @app.route("/api/locale", methods=["GET"])
    def get_locale():
        return jsonify({"locale": portal.locale.locale}), 200

    @app.route("/api/locale", methods=["PUT"])
    def set_locale():
        try:
            portal.locale.set_locale(str(_json_body().get("locale", "")))
        except ValueError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        return jsonify({"success": True, "locale": portal.locale.locale}), 200

    @app.route("/api/translate/<key>", methods=["GET"])
    def translate_key(key):
        options = {k: v for k, v in request.args.items() if k != "locale"}
        locale = request.args.get("locale", portal.locale.locale)
        return jsonify({"key": key, "locale": locale, "text": translate(locale, key, **options)}), 200

    # ── Navigation ───────────────────────────────────────────────────

    @app.route("/api/navigate", methods=["GET"])
    def navigate():
        decision = portal.navigate(request.args.get("path", LANDING_PATH))
        return jsonify({
            "path": decision.path,
            "outcome": decision.outcome,
            "target": decision.target,
            "view": decision.view,
        }), 200

    @app.route("/api/navigation", methods=["GET"])
    def navigation():
        return jsonify({"role": portal.session.current_role, "items": portal.navigation()}), 200

    # ── Booking ──────────────────────────────────────────────────────

    @app.route("/api/doctors", methods=["GET"])
    @view_required(portal, BOOKING_PATH)
    def list_doctors():
        locale = portal.locale.locale
        return jsonify({"doctors": [_doctor_payload(d, locale) for d in portal.doctors]}), 200

    @app.route("/api/booking", methods=["GET"])
    @view_required(portal, BOOKING_PATH)
    def get_booking():
        return jsonify(booking_payload()), 200

    @app.route("/api/booking/doctor", methods=["POST"])
    @view_required(portal, BOOKING_PATH)
    def select_doctor():
        doctor = portal.find_doctor(str(_json_body().get("doctor_id", "")))
        if doctor is None:
            return jsonify({"success": False, "error": "Unknown doctor"}), 404
        if not portal.with_booking(lambda w: w.select_doctor(doctor)):
            return rejected("Doctor is offline or a doctor cannot be selected now")
        return jsonify({"success": True, **booking_payload()}), 200

    @app.route("/api/booking/slot", methods=["POST"])
    @view_required(portal, BOOKING_PATH)
    def select_slot():
        data = _json_body()
        if not portal.with_booking(lambda w: w.select_slot(data.get("date"), data.get("time"))):
            return rejected("Invalid slot for the current step")
        return jsonify({"success": True, **booking_payload()}), 200

    @app.route("/api/booking/details", methods=["POST"])
    @view_required(portal, BOOKING_PATH)
    def update_details():
        data = _json_body()
        if not portal.with_booking(
            lambda w: w.update_details(data.get("consultation_type"), data.get("symptom_notes"))
        ):
            return rejected("Invalid consultation details")
        return jsonify({"success": True, **booking_payload()}), 200

    @app.route("/api/booking/confirm", methods=["POST"])
    @view_required(portal, BOOKING_PATH)
    def confirm_booking():
        data = _json_body()
        if not portal.with_booking(
            lambda w: w.confirm(data.get("consultation_type"), data.get("symptom_notes"))
        ):
            return rejected("Consultation type and symptom notes are required")
        return jsonify({"success": True, "message": "Consultation booked successfully!", **booking_payload()}), 200

    @app.route("/api/booking/back", methods=["POST"])
    @view_required(portal, BOOKING_PATH)
    def booking_back():
        if not portal.with_booking(lambda w: w.back()):
            return rejected("Nothing to go back to")
        return jsonify({"success": True, **booking_payload()}), 200

    @app.route("/api/booking/restart", methods=["POST"])
    @view_required(portal, BOOKING_PATH)
    def booking_restart():
        portal.new_booking()
        return jsonify({"success": True, **booking_payload()}), 200

    # ── Error handlers ───────────────────────────────────────────────

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({"error": "Endpoint not found", "message": str(e), "redirect": LANDING_PATH}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed", "message": str(e)}), 405

    @app.errorhandler(500)
    def internal_error(e):
        print(f"[ERROR] Unhandled exception: {e}", file=sys.stderr)
        traceback.print_exc()
        return jsonify({"error": "Internal server error", "message": str(e)}), 500
