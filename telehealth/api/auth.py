"""
Route-guard decorator for the Flask API.
"""

from functools import wraps

from flask import jsonify

from telehealth.routing import FORBIDDEN, REDIRECT


def view_required(portal, path):
    """Protect an endpoint with the guard decision for the view at *path*."""
    def decorator(f):
        @wraps(f)
        def decorated(*args, **kwargs):
            decision = portal.guard.resolve(path)

            if decision.outcome == REDIRECT:
                return jsonify({
                    "error": "Authentication required",
                    "redirect": decision.target,
                }), 401

            if decision.outcome == FORBIDDEN:
                return jsonify({
                    "error": f"Role '{portal.session.current_role}' may not open {decision.path}",
                    "redirect": decision.target,
                }), 403

            return f(*args, **kwargs)

        return decorated

    return decorator
