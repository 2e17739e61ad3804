"""
Flask application factory and server entry-point.
"""

import os
import sys
import traceback

from flask import Flask
from flask_cors import CORS

from telehealth.api.routes import register_routes
from telehealth.config import get_env
from telehealth.portal import create_portal


def create_app(portal=None):
    """Build and return a fully configured Flask application."""
    app = Flask(__name__)
    CORS(app)

    # ── Initialise shared resources ──────────────────────────────────
    if portal is None:
        try:
            print("[init] Opening storage and restoring session...")
            portal = create_portal()
            print("[init] ✓ API server ready")
        except Exception as e:
            print(f"[FATAL] Failed to initialize: {e}", file=sys.stderr)
            traceback.print_exc()
            sys.exit(1)

    app.extensions["portal"] = portal

    # ── Register routes ──────────────────────────────────────────────
    register_routes(app, portal)

    return app


def main():
    """Run the development server."""
    print("=" * 60)
    print("Rural Health Connect – REST API Server")
    print("=" * 60)

    debug = os.getenv("FLASK_ENV") == "development"
    if os.getenv("FLASK_ENV") == "production":
        get_env("JWT_SECRET_KEY")  # refuse the built-in dev secret

    app = create_app()

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))

    print(f"\n[server] Starting Flask API on {host}:{port}")
    print(f"[server] Debug mode: {debug}")
    print(f"[server] CORS enabled: True")
    print("\nAPI Endpoints:")
    print(f"  - POST http://{host}:{port}/api/auth/otp")
    print(f"  - POST http://{host}:{port}/api/auth/login")
    print(f"  - POST http://{host}:{port}/api/auth/switch-role")
    print(f"  - POST http://{host}:{port}/api/auth/logout")
    print(f"  - GET  http://{host}:{port}/api/session")
    print(f"  - GET  http://{host}:{port}/api/navigate?path=/patient")
    print(f"  - GET  http://{host}:{port}/api/booking")
    print(f"  - GET  http://{host}:{port}/health")
    print("\n" + "=" * 60)

    app.run(host=host, port=port, debug=debug, threaded=True)


if __name__ == "__main__":
    main()
