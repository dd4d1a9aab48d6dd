"""
Utility functions for endpoint operations.
"""
from fastapi import Request

from teachmi.services.session_service import SessionController


def get_session_controller(request: Request) -> SessionController:
    """Dependency returning the process-wide study session created at startup."""
    return request.app.state.session_controller
