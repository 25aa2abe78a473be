"""
API Dependencies.
"""

from fastapi import Request

from barberhub.infrastructure.store import BarbershopStore


def get_store(request: Request) -> BarbershopStore:
    """Get the store owned by the running application."""
    return request.app.state.store
