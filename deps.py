# deps.py
# FastAPI dependencies shared by the routers.

from fastapi import Request

from stores import GuideStore


def get_store(request: Request) -> GuideStore:
    """The store instance owned by the running application."""
    return request.app.state.store


def get_settings(request: Request):
    return request.app.state.settings
