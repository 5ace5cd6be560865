# rotorwash/api/deps.py
"""
Request dependencies.

The registry, store and composer are built once by ``create_app`` and
kept on ``app.state``; routes receive them through these callables.

Example usage in a router:
    @router.get("/settings")
    def read(composer: SettingsPageComposer = Depends(deps.get_composer)):
        ...
"""

from fastapi import Request

from rotorwash.config.settings import Settings
from rotorwash.services.settings import SettingsPageComposer, SettingsStore


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> SettingsStore:
    return request.app.state.store


def get_composer(request: Request) -> SettingsPageComposer:
    return request.app.state.composer
