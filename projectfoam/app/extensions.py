from __future__ import annotations

from typing import Optional

from flask import Flask, current_app

from projectfoam.app.repository import ProfileRepository, StaticProfileRepository


class ProfileStore:
    """Binds a ProfileRepository to the app, Flask-extension style."""

    extension_name = "profile_store"

    def __init__(self, app: Optional[Flask] = None, repository: Optional[ProfileRepository] = None):
        if app is not None:
            self.init_app(app, repository)

    def init_app(self, app: Flask, repository: Optional[ProfileRepository] = None) -> None:
        app.extensions[self.extension_name] = repository or StaticProfileRepository()

    @property
    def repository(self) -> ProfileRepository:
        return current_app.extensions[self.extension_name]


# Singletons (initialized in app factory)
profiles = ProfileStore()
