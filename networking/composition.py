"""Composition root: build a live Service from settings.

Composition may import concrete classes, call factories and pass interface
types on to the application layer.
"""
from __future__ import annotations

from networking.application.service import Service
from networking.config.settings import Settings
from networking.domain.behavior import RequestBehavior
from networking.domain.configuration import Configuration
from networking.infrastructure.http.factory import create_transport


def create_service(settings: Settings | None = None, behavior: RequestBehavior | None = None) -> Service:
    configuration = Configuration.from_settings(settings or Settings())
    return Service(configuration, create_transport(configuration), behavior=behavior)
