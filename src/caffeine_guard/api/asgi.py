"""ASGI entrypoint for the caffeine guard API."""

from caffeine_guard.api.app import create_app
from caffeine_guard.containers import build_container

app = create_app(build_container())
