"""ASGI entrypoint for the foodtopia API."""

from foodtopia.api.app import create_app
from foodtopia.containers import build_container

app = create_app(build_container())
