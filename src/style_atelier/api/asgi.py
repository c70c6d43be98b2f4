"""ASGI entrypoint for the style atelier API."""

from style_atelier.api.app import create_app
from style_atelier.containers import build_container

app = create_app(build_container())
