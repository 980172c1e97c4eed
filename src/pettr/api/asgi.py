"""ASGI entrypoint for the Pettr food tracker API."""

from pettr.api.app import create_app
from pettr.containers import build_container

app = create_app(build_container())
