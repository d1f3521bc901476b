"""ASGI entrypoint for the fithood API."""

from fithood.api.app import create_app
from fithood.containers import build_container

app = create_app(build_container())
