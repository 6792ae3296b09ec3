"""ASGI entrypoint for the Staybook API."""

from staybook.api.app import create_app
from staybook.containers import build_container

app = create_app(build_container())
