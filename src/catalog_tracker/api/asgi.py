"""ASGI entrypoint for the catalog tracker API."""

from catalog_tracker.api.app import create_app
from catalog_tracker.containers import build_container

app = create_app(build_container())
