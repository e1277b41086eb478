"""ASGI entrypoint for the query portal API."""

from query_portal.api.app import create_app
from query_portal.containers import build_container

app = create_app(build_container())
