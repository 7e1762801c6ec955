"""ASGI entrypoint for the custody scan API."""

from custody_scan.api.app import create_app
from custody_scan.containers import build_container

app = create_app(build_container())
