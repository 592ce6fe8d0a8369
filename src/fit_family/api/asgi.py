"""ASGI entrypoint for the FitFamily API."""

from fit_family.api.app import create_app
from fit_family.containers import build_container

app = create_app(build_container())
