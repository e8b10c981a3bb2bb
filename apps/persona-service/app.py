"""
App assembly entry point.

Re-exports the FastAPI `app` from `persona_core.api.main` so servers can
target `app:app`.
"""

from persona_core.api.main import app  # noqa: F401
