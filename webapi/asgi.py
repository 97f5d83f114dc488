"""ASGI entrypoint, e.g. ``uvicorn webapi.asgi:app``."""

from webapi.core.config import get_settings
from webapi.main import configure_logging, create_app

settings = get_settings()

configure_logging(settings.LOG_LEVEL)

app = create_app(settings)
