"""App lifespan — logging installed on startup, removed on shutdown."""

import logging

from query_echo.config import Settings
from query_echo.main import create_app


async def test_lifespan_installs_and_removes_log_handler():
    app = create_app(Settings(log_format="text", log_level="WARNING"))
    before = list(logging.root.handlers)
    previous_level = logging.root.level

    try:
        async with app.router.lifespan_context(app):
            assert len(logging.root.handlers) == len(before) + 1
            assert logging.root.level == logging.WARNING
    finally:
        logging.root.setLevel(previous_level)

    assert logging.root.handlers == before


def test_create_app_uses_settings_name():
    app = create_app(Settings(app_name="echo-under-test"))
    assert app.title == "echo-under-test"
