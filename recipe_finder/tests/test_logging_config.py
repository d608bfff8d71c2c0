import logging

from pythonjsonlogger.json import JsonFormatter

from recipe_finder.logging_config import setup_logging


def test_setup_logging_installs_json_formatter(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    access = logging.getLogger("uvicorn.access")
    saved_access = (access.handlers[:], access.propagate)
    try:
        setup_logging()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert access.handlers == root.handlers
        assert access.propagate is False
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)
        access.handlers, access.propagate = saved_access
