"""Command that serves the games API with sample data."""

import argparse
import logging
import os
import time

from werkzeug.serving import run_simple

from gamesapi.routes import games_routes
from gamesapi.schema import example_db

LOG_ENV_VAR = "GAMESAPI_LOG"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

_log = logging.getLogger("gamesapi")


class _AccessLog:
    """WSGI middleware logging one line per request."""

    def __init__(self, app):
        self._app = app

    def __call__(self, environ, start_response):
        started = time.perf_counter()
        captured = {}

        def recording_start_response(status, headers, exc_info=None):
            captured["status"] = status.split(" ", 1)[0]
            return start_response(status, headers, exc_info)

        result = self._app(environ, recording_start_response)
        elapsed_ms = (time.perf_counter() - started) * 1000
        _log.info(
            '%s "%s %s %s" %s "%s" "%s" %.3fms',
            environ.get("REMOTE_ADDR", "-"),
            environ.get("REQUEST_METHOD", ""),
            environ.get("PATH_INFO", ""),
            environ.get("SERVER_PROTOCOL", ""),
            captured.get("status", "-"),
            environ.get("HTTP_REFERER", "-"),
            environ.get("HTTP_USER_AGENT", "-"),
            elapsed_ms,
        )
        return result


def _configure_logging(level):
    logger = logging.getLogger("gamesapi")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)-5s %(name)s > %(message)s")
        )
        logger.addHandler(handler)


def main(argv=None):
    """Serve the games API on the given address until interrupted."""
    parser = argparse.ArgumentParser(
        prog="gamesapi", description="Serve the games RESTful API."
    )
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    level_name = os.environ.get(LOG_ENV_VAR, "debug").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        parser.error(f"unknown log level in {LOG_ENV_VAR}: {level_name.lower()}")
    _configure_logging(level)

    app = _AccessLog(games_routes(example_db()))
    run_simple(args.host, args.port, app)
    return 0