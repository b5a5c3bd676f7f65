"""Application factory and command-line entry point for the HTTP server."""

from __future__ import annotations

import argparse
import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv
from flask import Flask

from .errors import SlackAttendanceError
from .queries import DatabaseQueries, connect
from .routes import create_blueprint

_PORT_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_port(text: str) -> int:
    if not _PORT_PATTERN.fullmatch(text) or not 0 <= int(text) <= 65535:
        raise ValueError("SERVER_PORT must be a valid u16 number")
    return int(text)


@dataclass(frozen=True)
class ServerSettings:
    """Where to store data and where to listen."""

    database_url: str
    host: str = "127.0.0.1"
    port: int = 8080

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServerSettings":
        """Read settings from the environment; DATABASE_URL is required."""
        env = os.environ if environ is None else environ
        database_url = env.get("DATABASE_URL")
        if database_url is None:
            raise ValueError("DATABASE_URL must be set in .env")
        return cls(
            database_url=database_url,
            host=env.get("SERVER_HOST", "127.0.0.1"),
            port=_parse_port(env.get("SERVER_PORT", "8080")),
        )


def create_app(queries: DatabaseQueries) -> Flask:
    """Build the Flask application with its routes and database access."""
    app = Flask(__name__)
    app.extensions["queries"] = queries
    app.register_blueprint(create_blueprint())
    return app


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Standup attendance HTTP server.")
    parser.add_argument("--env-file", default=".env", help="file of environment settings")
    args = parser.parse_args(argv)

    load_dotenv(dotenv_path=args.env_file)
    try:
        settings = ServerSettings.from_env()
        queries = DatabaseQueries(connect(settings.database_url))
        queries.create_schema()
    except (ValueError, SlackAttendanceError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    app = create_app(queries)
    print(f"Server listening on http://{settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())