"""Server start script

Usage:
    python run_server.py [port] [base_url]

port defaults to settings.PORT (5000), base_url to settings.BASE_URL or
http://localhost:<port>. The base URL is what clients see in each todo's url.
"""

import sys
from typing import Sequence

import uvicorn

from todo_backend.api.main import create_app
from todo_backend.app.core.config import settings
from todo_backend.app.core.todo_store import TodoStore


def parse_args(argv: Sequence[str]) -> tuple[int, str]:
    """Port and base URL from positional command line arguments"""
    port = int(argv[0]) if len(argv) > 0 else settings.PORT
    if len(argv) > 1:
        base_url = argv[1]
    else:
        base_url = settings.BASE_URL or f"http://localhost:{port}"
    return port, base_url


def main(argv: Sequence[str]) -> None:
    port, base_url = parse_args(argv)
    app = create_app(TodoStore(base_url))

    uvicorn.run(
        app,
        host=settings.HOST,
        port=port,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main(sys.argv[1:])
