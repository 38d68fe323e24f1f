"""Production entry point for the SEO Inspector API.

Host, port, workers and log level come from the application settings
(``API_HOST``, ``API_PORT``, ``API_WORKERS``, ``LOG_LEVEL``). A platform
``PORT`` variable wins over ``API_PORT``.
"""

import os
import signal
import sys

from api.config import Settings, get_settings


def uvicorn_command(settings: Settings, port: str | None = None) -> list[str]:
    """Command line serving ``api.main:app`` with the given settings."""
    return [
        "uvicorn",
        "api.main:app",
        "--host",
        settings.api_host,
        "--port",
        port or str(settings.api_port),
        "--workers",
        str(settings.api_workers),
        "--log-level",
        settings.log_level.lower(),
        # AccessLogMiddleware writes the per-request line
        "--no-access-log",
        "--proxy-headers",
        "--forwarded-allow-ips",
        "*",
    ]


def start_api() -> None:
    settings = get_settings()
    command = uvicorn_command(settings, port=os.getenv("PORT"))
    print(f"Starting SEO Inspector ({settings.env}): {' '.join(command[1:])}")

    # Replace the current process so signals reach uvicorn directly
    os.execvp(command[0], command)


def signal_handler(signum: int, _frame: object) -> None:
    print(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def main() -> None:
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)
    start_api()


if __name__ == "__main__":
    main()
