"""CLI entrypoint for the publish panel."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from studio_publish import __version__
from studio_publish.config import PublishSettings
from studio_publish.logging import configure_logging
from studio_publish.notifications import NotificationEvent, publish
from studio_publish.panel import PanelState, panel_state

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studio-publish",
        description="Trigger the studio deployment webhook",
    )
    parser.add_argument("--version", action="version", version=f"studio-publish {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show whether the webhook is configured")
    subparsers.add_parser("publish", help="Trigger the deployment webhook once")

    serve = subparsers.add_parser("serve", help="Run the REST API for the publish panel")
    serve.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    serve.add_argument("--port", type=int, default=8000, help="Port to listen on")

    return parser


def _print_notification(event: NotificationEvent) -> None:
    stream = sys.stdout if event.status == "success" else sys.stderr
    print(f"{event.title}: {event.description}", file=stream)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = PublishSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    config = settings.webhook_config()

    try:
        if args.command == "status":
            state = panel_state(config)
            print(f"Panel: {state.value}")
            if state is PanelState.READY:
                print(f"Webhook: {config.webhook_method} {config.webhook_url}")
            return 0

        if args.command == "publish":
            result = asyncio.run(publish(config, _print_notification))
            return 0 if result.ok else 1

        if args.command == "serve":
            import uvicorn

            from studio_publish.server import create_app

            uvicorn.run(create_app(settings), host=args.host, port=args.port)
            return 0

        logger.error("Unknown command", extra={"command": args.command})
        return 2

    except Exception:
        logger.exception("Command failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
