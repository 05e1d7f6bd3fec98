#!/usr/bin/env python3
"""Programmatic publish example.

This demonstrates using the panel components directly:

* load settings from `.env`
* show the panel state
* trigger the deployment webhook and print the resulting notification
"""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

from studio_publish.config import PublishSettings
from studio_publish.logging import configure_logging
from studio_publish.notifications import NotificationEvent, publish
from studio_publish.panel import PanelState, panel_state


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Trigger the deployment webhook (example).")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only report whether the webhook is configured",
    )
    return parser.parse_args(argv)


def _show(event: NotificationEvent) -> None:
    print(f"[{event.status}] {event.title}: {event.description}")


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = PublishSettings()
    configure_logging(settings.log_level)

    config = settings.webhook_config()
    state = panel_state(config)
    print(f"Panel state: {state.value}")
    if state is PanelState.UNCONFIGURED or args.dry_run:
        return 0

    result = asyncio.run(publish(config, _show))
    return 0 if result.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
