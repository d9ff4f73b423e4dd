import argparse
import asyncio
import locale
import logging
import sys
from typing import Callable, List, Optional

from statusbar.aggregator import StatusAggregator
from statusbar.config import Settings, get_settings
from statusbar.logging_ import setup_logging
from statusbar.services import titlebar

logger = logging.getLogger(__name__)


async def run_forever(
    aggregator: StatusAggregator,
    interval: float,
    push: Callable[[str], bool] = titlebar.push_status,
    max_ticks: Optional[int] = None,
) -> None:
    """
    Build and push one status line per interval.

    Each tick, including the push, finishes before the next one starts. A
    failing tick shows its error text and the loop carries on.
    """
    ticks = 0
    while max_ticks is None or ticks < max_ticks:
        try:
            status = await aggregator.tick()
        except Exception as exc:
            logger.exception("Unexpected error while building the status line")
            status = str(exc)

        logger.debug("Status: %s", status)
        try:
            await asyncio.to_thread(push, status)
        except Exception:
            logger.exception("Could not push the status line")
        ticks += 1
        await asyncio.sleep(interval)


async def _sample_once(aggregator: StatusAggregator, interval: float) -> str:
    # The first tick only primes the CPU and network counters
    await aggregator.tick()
    await asyncio.sleep(interval)
    return await aggregator.tick()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Samples CPU, memory, network, battery and volume and shows them in "
            "the window manager title bar via xsetroot.\n"
            "Defaults come from STATUS_* environment variables."
        )
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print a single status line to stdout and exit instead of updating the title bar.",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between updates (default: STATUS_UPDATE_INTERVAL or 1.0)",
    )
    parser.add_argument(
        "--interface",
        type=str,
        help="Network interface to show (default: STATUS_NET_INTERFACE or wlp3s0)",
    )
    args = parser.parse_args(argv)
    if args.interval is not None and args.interval <= 0:
        parser.error("--interval must be greater than 0")
    return args


def build_settings(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.interval is not None:
        overrides["update_interval"] = args.interval
    if args.interface:
        overrides["net_interface"] = args.interface

    settings = get_settings()
    if not overrides:
        return settings
    return Settings(**{**settings.model_dump(), **overrides})


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = build_settings(args)
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError as well
        print(f"[ERROR] Invalid STATUS_* configuration: {exc}", file=sys.stderr)
        return 2
    setup_logging(settings.log_level)

    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Falling back to the C locale for the clock: %s", exc)

    aggregator = StatusAggregator(settings)

    if args.once:
        print(asyncio.run(_sample_once(aggregator, settings.update_interval)))
        return 0

    logger.info(
        "Updating title bar every %.1fs (interface %s, battery %s)",
        settings.update_interval,
        settings.net_interface,
        settings.battery_device,
    )
    try:
        asyncio.run(run_forever(aggregator, settings.update_interval))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
