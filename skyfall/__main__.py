import os
import sys

os.environ.setdefault('ESCDELAY', '25')  # reduce escape key delay (ms)

import argparse
import asyncio
import logging

from rich.console import Console

from .app import App
from .config import Config
from .logging_config import setup_logging

log = logging.getLogger("skyfall")


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="skyfall", description="Click to drop balloons and bricks on a terminal canvas.")
    p.add_argument("--tick-rate", type=float, help="simulation steps per second (default 10)")
    p.add_argument("--frame-rate", type=float, help="redraws per second (default 30)")
    p.add_argument("--log-file", help="write logs here (the screen is taken by the canvas)")
    p.add_argument("--log-level", help="DEBUG, INFO, WARNING, ...")
    return p.parse_args(argv)


def load_config(args) -> Config:
    cfg = Config.from_env()
    if args.tick_rate is not None: cfg.tick_rate = args.tick_rate
    if args.frame_rate is not None: cfg.frame_rate = args.frame_rate
    if args.log_file: cfg.log_file = args.log_file
    if args.log_level: cfg.log_level = args.log_level
    return cfg.validate()


async def run_app(config: Config):
    app = App(config)
    await app.run()


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging()
    try:
        config = load_config(args)
        setup_logging(config.log_level, config.log_file)
        asyncio.run(run_app(config))
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        log.exception("fatal error")
        Console(stderr=True).print(f"application exited with error: {e}", markup=False, highlight=False, soft_wrap=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
