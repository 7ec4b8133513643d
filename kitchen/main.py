import argparse
import logging
from typing import Sequence

from rich.console import Console
from rich.logging import RichHandler

from kitchen import closures
from kitchen import config
from kitchen.domain import services


logger = logging.getLogger(__name__)


DEMOS = ("closures", "chef", "all")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="closure-kitchen",
        description="Closures captured by reference or by value, and a chef with a secret.",
    )
    parser.add_argument("demo", nargs="?", choices=DEMOS, default="all")
    parser.add_argument("--name", default=None, help="name of the mystery chef")
    parser.add_argument(
        "--ready",
        action="store_true",
        help="the world is ready for the secret ingredient",
    )
    parser.add_argument(
        "--keep-person-goal",
        action="store_true",
        help="let the chef fall back to the goal every person has",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(level: str | int) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    cfg: config.Config | None = None,
) -> int:
    args = parse_args(argv)
    cfg = config.Config() if cfg is None else cfg
    console = Console() if console is None else console

    setup_logging(logging.DEBUG if args.verbose else cfg.log_level)
    logger.info("Running %s demo (env=%s)", args.demo, cfg.env.value)

    if args.demo in ("closures", "all"):
        closures.run(console)

    if args.demo in ("chef", "all"):
        services.run(
            console,
            name=cfg.chef_name if args.name is None else args.name,
            world_status=True if args.ready else cfg.world_ready,
            override_goal=not args.keep_person_goal,
        )

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
