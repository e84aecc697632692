import argparse
import logging
import sys

from myshell.exceptions import ConfigurationError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="myshell",
        description=(
            "Interactive shell with built-in cd, ls, cat, stat, mkdir, rmdir, rm and pwd."
        ),
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Render ls and stat output as tables with colors",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: MYSHELL_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    try:
        from myshell.config.settings import settings
    except ConfigurationError as e:
        print(f"myshell: {e}", file=sys.stderr)
        return 2

    level = (args.log_level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from myshell.container import DependencyContainer

    container = DependencyContainer(app_settings=settings, pretty=args.pretty)
    return container.get_run_shell_use_case().execute()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
