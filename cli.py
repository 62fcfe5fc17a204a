from __future__ import annotations

import argparse
import json
import signal

from dotenv import load_dotenv

from cnhub.config.cli_settings import CliSettings
from cnhub.git.hub_config import HubConfig, build_hub_config
from cnhub.logger import BasicLogger


def _handle_sigint(signum, frame) -> None:
    print("\n[INTERRUPTED] cnhub terminated by user (Ctrl+C).")
    raise SystemExit(130)  # 130 is the conventional exit code for SIGINT


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cnhub",
        description="cnhub – derive hub repository names, URLs and paths",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    # --------------------
    # config command
    # --------------------
    config_p = sub.add_parser("config", help="Print the hub configuration for a name")
    config_p.add_argument(
        "name",
        type=str,
        help="Sanitized base name (used verbatim, e.g. 'myproj' -> 'cn-myproj')",
    )
    config_p.add_argument(
        "--owner",
        type=str,
        default=None,
        help="GitHub user or organization. Default: $CNHUB_OWNER.",
    )
    config_p.add_argument(
        "--workspace-root",
        type=str,
        default=None,
        help="Directory the hub checkout lives under. Default: $CNHUB_WORKSPACE_ROOT.",
    )
    config_p.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format. Default: text.",
    )

    return parser


def _render(config: HubConfig, fmt: str) -> str:
    data = config.to_dict()
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False)
    return "\n".join(f"{key}: {value}" for key, value in data.items())


def main(argv: list[str] | None = None) -> int:
    # Register Ctrl+C handler as early as possible
    signal.signal(signal.SIGINT, _handle_sigint)

    load_dotenv()

    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = CliSettings.from_env()
    except ValueError as e:
        parser.error(str(e))

    logger = BasicLogger(
        "cnhub.cli",
        level=settings.log_level_value,
        log_to_file=settings.log_to_file,
        log_dir=settings.log_dir,
    ).get_logger()

    if args.command == "config":
        owner = args.owner or settings.owner
        workspace_root = args.workspace_root or settings.workspace_root
        if not owner:
            parser.error("config: --owner is required (or set CNHUB_OWNER)")
        if not workspace_root:
            parser.error("config: --workspace-root is required (or set CNHUB_WORKSPACE_ROOT)")

        config = build_hub_config(args.name, owner, workspace_root)
        logger.debug("Built hub config", extra=config.to_dict())

        print(_render(config, args.format))
        return 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
