from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from namemc.common import configure_json_logging
from namemc.config import get_app_config
from namemc.errors import InvalidArgumentError, RemoteFetchError
from namemc.facade import NameMC

logger = logging.getLogger("namemc.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namemc",
        description="Look up NameMC profile friends or server likes and print them as JSON.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    profile = subparsers.add_parser("profile", help="List the friends of a profile.")
    profile.add_argument("uuid", help="Profile UUID.")

    server = subparsers.add_parser("server", help="List the profiles that liked a server.")
    server.add_argument("address", help="Server address, e.g. mc.hypixel.net.")
    server.add_argument(
        "--liked-by",
        metavar="UUID",
        help="Only report whether this profile liked the server.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None, *, namemc: Optional[NameMC] = None) -> int:
    args = _build_parser().parse_args(list(argv) if argv is not None else None)

    settings = get_app_config()
    configure_json_logging(
        "namemc",
        level=settings.logging.level,
        stream=sys.stderr,
        log_dir=settings.logging.log_dir,
    )

    api = namemc if namemc is not None else NameMC.from_settings(settings)
    try:
        if args.command == "profile":
            result = api.profile_repository.fetch(args.uuid).to_dict()
        else:
            server = api.server_repository.fetch(args.address)
            if args.liked_by:
                liker = api.profile_repository.normalize_key(args.liked_by)
                result = {"address": server.address, "liked": server.is_liked_by(liker)}
            else:
                result = server.to_dict()
    except InvalidArgumentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except RemoteFetchError as exc:
        logger.error("Lookup failed for %s", exc.key, exc_info=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        if namemc is None:
            api.close()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
