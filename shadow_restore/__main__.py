"""Entry point: python -m shadow_restore"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

import uvicorn
from pydantic import ValidationError

from .config import settings
from .errors import (
    CopyError,
    DateParseError,
    NoSnapshotError,
    NotifierConfigError,
    RemoteCallError,
)
from .models.common import TimeBucket
from .models.restore import RestoreRequest
from .services.restore_manager import RestoreManager

logger = logging.getLogger("shadow_restore")

EXIT_OK = 0
EXIT_NOTHING_COPIED = 1
EXIT_BAD_INPUT = 2
EXIT_REMOTE = 3

BUCKETS = [b.value for b in TimeBucket]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadow-restore",
        description="Restore files from the shadow copy nearest a date and time of day.",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    sub = parser.add_subparsers(dest="command", required=True)

    restore = sub.add_parser("restore", help="copy data out of a snapshot")
    restore.add_argument("--date", required=True, help="calendar date, e.g. 2019-03-07")
    restore.add_argument("--time", required=True, choices=BUCKETS, dest="time_bucket")
    restore.add_argument("--system", required=True, help="remote host name")
    where = restore.add_mutually_exclusive_group(required=True)
    where.add_argument("--drive", help="drive letter, addressed as <letter>$")
    where.add_argument("--share", help="share name")
    restore.add_argument("--path", default="", help="path inside the snapshot")
    restore.add_argument("--file", help="restore only this file from --path")
    restore.add_argument("--destination", required=True)
    restore.add_argument("--email", help="notify this address when done")
    restore.add_argument(
        "--recursive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="copy the whole tree (default: on for shares, off for drives)",
    )

    snaps = sub.add_parser("snapshots", help="list snapshot timestamps on a host")
    snaps.add_argument("--system", required=True)
    snaps.add_argument("--date")
    snaps.add_argument("--time", choices=BUCKETS, dest="time_bucket")

    sub.add_parser("serve", help="run the HTTP API")
    return parser


def serve() -> None:
    uvicorn.run(
        "shadow_restore.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


async def _restore(args, manager: RestoreManager) -> int:
    try:
        request = RestoreRequest(
            date=args.date,
            time_bucket=args.time_bucket,
            system=args.system,
            drive=args.drive,
            share=args.share,
            path=args.path,
            file=args.file,
            destination=args.destination,
            email=args.email,
            recursive=args.recursive,
        )
    except ValidationError as e:
        logger.error(f"Invalid restore request: {e}")
        return EXIT_BAD_INPUT

    result = await manager.run(request)
    copy = result.copy_outcome
    print(
        f"{copy.status.value}: {result.snapshot_path} -> {copy.destination} "
        f"({len(copy.copied)} files, snapshot {result.match.record.creation_timestamp})"
    )
    if copy.reason:
        print(f"  {copy.reason}")
    note = result.notification
    if request.email:
        print(f"  notification: {note.status.value}" + (f" ({note.reason})" if note.reason else ""))
    return EXIT_OK if result.ok else EXIT_NOTHING_COPIED


async def _snapshots(args, manager: RestoreManager) -> int:
    if (args.date is None) != (args.time_bucket is None):
        logger.error("--date and --time go together")
        return EXIT_BAD_INPUT
    listing = await manager.list_snapshots(args.system, args.date, args.time_bucket)
    for ts in listing.timestamps:
        print(ts)
    if listing.match:
        print(
            f"selected: {listing.match.record.creation_timestamp} "
            f"(@GMT-{listing.match.token}) for {listing.target_time}"
        )
    return EXIT_OK


def main(argv: Optional[list[str]] = None, manager: Optional[RestoreManager] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "serve":
        serve()
        return EXIT_OK

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
    if args.debug or settings.debug:
        logger.setLevel(logging.DEBUG)

    manager = manager or RestoreManager()
    handler = _restore if args.command == "restore" else _snapshots
    try:
        return asyncio.run(handler(args, manager))
    except (DateParseError, NotifierConfigError) as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT
    except (RemoteCallError, NoSnapshotError) as e:
        logger.error(str(e))
        return EXIT_REMOTE
    except CopyError as e:
        logger.error(str(e))
        return EXIT_NOTHING_COPIED


if __name__ == "__main__":
    sys.exit(main())
