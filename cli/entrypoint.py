"""
Command line entrypoint for the ImageKit media client.

Subcommands:
    search   --format F [--format F ...] [--exclude] | --name NAME
    upload   PATH [--name N] [--folder F] [--tag T ...] [--private] [--no-unique-name]
    details  FILE_ID
    delete   FILE_ID

Credentials come from IMAGEKIT_PRIVATE_KEY / IMAGEKIT_PUBLIC_KEY. Results are
printed as JSON on stdout; a client error is printed as its ``to_dict()``
payload on stderr. Exits 0 on success, 1 on a client error, 2 on bad usage.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from typing import Any, List, Optional

from domain.models import FileFormat, FileRecord, UploadOptions
from services.media_library import ImageKit
from shared_utils.constants import LogScope
from shared_utils.error_handler import AppException, log_exception
from shared_utils.logging_utils import get_scoped_logger

logger = get_scoped_logger(LogScope.CLI)


def _format_arg(text: str) -> FileFormat:
    try:
        return FileFormat.parse(text)
    except AppException as exc:
        raise argparse.ArgumentTypeError(exc.message) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imagekit", description="ImageKit media library client")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search files by format or exact name")
    target = search.add_mutually_exclusive_group(required=True)
    target.add_argument("--format", dest="formats", action="append", type=_format_arg, metavar="FORMAT")
    target.add_argument("--name", help="Exact filename, extension included")
    search.add_argument("--exclude", action="store_true", help="Match files NOT in the given formats")

    upload = sub.add_parser("upload", help="Upload a local file")
    upload.add_argument("path")
    upload.add_argument("--name", help="Target filename (defaults to the local basename)")
    upload.add_argument("--folder")
    upload.add_argument("--tag", dest="tags", action="append", default=[])
    upload.add_argument("--private", action="store_true")
    upload.add_argument("--no-unique-name", action="store_true")

    details = sub.add_parser("details", help="Show metadata for one file")
    details.add_argument("file_id")

    delete = sub.add_parser("delete", help="Delete one file")
    delete.add_argument("file_id")
    return parser


def _to_json(result: Any) -> Any:
    if isinstance(result, FileRecord):
        return result.model_dump(mode="json", by_alias=True)
    if isinstance(result, list):
        return [_to_json(item) for item in result]
    return result


async def run_command(args: argparse.Namespace, imagekit: ImageKit) -> Any:
    """Dispatch parsed arguments to the client and return a JSON-ready result."""
    if args.command == "search":
        if args.name is not None:
            return await imagekit.search_by_filename(args.name)
        if args.exclude:
            return await imagekit.search_by_formats_excluding(args.formats)
        if len(args.formats) == 1:
            return await imagekit.search_by_format(args.formats[0])
        return await imagekit.search_by_formats(args.formats)

    if args.command == "upload":
        options = UploadOptions(
            folder=args.folder,
            tags=args.tags,
            is_private_file=True if args.private else None,
            use_unique_file_name=False if args.no_unique_name else None,
        )
        with open(args.path, "rb") as fh:
            return await imagekit.upload(fh, args.name or os.path.basename(args.path), options)

    if args.command == "details":
        return await imagekit.get_file_details(args.file_id)

    await imagekit.delete(args.file_id)
    return {"deleted": args.file_id}


async def _main(args: argparse.Namespace) -> Any:
    async with ImageKit.from_environment() as imagekit:
        return await run_command(args, imagekit)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI main — parse arguments, run one operation, print JSON."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "search" and args.name is not None and args.exclude:
        parser.error("--exclude applies to --format only")
    logger.info("cli_started", command=args.command)

    try:
        result = asyncio.run(_main(args))
    except AppException as exc:
        log_exception(exc, scope=LogScope.CLI)
        print(json.dumps(exc.to_dict(), sort_keys=True), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(_to_json(result), indent=2, sort_keys=True))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
