"""Command line entry point of the corpus generation tool."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from .download import Downloader, DownloadError, DownloadResult

logger = logging.getLogger(__name__)

_DEFAULT_N_TASKS = 4


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(prog="ungoliant", description="corpus generation tool.")
    commands = parser.add_subparsers(dest="command", required=True)

    download = commands.add_parser("download", help="Downloading of CommonCrawl")
    download.add_argument("paths_file", type=Path, help="path to wet.paths file")
    download.add_argument("dst", type=Path, help="download destination")
    download.add_argument(
        "-t", dest="n_tasks", type=int, default=None,
        help="number of concurrent downloads. Default is 4.",
    )
    download.add_argument(
        "-o", dest="offset", type=int, default=None,
        help="number of files to skip. Default is 0.",
    )
    return parser


def run_download(
    paths_file: str | Path,
    dst: str | Path,
    n_tasks: int | None = None,
    offset: int | None = None,
    error_path: str | Path = "errors.txt",
) -> list[DownloadResult]:
    """Download every shard listed in ``paths_file`` into ``dst``.

    Failed HTTP downloads are recorded in ``error_path`` as
    ``<url>\\t<index>`` lines. Returns the results of every download.
    """
    with open(paths_file, "rb") as handle:
        downloader = Downloader.from_paths_file(
            handle, n_tasks if n_tasks is not None else _DEFAULT_N_TASKS
        )
    results = asyncio.run(downloader.download(dst, offset))

    with open(error_path, "w", encoding="utf-8") as errors:
        for failure in results:
            if not isinstance(failure, BaseException):
                continue
            logger.error("Error during download:\n %r", failure)
            if isinstance(failure, DownloadError):
                errors.write(f"{failure.url}\t{failure.index}\n")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool."""
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    logger.debug("cli args %s", args)

    if args.command == "download":
        run_download(args.paths_file, args.dst, args.n_tasks, args.offset)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())