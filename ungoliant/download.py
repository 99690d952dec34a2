"""Concurrent downloading of CommonCrawl WET shards.

Only a ``wet.paths`` file, as published alongside each crawl, is needed:
each of its lines is a path relative to the CommonCrawl data host.
"""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import IO, Union
from urllib.parse import urlsplit

import aiohttp

from .errors import UngoliantError

logger = logging.getLogger(__name__)

#: Base url for CommonCrawl downloading.
BASE_URL = "https://data.commoncrawl.org/"

_CHUNK_SIZE = 64 * 1024

DownloadResult = Union[Path, BaseException]


class DownloadError(UngoliantError):
    """An HTTP failure while downloading one file, with its destination and index."""

    def __init__(self, url: str, path: Path, index: int, cause: BaseException) -> None:
        self.url = url
        self.path = Path(path)
        self.index = index
        self.cause = cause
        super().__init__(f"could not download {url} (#{index}) to {self.path}: {cause}")


async def download_file(session: aiohttp.ClientSession, url: str, dst: str | Path) -> Path:
    """Download ``url`` into ``dst`` and return the destination path.

    Raises aiohttp.ClientError (including ClientResponseError for non-2xx
    statuses) on HTTP failures and OSError if the file cannot be written.
    """
    dst = Path(dst)
    logger.debug("getting %s", url)
    async with session.get(url) as resp:
        resp.raise_for_status()
        with open(dst, "wb") as out:
            async for chunk in resp.content.iter_chunked(_CHUNK_SIZE):
                out.write(chunk)
    logger.info("saved to %s", dst)
    return dst


def _strip_eol(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def _decoded_lines(lines: Iterable[str | bytes]) -> tuple[list[str], int]:
    """Decode lines, returning the valid ones and the number of failures."""
    valid: list[str] = []
    failures = 0
    for raw in lines:
        if isinstance(raw, (bytes, bytearray)):
            try:
                raw = bytes(raw).decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.error("%s", exc)
                failures += 1
                continue
        valid.append(_strip_eol(raw))
    return valid, failures


def _parse_url(link: str) -> str:
    url = f"{BASE_URL}{link}"
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"invalid url: {url!r}")
    return url


class Downloader:
    """Downloads numerous files concurrently.

    ``urls`` holds the urls to download and ``n_tasks`` the number of
    downloads that run at the same time.
    """

    def __init__(self, urls: Iterable[str], n_tasks: int = 4) -> None:
        if n_tasks < 1:
            raise ValueError("n_tasks must be at least 1")
        self.urls = list(urls)
        self.n_tasks = n_tasks

    @classmethod
    def from_paths_file(
        cls, paths_file: str | os.PathLike[str] | IO[str] | IO[bytes], n_tasks: int = 4
    ) -> "Downloader":
        """Build a downloader from a ``wet.paths`` file (a path or an open file).

        Lines that cannot be decoded or do not make a valid url are logged
        and skipped.
        """
        if isinstance(paths_file, (str, os.PathLike)):
            with open(paths_file, "rb") as handle:
                return cls.from_paths_file(handle, n_tasks)

        lines, line_failures = _decoded_lines(paths_file)
        logger.debug("Got %d/%d valid lines", len(lines), len(lines) + line_failures)

        urls: list[str] = []
        url_failures = 0
        for line in lines:
            try:
                urls.append(_parse_url(line))
            except ValueError as exc:
                logger.error("%s", exc)
                url_failures += 1
        logger.debug("Got %d/%d valid URLs", len(urls), len(urls) + url_failures)

        return cls(urls, n_tasks)

    async def download(
        self, dst: str | Path, idx_offset: int | None = None
    ) -> list[DownloadResult]:
        """Download every url from ``idx_offset`` on into ``dst/<index>.txt.gz``.

        Returns, in completion order, the saved path for each success and the
        exception for each failure. HTTP failures are wrapped in DownloadError.
        """
        dst = Path(dst)
        offset = idx_offset or 0
        jobs = list(enumerate(self.urls))[offset:]
        semaphore = asyncio.Semaphore(self.n_tasks)
        results: list[DownloadResult] = []

        async with aiohttp.ClientSession() as session:

            async def fetch(index: int, url: str) -> Path:
                path = dst / f"{index}.txt.gz"
                async with semaphore:
                    print(f"Crawling {url} to file {index}.txt.gz")
                    try:
                        return await download_file(session, url, path)
                    except aiohttp.ClientError as exc:
                        raise DownloadError(url, path, index, exc) from exc

            tasks = [asyncio.ensure_future(fetch(index, url)) for index, url in jobs]
            for future in asyncio.as_completed(tasks):
                try:
                    results.append(await future)
                except Exception as exc:  # collected and reported by the caller
                    results.append(exc)

        return results