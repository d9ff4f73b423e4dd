import asyncio
from pathlib import Path
from typing import Union

from statusbar.errors import ParseError, SourceIOError

PathLike = Union[str, Path]


def _read_text_sync(path: PathLike) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SourceIOError(f"Could not read {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"{path} is not valid UTF-8 text: {exc.reason}") from exc


async def read_text(path: PathLike) -> str:
    """Read a kernel pseudo-file without blocking the event loop."""
    return await asyncio.to_thread(_read_text_sync, path)


async def read_int(path: PathLike) -> int:
    raw = await read_text(path)
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ParseError(f"Expected an integer in {path}, got {raw.strip()!r}") from exc


def exists(path: PathLike) -> bool:
    return Path(path).exists()
