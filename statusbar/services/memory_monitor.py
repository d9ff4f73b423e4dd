from statusbar.errors import ParseError
from statusbar.models.memory import MemInfo
from statusbar.services.pseudo_files import read_text

_REQUIRED_FIELDS = ("MemTotal", "MemAvailable")


def _parse_meminfo(text: str) -> MemInfo:
    """
    Parse "Key:   value [kB]" lines of /proc/meminfo.

    Lines without a key (e.g. the trailing empty line) are skipped. Raises
    ParseError on a line without a numeric value or if MemTotal/MemAvailable
    are missing.
    """
    fields = {}
    for line in text.splitlines():
        tokens = line.split()
        if not tokens:
            continue

        key = tokens[0][:-1] if tokens[0].endswith(":") else tokens[0]
        if not key:
            continue

        try:
            fields[key] = int(tokens[1])
        except (IndexError, ValueError) as exc:
            raise ParseError(f"Malformed memory statistics line: {line!r}") from exc

    missing = [name for name in _REQUIRED_FIELDS if name not in fields]
    if missing:
        raise ParseError(f"Memory statistics lack {', '.join(missing)}")

    return MemInfo(fields=fields)


async def read_meminfo(path: str) -> MemInfo:
    return _parse_meminfo(await read_text(path))
