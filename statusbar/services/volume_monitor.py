import asyncio
import subprocess
from typing import List

from statusbar.errors import ExternalToolError

# Level reported while the sink is muted, whatever the numeric volume
MUTED = -1.0


def _run_volume_query(command: List[str]) -> str:
    """
    Run the volume query command and return its stdout.

    Raises ExternalToolError if the binary is missing or exits non-zero.
    """
    try:
        result = subprocess.run(
            command,
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as exc:
        raise ExternalToolError(
            f"{command[0]} binary not found; install it or set STATUS_VOLUME_COMMAND"
        ) from exc
    except subprocess.CalledProcessError as exc:
        raise ExternalToolError(
            f"{' '.join(command)} failed with return code {exc.returncode}: "
            f"{(exc.stderr or '').strip()}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise ExternalToolError(
            f"{' '.join(command)} printed output that is not valid text: {exc.reason}"
        ) from exc
    except OSError as exc:
        raise ExternalToolError(f"Could not run {command[0]}: {exc}") from exc

    return result.stdout


def _parse_volume(output: str) -> float:
    """
    Extract the volume fraction from output like "Volume: 0.55 [MUTED]".

    Returns MUTED if the output mentions a muted state.
    """
    try:
        level = float(output.split()[1])
    except (IndexError, ValueError) as exc:
        raise ExternalToolError(f"Could not parse volume from {output.strip()!r}") from exc

    if "MUTED" in output:
        return MUTED
    return level


async def read_volume(command: List[str]) -> float:
    output = await asyncio.to_thread(_run_volume_query, command)
    return _parse_volume(output)
