import logging
import subprocess

logger = logging.getLogger(__name__)


def push_status(text: str) -> bool:
    """
    Set the root window name, which dwm-like window managers show as title bar.

    Returns False (and logs) instead of raising, so a missing X server or
    xsetroot binary never stops the sampling loop.
    """
    try:
        result = subprocess.run(
            ["xsetroot", "-name", f" {text} "],
            check=False,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError:
        logger.error("xsetroot binary not found; cannot update the title bar")
        return False
    except OSError as exc:
        logger.error("Could not run xsetroot: %s", exc)
        return False

    if result.returncode != 0:
        logger.error(
            "xsetroot failed with return code %s: %s",
            result.returncode,
            result.stderr.strip(),
        )
        return False

    return True
