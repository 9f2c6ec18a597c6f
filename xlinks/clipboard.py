"""System clipboard access through the platform's copy tools."""

import logging
import shutil
import subprocess

log = logging.getLogger(__name__)

# Tried in order; the first one found on PATH is used.
CLIPBOARD_COMMANDS: list[list[str]] = [
    ["pbcopy"],
    ["wl-copy"],
    ["xclip", "-selection", "clipboard"],
    ["xsel", "--clipboard", "--input"],
    ["clip"],
]


def find_clipboard_command() -> list[str] | None:
    """Return the first available clipboard command."""
    for cmd in CLIPBOARD_COMMANDS:
        if shutil.which(cmd[0]):
            return cmd
    return None


def copy_to_clipboard(text: str, timeout: int = 5) -> bool:
    """Copy text to the system clipboard, returning whether it worked."""
    cmd = find_clipboard_command()
    if cmd is None:
        log.warning("No clipboard tool found on PATH")
        return False
    try:
        result = subprocess.run(
            cmd,
            input=text,
            text=True,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.PIPE,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        log.error("%s timed out after %ds", cmd[0], timeout)
        return False
    except OSError as e:
        log.error("%s failed: %s", cmd[0], e)
        return False
    if result.returncode != 0:
        log.error("%s exited with code %d: %s", cmd[0], result.returncode, result.stderr.strip())
        return False
    return True
