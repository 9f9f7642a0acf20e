import logging
import subprocess

from core.exceptions import CommandTimeoutError

logger = logging.getLogger(__name__)


def run_command(
    argv: list[str],
    cwd: str | None = None,
    timeout: float | None = None,
    display: str | None = None,
) -> str:
    """
    Run a program and return its stdout and stderr merged into one string.

    The program is started without a shell, so each element of `argv` reaches
    it as a single argument. `display` is the human-readable command line used
    for logs and error text. If the program cannot be started, a description
    of the failure is returned instead of raising. Waits without limit unless
    `timeout` is given, in which case the process is killed and
    CommandTimeoutError is raised.
    """
    display = display or " ".join(argv)
    logger.debug("Running: %s", display)

    try:
        completed = subprocess.run(
            argv,
            cwd=cwd,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            stdin=subprocess.DEVNULL,
            timeout=timeout,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except subprocess.TimeoutExpired:
        logger.warning("Timed out after %ss: %s", timeout, display)
        raise CommandTimeoutError(display, timeout)
    except OSError as e:
        logger.warning("Could not start %s: %s", display, e)
        return f"Error executing command: {display}"

    logger.debug("%s exited with %d", display, completed.returncode)
    return completed.stdout or ""
