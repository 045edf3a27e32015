"""Running external programs."""

import subprocess
import sys
from typing import NoReturn, Sequence

from linc.display import block
from linc.errors import LincError


class LaunchError(LincError):
    """An external program could not be started."""

    def __init__(self, path: str, reason: OSError) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"! error trying to run `{path}`: {reason.strerror or reason}"
        )


class CallFailed(LincError):
    """An external program ran and reported failure."""

    def __init__(self, path: str, stdout: bytes, stderr: bytes) -> None:
        self.path = path
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"! error running `{path}`:"
            f"{block('stdout', stdout.decode('utf-8'))}"
            f"{block('stderr', stderr.decode('utf-8'))}"
        )


def call(path: str, args: Sequence[str]) -> None:
    """Run ``path`` with ``args`` quietly, raising CallFailed on failure."""
    try:
        result = subprocess.run([path, *args], capture_output=True)
    except OSError as err:
        raise LaunchError(path, err) from err
    if result.returncode != 0:
        raise CallFailed(path, result.stdout, result.stderr)


def run(path: str, args: Sequence[str]) -> None:
    """Run ``path`` with ``args`` in the foreground, exiting with its failure code."""
    try:
        result = subprocess.run([path, *args])
    except OSError as err:
        raise LaunchError(path, err) from err
    if result.returncode != 0:
        _exit(result.returncode)


def _exit(returncode: int) -> NoReturn:
    sys.exit(returncode if returncode > 0 else 1)