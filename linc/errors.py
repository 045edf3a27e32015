"""Error type shared by the compiler and the fatal-exit helper."""

import sys
from typing import NoReturn


class LincError(Exception):
    """An error whose message is ready to be shown to the user as-is."""


def die(error: object) -> NoReturn:
    """Print ``error`` to standard error and exit with status 1."""
    print(error, file=sys.stderr)
    sys.exit(1)