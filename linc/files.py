"""Reading source files and writing generated output."""

from pathlib import Path
from typing import BinaryIO, TextIO, Union

from linc.errors import LincError

PathLike = Union[str, Path]


def _reason(err: OSError) -> str:
    return err.strerror or str(err)


def _open(path: PathLike) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as err:
        raise LincError(f"! error trying to open `{path}`: {_reason(err)}") from err


def _create(path: PathLike) -> TextIO:
    try:
        return open(path, "w", encoding="utf-8", newline="")
    except OSError as err:
        raise LincError(f"! error creating `{path}`: {_reason(err)}") from err


def read(path: PathLike) -> bytes:
    """Return the whole contents of the file at ``path``."""
    with _open(path) as handle:
        try:
            return handle.read()
        except OSError as err:
            raise LincError(f"! error reading `{path}`: {_reason(err)}") from err


def dump(value: object, path: PathLike) -> None:
    """Write the text of ``value`` to ``path``, replacing any existing file."""
    with _create(path) as handle:
        try:
            handle.write(str(value))
        except OSError as err:
            raise LincError(f"! error writing to `{path}`: {_reason(err)}") from err