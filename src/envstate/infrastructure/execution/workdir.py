"""Scoped change of the process working directory."""

import os
from collections.abc import Iterator
from contextlib import contextmanager


@contextmanager
def working_directory(path: str | os.PathLike[str] | None) -> Iterator[None]:
    """
    Change into `path` for the duration of the block.

    The previous directory is restored on exit, including when the block
    raises. A None or empty path leaves the working directory untouched.
    """
    if not path:
        yield
        return

    previous = os.getcwd()
    os.chdir(os.path.expanduser(os.fspath(path)))
    try:
        yield
    finally:
        os.chdir(previous)
