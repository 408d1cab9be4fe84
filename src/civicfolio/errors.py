"""Error taxonomy for CivicFolio imports."""

from __future__ import annotations


class CivicFolioError(Exception):
    """Base class for errors raised inside the import pipeline."""

    code = "CivicFolioError"


class MalformedInput(CivicFolioError):
    """Raw CSV text did not yield a header row plus at least one data row."""

    code = "MalformedInput"


class InvalidArgument(CivicFolioError):
    """A caller asked for an unrecognised data kind."""

    code = "InvalidArgument"


def error_code(exc: BaseException) -> str:
    """Return the taxonomy code for ``exc``, falling back to its class name."""

    if isinstance(exc, CivicFolioError):
        return exc.code
    return type(exc).__name__
