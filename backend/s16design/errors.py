"""Exception types raised by the S16 design engine."""

from __future__ import annotations


class S16Error(Exception):
    """Base class for all engine errors."""


class PreconditionError(S16Error, ValueError):
    """Inputs outside the domain a calculation is defined for."""


class UnsupportedSectionError(PreconditionError):
    """Section kind or class cannot be checked for the requested limit state."""


class CatalogDataError(S16Error):
    """Catalog data is malformed, or a section yields a zero resistance."""


class SectionNotFoundError(S16Error, KeyError):
    """Unknown section family or designation."""

    def __str__(self) -> str:
        # KeyError repr-quotes its message; keep it readable
        return str(self.args[0]) if self.args else ""
