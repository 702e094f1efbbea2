"""Exceptions raised while turning an activity report into ticker returns."""


class ReportError(Exception):
    """Base exception for report processing failures.

    Catch this in the CLI layer; every subclass carries a message that can be
    shown to the user directly.
    """


class SectionNotFoundError(ReportError):
    """The requested section label is missing, or its run never terminates."""

    def __init__(self, label: str, reason: str) -> None:
        super().__init__(f"Section '{label}' {reason}")
        self.label = label


class HeaderMappingError(ReportError):
    """The section header names only some of the fields the calculator needs."""


class UnresolvedPriceError(ReportError):
    """No numeric current price could be captured for a row's symbol."""


class MalformedRowError(ReportError):
    """A trade row carries a timestamp, quantity or price that does not parse."""
