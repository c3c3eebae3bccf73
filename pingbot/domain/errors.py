"""Errors raised while turning mentions into ledger entries."""


class ResolutionError(RuntimeError):
    """The directory could not be reached or answered with garbage."""


class IdentifierRangeError(ValueError):
    """An external account id does not fit the ledger's id column."""


__all__ = ["IdentifierRangeError", "ResolutionError"]
