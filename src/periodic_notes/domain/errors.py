"""Errors raised while assembling note names."""


class InvalidStateError(ValueError):
    """A builder was asked to build before its required fields were set."""
