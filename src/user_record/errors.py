"""Errors raised by the person record factories."""

from typing import Sequence


class UserRecordError(Exception):
    """Base error for the package."""


class InvalidInputError(UserRecordError, ValueError):
    """A required text field was empty at construction."""

    def __init__(self, fields: Sequence[str], message: str = "wrong input"):
        super().__init__(message)
        self.fields = tuple(fields)
