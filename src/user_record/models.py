"""Person record models and the factories that build them."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from user_record.config import settings
from user_record.errors import InvalidInputError

logger = logging.getLogger(__name__)

_Record = TypeVar("_Record", bound="_RecordOperations")


def _check_required(first_name: str, last_name: str, birth_date: str) -> None:
    """Reject construction when any required text field is empty."""
    missing = [
        name for name, value in (
            ("first_name", first_name),
            ("last_name", last_name),
            ("birth_date", birth_date),
        )
        if value == ""
    ]
    if missing:
        logger.warning("Rejected user record, empty fields: %s", ", ".join(missing))
        raise InvalidInputError(missing)


def format_user_details(user: Union["User", "SealedUser"], label: Optional[str] = None) -> str:
    """Build the detail line: label, then the four fields in declaration order."""
    if label is None:
        label = settings.detail_label
    return " ".join([
        label,
        user.first_name,
        user.last_name,
        user.birth_date,
        str(user.created_at),
    ])


class _RecordOperations(ABC):
    """Presenter and clearer methods shared by both record flavours.

    Methods without the ``_ref`` suffix behave like value receivers: they
    operate on a deep copy, so whatever they change never reaches the caller.
    """

    def output_user_details(self) -> str:
        """Print the details of a copy of this record."""
        duplicate = self.model_copy(deep=True)
        line = format_user_details(duplicate)
        print(line)
        return line

    def output_user_details_ref(self) -> str:
        """Print the details of this record."""
        line = format_user_details(self)
        print(line)
        return line

    def clear_user_name_ref(self) -> None:
        """Empty the name and birth date fields of this record."""
        self._clear_names()

    def clear_user_name(self: _Record) -> _Record:
        """Empty the name fields of a copy; this record is left untouched."""
        duplicate = self.model_copy(deep=True)
        duplicate._clear_names()
        return duplicate

    @abstractmethod
    def _clear_names(self) -> None:
        """Empty the name and birth date fields in place."""


class User(_RecordOperations, BaseModel):
    """Person record with public fields."""

    first_name: str
    last_name: str
    birth_date: str
    created_at: datetime = Field(default_factory=datetime.now)

    def _clear_names(self) -> None:
        self.first_name = ""
        self.last_name = ""
        self.birth_date = ""


def new_user(first_name: str, last_name: str, birth_date: str) -> User:
    """Create a User, raising InvalidInputError if any field is empty."""
    _check_required(first_name, last_name, birth_date)
    user = User(first_name=first_name, last_name=last_name, birth_date=birth_date)
    logger.debug("Created user record %s %s", first_name, last_name)
    return user


class SealedUser(_RecordOperations, BaseModel):
    """Person record whose fields are private and read-only from outside.

    Build instances with :meth:`create`; the fields can only be changed by
    the record's own methods.
    """

    model_config = ConfigDict(extra="forbid")

    _first_name: str = PrivateAttr(default="")
    _last_name: str = PrivateAttr(default="")
    _birth_date: str = PrivateAttr(default="")
    _created_at: datetime = PrivateAttr(default_factory=datetime.now)

    @classmethod
    def create(cls, first_name: str, last_name: str, birth_date: str) -> "SealedUser":
        """Create a SealedUser, raising InvalidInputError if any field is empty."""
        _check_required(first_name, last_name, birth_date)
        sealed = cls()
        sealed._first_name = first_name
        sealed._last_name = last_name
        sealed._birth_date = birth_date
        logger.debug("Created sealed user record %s %s", first_name, last_name)
        return sealed

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def birth_date(self) -> str:
        return self._birth_date

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def _clear_names(self) -> None:
        self._first_name = ""
        self._last_name = ""
        self._birth_date = ""
