"""Translate SQLAlchemy failures into the domain's ``DataAccessError``."""

from __future__ import annotations

from contextlib import contextmanager
from http import HTTPStatus
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from artistsync.domain.errors import DataAccessError

if TYPE_CHECKING:
    from collections.abc import Iterator


def status_for(exc: SQLAlchemyError) -> int:
    if isinstance(exc, OperationalError):
        return HTTPStatus.SERVICE_UNAVAILABLE
    if isinstance(exc, IntegrityError):
        return HTTPStatus.CONFLICT
    return HTTPStatus.INTERNAL_SERVER_ERROR


@contextmanager
def translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise DataAccessError(f"{operation}: {exc}", status_code=status_for(exc)) from exc
