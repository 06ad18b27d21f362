"""Outcomes of a single forecast fetch attempt."""

from dataclasses import dataclass
from http import HTTPStatus
from typing import TypeAlias

from skypanel.models.weather import RawSnapshot


@dataclass(frozen=True)
class FreshPayload:
    snapshot: RawSnapshot


@dataclass(frozen=True)
class FallbackNeeded:
    reason: HTTPStatus


FetchOutcome: TypeAlias = FreshPayload | FallbackNeeded
