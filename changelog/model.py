# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import dataclasses
import datetime
import enum

import dacite


class BoundDirection(enum.Enum):
    MIN = 'min'
    MAX = 'max'


@dataclasses.dataclass(frozen=True)
class VersionRange:
    min_version: str | None = None
    max_version: str | None = None

    @property
    def is_bounded(self) -> bool:
        return bool(self.min_version or self.max_version)

    def __str__(self):
        return f'{self.min_version or "any"} to {self.max_version or "latest"}'


@dataclasses.dataclass(frozen=True)
class Release:
    tag_name: str
    published_at: str | None = None
    name: str | None = None
    body: str | None = None

    @property
    def title(self) -> str:
        return self.name or self.tag_name

    @property
    def published(self) -> datetime.datetime:
        # fromisoformat only accepts a trailing `Z` from python3.11 on
        published_at = self.published_at
        if not published_at:
            # unpublished (draft) releases sort last
            return datetime.datetime.min.replace(tzinfo=datetime.timezone.utc)
        if published_at.endswith('Z'):
            published_at = published_at[:-1] + '+00:00'

        published = datetime.datetime.fromisoformat(published_at)
        if published.tzinfo is None:
            published = published.replace(tzinfo=datetime.timezone.utc)
        return published

    @staticmethod
    def from_dict(raw: dict) -> 'Release':
        return dacite.from_dict(
            data_class=Release,
            data=raw,
        )


class ChangelogError(RuntimeError):
    pass


class ApiError(ChangelogError):
    def __init__(
        self,
        message: str,
        status_code: int | None=None,
        body: str | None=None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(ChangelogError):
    pass


class ReleaseFetchError(ChangelogError):
    def __init__(self, message: str, page: int | None):
        super().__init__(message)
        self.page = page
