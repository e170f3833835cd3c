# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import collections.abc
import dataclasses
import logging

import changelog.body
from changelog.model import (
    Release,
    VersionRange,
)

logger = logging.getLogger(__name__)

SEPARATOR = '---'


@dataclasses.dataclass
class Header:
    level: int
    title: str

    def __str__(self):
        return f"{'#' * self.level} {self.title}"


@dataclasses.dataclass
class Paragraph:
    text: str

    def __str__(self):
        return self.text


def sort_releases(releases: collections.abc.Iterable[Release]) -> list[Release]:
    '''
    returns releases ordered by publishing date, newest first. Order of releases published
    at the same time is retained.
    '''
    return sorted(
        releases,
        key=lambda release: release.published,
        reverse=True,
    )


def release_blocks(release: Release) -> list[Header | Paragraph]:
    blocks = [Header(level=2, title=release.title)]

    if (body := changelog.body.clean_release_body(release.body)):
        blocks.append(Paragraph(text=body))

    return blocks


def changelog_blocks(
    releases: collections.abc.Sequence[Release],
    repo: str,
    version_range: VersionRange=VersionRange(),
    total_count: int | None=None,
) -> list[Header | Paragraph]:
    if total_count is None:
        total_count = len(releases)

    blocks = [Header(level=1, title=f'{repo} Changelog')]

    if version_range.is_bounded:
        blocks.append(Paragraph(text=f'Version range: {version_range}'))
        blocks.append(Paragraph(text=f'Showing {len(releases)} of {total_count} releases'))

    for idx, release in enumerate(sort_releases(releases)):
        if idx > 0:
            blocks.append(Paragraph(text=SEPARATOR))
        blocks.extend(release_blocks(release))

    return blocks


def render_changelog(
    releases: collections.abc.Sequence[Release],
    repo: str,
    version_range: VersionRange=VersionRange(),
    total_count: int | None=None,
) -> str:
    '''
    renders the given releases into a single markdown document. Each block (headers,
    release bodies, separators) is followed by an empty line.

    @param version_range: range the releases were filtered by (only used for display)
    @param total_count: amount of releases before filtering (defaults to len(releases))
    '''
    blocks = changelog_blocks(
        releases=releases,
        repo=repo,
        version_range=version_range,
        total_count=total_count,
    )
    logger.debug(f'rendering {len(blocks)} markdown blocks')

    return ''.join(f'{block}\n\n' for block in blocks)
