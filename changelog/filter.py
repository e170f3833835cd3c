# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import collections.abc
import logging

import changelog.version
from changelog.model import (
    BoundDirection,
    Release,
    VersionRange,
)

logger = logging.getLogger(__name__)


def in_range(
    tag_name: str,
    version_range: VersionRange,
) -> bool:
    if version_range.min_version and not changelog.version.matches(
        version=tag_name,
        pattern=version_range.min_version,
        direction=BoundDirection.MIN,
    ):
        return False

    if version_range.max_version and not changelog.version.matches(
        version=tag_name,
        pattern=version_range.max_version,
        direction=BoundDirection.MAX,
    ):
        return False

    return True


def filter_releases(
    releases: collections.abc.Sequence[Release],
    version_range: VersionRange=VersionRange(),
) -> collections.abc.Sequence[Release]:
    '''
    returns the releases whose tag lies within the given version range, retaining order.
    If no bound is set, the given releases are returned as they are.
    '''
    if not version_range.is_bounded:
        return releases

    filtered = [
        release for release in releases
        if in_range(release.tag_name, version_range)
    ]
    logger.debug(f'{len(filtered)} of {len(releases)} releases match {version_range=}')

    return filtered
