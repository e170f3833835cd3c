# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import re

from changelog.model import BoundDirection

VersionVector = tuple[int, ...]

_non_digits = re.compile(r'\D')


def _to_int(segment: str) -> int:
    digits = _non_digits.sub('', segment)
    if not digits:
        return 0
    return int(digits)


def parse_version_vector(version: str) -> VersionVector:
    '''
    parses the given version label into a tuple of non-negative integers.

    Different from strict semver, parsing is lenient and never fails:

    - strip away `v` prefix
    - split at `.` (arbitrary amount of components)
    - drop non-digit characters from each component (`5-rc1` -> `51`)
    - components w/o any digits become `0`
    '''
    if not version:
        return (0,)

    version = version.removeprefix('v')

    return tuple(_to_int(segment) for segment in version.split('.'))


def matches(
    version: str,
    pattern: str,
    direction: BoundDirection | str,
) -> bool:
    '''
    returns whether `version` satisfies the (lower or upper) bound `pattern`.

    Comparison is done only over the amount of components of `pattern`, so bounds given
    with lower precision are inclusive for all trailing components (e.g. pattern `8` matches
    `8.2.5` both as lower and as upper bound). Components missing in `version` count as `0`.

    @param direction: `min` (version must be greater or equal) or `max` (version must be
        lesser or equal)
    @raises ValueError if direction is unknown
    '''
    direction = BoundDirection(direction)

    version_vector = parse_version_vector(version)
    pattern_vector = parse_version_vector(pattern)

    for idx, pattern_component in enumerate(pattern_vector):
        if idx < len(version_vector):
            version_component = version_vector[idx]
        else:
            version_component = 0

        if version_component == pattern_component:
            continue

        if version_component < pattern_component:
            return direction is BoundDirection.MAX
        return direction is BoundDirection.MIN

    # equal over pattern's precision
    return True
