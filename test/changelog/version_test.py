# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import pytest

from changelog.model import BoundDirection
import changelog.version as examinee


def test_parse_version_vector():
    assert examinee.parse_version_vector('v8.2.5') == (8, 2, 5)
    assert examinee.parse_version_vector('8.2.5') == (8, 2, 5)
    assert examinee.parse_version_vector('8') == (8,)
    assert examinee.parse_version_vector('1.2.3.4.5') == (1, 2, 3, 4, 5)


def test_parse_version_vector_is_lenient():
    # non-digits are dropped from segments
    assert examinee.parse_version_vector('v1.2.3-rc1') == (1, 2, 31)
    assert examinee.parse_version_vector('release.x.7') == (0, 0, 7)
    assert examinee.parse_version_vector('1..2') == (1, 0, 2)
    assert examinee.parse_version_vector('nightly') == (0,)
    assert examinee.parse_version_vector('') == (0,)
    assert examinee.parse_version_vector(None) == (0,)


def test_min_bound():
    assert examinee.matches('8.2.5', '8', 'min')
    assert not examinee.matches('7.9.9', '8', 'min')
    assert examinee.matches('9.0.0', '8.3', 'min')
    assert not examinee.matches('8.2.9', '8.3', 'min')


def test_max_bound():
    assert examinee.matches('8.2.5', '8.3', 'max')
    assert not examinee.matches('9.0.0', '8.3', 'max')
    assert examinee.matches('v7.0.0', '8', 'max')


def test_shorthand_pattern_is_inclusive():
    for direction in BoundDirection:
        assert examinee.matches('8.2.5', '8', direction)
        assert examinee.matches('8.9.99', '8', direction)
        assert examinee.matches('v8.2.5', '8.2', direction)
        assert examinee.matches('8.2.5', '8.2.5', direction)


def test_missing_version_components_count_as_zero():
    assert examinee.matches('8', '8.0.0', 'min')
    assert examinee.matches('8', '8.0.0', 'max')
    assert not examinee.matches('8', '8.0.1', 'min')
    assert examinee.matches('8', '8.0.1', 'max')


def test_components_beyond_pattern_are_ignored():
    assert examinee.matches('8.3.0.1', '8.3', 'max')
    assert examinee.matches('8.2.99', '8.3', 'max')


def test_malformed_tags_degrade_to_zero():
    assert not examinee.matches('nightly', '1', 'min')
    assert examinee.matches('nightly', '1', 'max')


def test_unknown_direction():
    with pytest.raises(ValueError):
        examinee.matches('1.0.0', '1', 'between')
