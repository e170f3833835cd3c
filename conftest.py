# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import json

import pytest
import requests

from changelog.model import Release


@pytest.fixture
def release():
    def _release(
        tag_name='v1.0.0',
        published_at='2020-01-01T00:00:00Z',
        name=None,
        body=None,
    ):
        return Release(
            tag_name=tag_name,
            published_at=published_at,
            name=name,
            body=body,
        )
    return _release


@pytest.fixture
def raw_release():
    def _raw_release(
        tag_name='v1.0.0',
        published_at='2020-01-01T00:00:00Z',
        name=None,
        body=None,
    ):
        return {
            'url': f'https://api.github.com/repos/o/r/releases/{tag_name}',
            'tag_name': tag_name,
            'name': name,
            'body': body,
            'draft': False,
            'prerelease': False,
            'published_at': published_at,
        }
    return _raw_release


@pytest.fixture
def response():
    def _response(
        payload=None,
        status_code=200,
        content: bytes=None,
    ) -> requests.Response:
        res = requests.Response()
        res.status_code = status_code
        res.encoding = 'utf-8'
        if content is None:
            content = json.dumps(payload).encode('utf-8')
        res._content = content
        return res
    return _response
