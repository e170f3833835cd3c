# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import functools
import logging

import requests

from requests.adapters import HTTPAdapter

from changelog.model import (
    ApiError,
    ResponseDecodeError,
)

logger = logging.getLogger(__name__)


def mount_default_adapter(
    session: requests.Session,
    connection_pool_cache_size=1,
    max_pool_size=1,
):
    # requests are issued strictly sequentially; failed requests are not retried
    default_http_adapter = HTTPAdapter(
        pool_connections=connection_pool_cache_size,
        pool_maxsize=max_pool_size,
        max_retries=0,
    )
    session.mount('http://', default_http_adapter)
    session.mount('https://', default_http_adapter)

    return session


def session(
    user_agent: str,
    accept: str,
) -> requests.Session:
    '''
    returns a new session w/ the default adapter mounted, sending the given
    `User-Agent` and `Accept` headers w/ each request.
    '''
    sess = mount_default_adapter(requests.Session())
    sess.headers.update({
        'User-Agent': user_agent,
        'Accept': accept,
    })
    return sess


def check_http_code(function):
    '''
    a decorator that will check on `requests.Response` instances returned by HTTP requests
    issued with `requests`. Any status code other than 200 is considered an error: a warning
    is logged and an `ApiError` (carrying status code and response body) is raised.

    Transport errors (connection errors, timeouts) are re-raised as `ApiError`, too.

    @param: the function to wrap; should be `requests.<http-verb>`, e.g. requests.get
    @raises: `ApiError`
    '''
    @functools.wraps(function)
    def http_checker(*args, **kwargs):
        url = kwargs.get('url', None)
        try:
            result = function(*args, **kwargs)
        except requests.Timeout as te:
            raise ApiError(f'Request timeout: {te}') from te
        except requests.RequestException as rqe:
            raise ApiError(f'Request failed: {rqe}') from rqe

        if result.status_code != 200:
            logger.warning(f'{result.status_code=} - {result.content=}: {url=}')
            raise ApiError(
                f'GitHub API responded with status {result.status_code}: {result.text}',
                status_code=result.status_code,
                body=result.text,
            )
        return result
    return http_checker


def json_body(response: requests.Response):
    try:
        return response.json()
    except ValueError as ve:
        # requests.JSONDecodeError is a ValueError
        raise ResponseDecodeError(f'Failed to parse JSON response: {ve}') from ve
