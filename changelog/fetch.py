# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import collections.abc
import logging
import time

import dacite
import requests

import ci.util
import http_requests
from changelog.config import (
    ChangelogCfg,
    GITHUB_MEDIA_TYPE,
)
from changelog.model import (
    ChangelogError,
    Release,
    ReleaseFetchError,
)

logger = logging.getLogger(__name__)


class ReleaseFetcher:
    '''
    retrieves all releases of a repository from GitHub's (unauthenticated) releases-API.

    Pages are requested one after another; between two pages, there is a fixed delay to
    stay clear of GitHub's rate-limits.
    '''
    def __init__(
        self,
        cfg: ChangelogCfg=ChangelogCfg(),
        session: requests.Session=None,
        sleep: collections.abc.Callable[[float], None]=time.sleep,
    ):
        self.cfg = cfg
        if not session:
            session = http_requests.session(
                user_agent=cfg.user_agent,
                accept=GITHUB_MEDIA_TYPE,
            )
        self.session = session
        self.sleep = sleep
        self.fetched_bytes = 0

    def _get_page(
        self,
        url: str,
        page: int,
    ) -> list[dict] | None:
        res = http_requests.check_http_code(self.session.get)(
            url=url,
            params={
                'page': page,
                'per_page': self.cfg.per_page,
            },
            timeout=self.cfg.timeout_seconds,
        )
        self.fetched_bytes += len(res.content)

        page_releases = http_requests.json_body(res)
        if not isinstance(page_releases, list):
            logger.warning(f'unexpected response for {page=}: {type(page_releases)}')
            return None

        return page_releases

    def iter_pages(
        self,
        owner: str,
        repo: str,
    ) -> collections.abc.Generator[list[dict], None, None]:
        '''
        yields all (non-empty) pages of raw releases, starting w/ page 1. Iteration ends after
        the first page containing fewer than `per_page` releases.

        @raises ReleaseFetchError if retrieval of any page fails
        '''
        url = self.cfg.releases_url(owner=owner, repo=repo)
        page = 1

        while True:
            logger.info(f'Fetching page {page}...')
            try:
                page_releases = self._get_page(url=url, page=page)
            except ChangelogError as ce:
                raise ReleaseFetchError(
                    f'Failed to fetch releases on page {page}: {ce}',
                    page=page,
                ) from ce

            if not page_releases:
                return

            yield page_releases

            if len(page_releases) < self.cfg.per_page:
                return

            page += 1
            self.sleep(self.cfg.page_delay_seconds)

    def fetch_releases(
        self,
        owner: str,
        repo: str,
    ) -> list[Release]:
        logger.info(f'Fetching releases for {owner}/{repo}...')
        self.fetched_bytes = 0

        raw_releases = []
        for page_releases in self.iter_pages(owner=owner, repo=repo):
            raw_releases.extend(page_releases)

        try:
            releases = [Release.from_dict(raw) for raw in raw_releases]
        except dacite.DaciteError as de:
            # entry lacks `tag_name`, or has unexpected types
            raise ReleaseFetchError(f'Unexpected release entry: {de}', page=None) from de

        logger.info(
            f'Found {len(releases)} releases ({ci.util.format_bytes(self.fetched_bytes)})'
        )
        return releases
