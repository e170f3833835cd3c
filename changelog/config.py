# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import dataclasses
import logging
import os

import dacite
import yaml

logger = logging.getLogger(__name__)

GITHUB_API_URL = 'https://api.github.com'
GITHUB_MEDIA_TYPE = 'application/vnd.github.v3+json'


@dataclasses.dataclass(frozen=True)
class ChangelogCfg:
    api_url: str = GITHUB_API_URL
    per_page: int = 100 # maximum allowed by GitHub-API
    page_delay_seconds: float = 0.1
    timeout_seconds: float = 30
    user_agent: str = 'GitHub-Release-Notes-Downloader/1.0'

    def releases_url(self, owner: str, repo: str) -> str:
        return f'{self.api_url.rstrip("/")}/repos/{owner}/{repo}/releases'


def from_dict(raw: dict) -> ChangelogCfg:
    try:
        return dacite.from_dict(
            data_class=ChangelogCfg,
            data=raw,
            config=dacite.Config(
                cast=[float],
                strict=True,
            ),
        )
    except dacite.DaciteError as de:
        raise ValueError(f'invalid configuration: {de}') from de


def load_cfg(
    path: str | None=None,
    environ: dict=None,
) -> ChangelogCfg:
    '''
    returns the effective configuration. Values are read (in ascending precedence) from
    defaults, the YAML file at `path` (if given), and environment variables.

    Honoured environment variables:

    - GITHUB_API_URL (as set for GitHub-Actions-runs)
    '''
    if environ is None:
        environ = os.environ

    raw = {}
    if path:
        with open(path) as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as ye:
                raise ValueError(f'failed to parse {path=}: {ye}') from ye
        if not isinstance(raw, dict):
            raise ValueError(f'expected a mapping in {path=}, found {type(raw)}')

    if api_url := environ.get('GITHUB_API_URL'):
        raw['api_url'] = api_url

    cfg = from_dict(raw)
    logger.debug(f'{cfg=}')

    return cfg
