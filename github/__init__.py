# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import urllib.parse


def host_owner_and_repo(
    repo_url: str,
) -> tuple[str, str, str]:
    '''
    returns a three-tuple of `host`, `owner`, `repo`. repo_url is assumed to point to a
    github-hosted repository (it may or may not have a schema). Any path segments following
    the repository name (e.g. `/releases`) are ignored.

    @raises ValueError if repo_url has fewer than two (non-empty) path segments
    '''
    if not repo_url:
        raise ValueError(f'Invalid GitHub URL: {repo_url}')

    url = repo_url
    if '://' not in url:
        url = f'https://{url}'

    try:
        parsed = urllib.parse.urlparse(url)
    except ValueError as ve:
        raise ValueError(f'Invalid GitHub URL: {repo_url}') from ve

    path_parts = [part for part in parsed.path.split('/') if part]

    if not parsed.netloc or len(path_parts) < 2:
        raise ValueError(f'Invalid GitHub URL: {repo_url}')

    owner, repo = path_parts[:2]
    return parsed.netloc, owner, repo.removesuffix('.git')


def owner_and_repo(
    repo_url: str,
) -> tuple[str, str]:
    _, owner, repo = host_owner_and_repo(repo_url=repo_url)
    return owner, repo
