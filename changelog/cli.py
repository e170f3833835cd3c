#! /usr/bin/env python3
# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
import os
import sys

import ci.log
import ci.util
import github
import changelog.config
import changelog.fetch
import changelog.filter
import changelog.markdown
from changelog.model import (
    ChangelogError,
    VersionRange,
)

logger = logging.getLogger(__name__)

USAGE = '''\
Usage: gh-changelog [--min-version <version>] [--max-version <version>] <github-repo-url>

Example:
  gh-changelog https://github.com/samchon/typia
  gh-changelog --min-version 8.2 --max-version 9 https://github.com/samchon/typia/releases'''


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        # usage errors exit w/ 1 (argparse defaults to 2)
        print(USAGE, file=sys.stderr)
        ci.util.fail(f'{self.prog}: {message}')


def parse_args(argv=None) -> argparse.Namespace:
    parser = ArgumentParser(
        prog='gh-changelog',
        description='Download all GitHub releases of a repository into a single changelog',
        add_help=True,
    )
    parser.add_argument(
        'repo_url',
        nargs='?',
        default=None,
        help='github-repo-url (https://{host}/{owner}/{repo})',
    )
    parser.add_argument(
        '--min-version',
        default=None,
        help='oldest version to include (e.g. `8`, `8.2`, `8.2.5`)',
    )
    parser.add_argument(
        '--max-version',
        default=None,
        help='newest version to include (e.g. `9`, `9.1`)',
    )
    parser.add_argument(
        '--outdir',
        default=None,
        help='directory to write `<repo>-changelog.md` to (defaults to current working dir)',
    )
    parser.add_argument(
        '--cfg',
        default=None,
        help='path to an optional YAML file overwriting default configuration',
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        default=False,
    )

    return parser.parse_args(argv)


def write_changelog(
    content: str,
    repo: str,
    outdir: str,
) -> str:
    path = os.path.join(outdir, f'{repo}-changelog.md')

    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)

    return path


def create_changelog(
    repo_url: str,
    version_range: VersionRange,
    outdir: str,
    cfg: changelog.config.ChangelogCfg,
    fetcher: changelog.fetch.ReleaseFetcher=None,
) -> str | None:
    '''
    runs the whole pipeline (fetch, filter, render, write). Returns the path of the written
    changelog, or `None` if the repository has no releases at all (no file is written).
    '''
    owner, repo = github.owner_and_repo(repo_url)
    logger.info(f'Repository: {owner}/{repo}')

    if not fetcher:
        fetcher = changelog.fetch.ReleaseFetcher(cfg=cfg)

    releases = fetcher.fetch_releases(owner=owner, repo=repo)

    if not releases:
        logger.info('No releases found for this repository.')
        return None

    filtered_releases = changelog.filter.filter_releases(
        releases=releases,
        version_range=version_range,
    )
    if version_range.is_bounded:
        logger.info(f'Version range: {version_range}')
        logger.info(f'Filtered to {len(filtered_releases)} of {len(releases)} releases')

    content = changelog.markdown.render_changelog(
        releases=filtered_releases,
        repo=repo,
        version_range=version_range,
        total_count=len(releases),
    )

    path = write_changelog(
        content=content,
        repo=repo,
        outdir=outdir,
    )
    logger.info(f'Saved changelog: {path}')

    return path


def main(argv=None):
    parsed = parse_args(argv)

    if not parsed.repo_url:
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    ci.log.configure_default_logging(
        stdout_level=logging.DEBUG if parsed.verbose else logging.INFO,
    )

    try:
        cfg = changelog.config.load_cfg(path=parsed.cfg)
        create_changelog(
            repo_url=parsed.repo_url,
            version_range=VersionRange(
                min_version=parsed.min_version,
                max_version=parsed.max_version,
            ),
            outdir=parsed.outdir or os.getcwd(),
            cfg=cfg,
        )
    except (ChangelogError, ValueError, OSError) as e:
        ci.util.fail(f'Error: {e}')


if __name__ == '__main__':
    main()
