# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import MagicMock

import pytest
import requests

from changelog.config import ChangelogCfg
from changelog.model import VersionRange
import changelog.cli as examinee
import changelog.fetch
import ci.log
import ci.util


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    monkeypatch.setattr(ci.log, 'configure_default_logging', MagicMock())


@pytest.fixture
def fetcher(response):
    def _fetcher(*raw_releases):
        session = MagicMock()
        session.get.return_value = response(list(raw_releases))
        return changelog.fetch.ReleaseFetcher(
            cfg=ChangelogCfg(),
            session=session,
            sleep=MagicMock(),
        )
    return _fetcher


def test_end_to_end(tmp_path, fetcher, raw_release):
    path = examinee.create_changelog(
        repo_url='https://github.com/samchon/typia',
        version_range=VersionRange(),
        outdir=str(tmp_path),
        cfg=ChangelogCfg(),
        fetcher=fetcher(
            raw_release(tag_name='v1.0.0', published_at='2020-05-01T10:00:00Z', body='one'),
            raw_release(tag_name='v2.0.0', published_at='2021-05-01T10:00:00Z', body='two'),
        ),
    )

    assert path == str(tmp_path / 'typia-changelog.md')
    content = (tmp_path / 'typia-changelog.md').read_text(encoding='utf-8')

    assert content.index('## v2.0.0') < content.index('## v1.0.0')
    assert content.count('---') == 1
    assert content == (
        '# typia Changelog\n\n'
        '## v2.0.0\n\ntwo\n\n'
        '---\n\n'
        '## v1.0.0\n\none\n\n'
    )


def test_version_range_is_applied(tmp_path, fetcher, raw_release):
    examinee.create_changelog(
        repo_url='https://github.com/o/r/releases',
        version_range=VersionRange(min_version='2'),
        outdir=str(tmp_path),
        cfg=ChangelogCfg(),
        fetcher=fetcher(
            raw_release(tag_name='v1.0.0', published_at='2020-05-01T10:00:00Z'),
            raw_release(tag_name='v2.0.0', published_at='2021-05-01T10:00:00Z'),
        ),
    )

    content = (tmp_path / 'r-changelog.md').read_text(encoding='utf-8')

    assert 'Version range: 2 to latest' in content
    assert 'Showing 1 of 2 releases' in content
    assert '## v2.0.0' in content
    assert '## v1.0.0' not in content


def test_no_releases(tmp_path, fetcher):
    path = examinee.create_changelog(
        repo_url='https://github.com/o/r',
        version_range=VersionRange(),
        outdir=str(tmp_path),
        cfg=ChangelogCfg(),
        fetcher=fetcher(),
    )

    assert path is None
    assert list(tmp_path.iterdir()) == []


def test_existing_changelog_is_overwritten(tmp_path):
    (tmp_path / 'r-changelog.md').write_text('stale')

    examinee.write_changelog(content='fresh ✨', repo='r', outdir=str(tmp_path))

    assert (tmp_path / 'r-changelog.md').read_text(encoding='utf-8') == 'fresh ✨'


def test_missing_url(capsys):
    with pytest.raises(SystemExit) as exc_info:
        examinee.main([])

    assert exc_info.value.code == 1
    assert 'Usage: gh-changelog' in capsys.readouterr().err


@pytest.mark.parametrize('argv', [
    ['--bogus', 'https://github.com/o/r'],
    ['--min-version'],
    ['https://github.com/o/r', 'extra'],
])
def test_usage_errors_exit_with_1(capsys, tmp_path, argv):
    with pytest.raises(SystemExit) as exc_info:
        examinee.main(['--outdir', str(tmp_path), *argv])

    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert 'Usage: gh-changelog' in err
    assert 'ERROR: gh-changelog:' in err
    assert list(tmp_path.iterdir()) == []


def test_invalid_url(capsys, tmp_path):
    with pytest.raises(ci.util.Failure) as exc_info:
        examinee.main(['--outdir', str(tmp_path), 'https://github.com/only-owner'])

    assert exc_info.value.code == 1
    assert 'ERROR: Error: Invalid GitHub URL' in capsys.readouterr().err


def test_fetch_failure_writes_no_file(capsys, tmp_path, monkeypatch):
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError('boom')
    monkeypatch.setattr(
        changelog.fetch.http_requests,
        'session',
        MagicMock(return_value=session),
    )

    with pytest.raises(ci.util.Failure) as exc_info:
        examinee.main(['--outdir', str(tmp_path), 'https://github.com/o/r'])

    assert exc_info.value.code == 1
    assert 'Failed to fetch releases on page 1' in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_parse_args():
    parsed = examinee.parse_args([
        '--min-version', '8',
        '--max-version', '9.1',
        'https://github.com/o/r',
    ])

    assert parsed.repo_url == 'https://github.com/o/r'
    assert parsed.min_version == '8'
    assert parsed.max_version == '9.1'
    assert parsed.outdir is None
