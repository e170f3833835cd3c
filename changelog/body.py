# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

'''
cleanup of release bodies as generated by GitHub ("Generate release notes")

The "New Contributors" section (up to the next heading) and any "Full Changelog" line are
removed; all other lines are kept verbatim and in order.
'''

import enum

NEW_CONTRIBUTORS_PREFIXES = (
    '## New Contributors',
    '### New Contributors',
    '**New Contributors**',
)
FULL_CHANGELOG_PREFIXES = (
    '**Full Changelog**:',
    'Full Changelog:',
)
SECTION_PREFIXES = (
    '##',
    '###',
)


class ScanState(enum.Enum):
    NORMAL = 'normal'
    SKIPPING_CONTRIBUTORS = 'skipping-contributors'


def step(
    state: ScanState,
    line: str,
) -> tuple[ScanState, bool]:
    '''
    advances the scanner by one line. Returns the next state, and whether `line` is to be
    emitted.
    '''
    stripped = line.strip()

    if stripped.startswith(NEW_CONTRIBUTORS_PREFIXES):
        return ScanState.SKIPPING_CONTRIBUTORS, False

    if stripped.startswith(FULL_CHANGELOG_PREFIXES):
        return state, False

    if (
        state is ScanState.SKIPPING_CONTRIBUTORS
        and stripped.startswith(SECTION_PREFIXES)
        and 'New Contributors' not in stripped
    ):
        # next section ends skipping; its heading is kept
        state = ScanState.NORMAL

    return state, state is ScanState.NORMAL


def clean_release_body(body: str | None) -> str:
    if not body:
        return ''

    state = ScanState.NORMAL
    lines = []

    for line in body.split('\n'):
        state, emit = step(state, line)
        if emit:
            lines.append(line)

    return '\n'.join(lines).strip()
