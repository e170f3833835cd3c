# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

import sys

import termcolor


class Failure(SystemExit):
    pass


def _print(msg, colour, outfh=None):
    if not msg:
        return
    if outfh is None:
        outfh = sys.stdout
    if not outfh.isatty():
        outfh.write(msg + '\n')
    else:
        outfh.write(termcolor.colored(msg, colour) + '\n')

    outfh.flush()


def error(msg=None):
    if msg:
        _print('ERROR: ' + str(msg), colour='red', outfh=sys.stderr)


def fail(msg=None, exit_code: int=1):
    if msg:
        error(msg)
    raise Failure(exit_code)


def format_bytes(size: int) -> str:
    '''
    returns a human-readable representation of the given amount of bytes (binary units)
    '''
    if size < 1024:
        return f'{size} bytes'
    if size < 1024 ** 2:
        return f'{size / 1024:.3f} KiB'
    if size < 1024 ** 3:
        return f'{size / 1024 ** 2:.3f} MiB'
    return f'{size / 1024 ** 3:.3f} GiB'
