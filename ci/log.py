# SPDX-FileCopyrightText: 2024 SAP SE or an SAP affiliate company and Gardener contributors
#
# SPDX-License-Identifier: Apache-2.0

from copy import copy
import logging
import sys


class Bcolors:
    RESET_ALL = '\033[0m'
    BOLD = '\033[1m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    BLUE = '\033[34m'


def _coloured(level_name: str, colour: str) -> str:
    return f'{Bcolors.BOLD}{colour}{level_name}{Bcolors.RESET_ALL}'


class CCFormatter(logging.Formatter):
    level_colours = {
        logging.DEBUG: Bcolors.BLUE,
        logging.INFO: Bcolors.GREEN,
        logging.WARNING: Bcolors.YELLOW,
        logging.ERROR: Bcolors.RED,
    }

    def __init__(self, *args, stream=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.stream = stream or sys.stdout

    def formatMessage(self, record):
        record_copy = copy(record)
        levelname = record_copy.levelname
        if self.stream.isatty() and (colour := self.level_colours.get(record_copy.levelno)):
            levelname = _coloured(levelname, colour)
        record_copy.__dict__['levelprefix'] = levelname
        return super().formatMessage(record_copy)


def configure_default_logging(
    stdout_level=None,
    stream=None,
    force=True,
    custom_format_string: str = '',
):
    '''
    installs a single handler on the root logger, writing to `stream` (stdout by default).
    '''
    if not stdout_level:
        stdout_level = logging.INFO
    if not stream:
        stream = sys.stdout

    # make sure to have a clean root logger (in case setup is called multiple times)
    if force:
        handlers = logging.root.handlers
        for h in list(handlers):
            logging.root.removeHandler(h)
            h.close()

    sh = logging.StreamHandler(stream)
    sh.setLevel(stdout_level)
    sh.setFormatter(CCFormatter(
        fmt=custom_format_string or default_fmt_string(),
        stream=stream,
    ))

    logging.root.addHandler(hdlr=sh)
    logging.root.setLevel(level=stdout_level)

    # too verbose
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def default_fmt_string():
    return '[%(levelprefix)s] %(message)s'
