#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : logger.py
created time : 2026/10/14
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import sys
import logging

# Keywords accepted by the -log command line option
LOG_LEVELS = {
    'no': logging.CRITICAL + 10,
    'err': logging.ERROR,
    'warn': logging.WARNING,
    'info': logging.INFO,
    'dbg': logging.DEBUG
}
LOG_FORMAT = '[%(levelname)s] %(name)s: %(message)s'

def setup_logging(level='warn', file_path: str=None, stream=None) -> logging.Logger:
    '''Configure the ``ljcluster`` logger.

    ``level`` is either a key of ``LOG_LEVELS`` or a ``logging`` level. Records
    go to ``stream`` (stderr by default) and, when ``file_path`` is given, to
    that file as well. Calling it again replaces the previous handlers.
    '''
    if isinstance(level, str):
        if not level.lower() in LOG_LEVELS:
            raise ValueError(
                'Log level %s is not supported, choose from %s'
                %(level, list(LOG_LEVELS.keys()))
            )
        level = LOG_LEVELS[level.lower()]
    logger = logging.getLogger('ljcluster')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    formatter = logging.Formatter(LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if file_path != None:
        file_handler = logging.FileHandler(file_path, mode='w')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    logger.propagate = False
    logger.debug('Logging level set to %s', logging.getLevelName(level))
    return logger
