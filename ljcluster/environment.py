#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : environment.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import os
import numpy as np
import numba as nb
from ljcluster.error import *

SUPPORTED_PRECISIONS = ['SINGLE', 'DOUBLE']
SUPPORTED_PLATFORMS = ['SERIAL', 'PARALLEL']
DEFAULT_RANDOM_CACHE_SIZE = 2048

class Environment:
    def __init__(self) -> None:
        self.set_precision(os.environ.get('LJCLUSTER_PRECISION', 'DOUBLE'))
        self.set_platform(os.environ.get('LJCLUSTER_PLATFORM', 'SERIAL'))
        self.set_random_cache_size(DEFAULT_RANDOM_CACHE_SIZE)

    def __repr__(self) -> str:
        return '<ljcluster.Environment: %s precision on %s platform>' %(
            self._precision, self._platform
        )

    __str__ = __repr__

    def set_precision(self, precision: str):
        precision = precision.upper()
        if not precision in SUPPORTED_PRECISIONS:
            raise EnvironmentVariableError(
                'Precision %s is not supported, choose from %s'
                %(precision, SUPPORTED_PRECISIONS)
            )
        self._precision = precision
        if precision == 'SINGLE':
            self.NUMPY_FLOAT = np.float32
            self.NUMBA_FLOAT = nb.float32
        else:
            self.NUMPY_FLOAT = np.float64
            self.NUMBA_FLOAT = nb.float64
        self.NUMPY_INT = np.int64
        self.NUMBA_INT = nb.int64

    def set_platform(self, platform: str):
        platform = platform.upper()
        if not platform in SUPPORTED_PLATFORMS:
            raise EnvironmentVariableError(
                'Platform %s is not supported, choose from %s'
                %(platform, SUPPORTED_PLATFORMS)
            )
        self._platform = platform

    def set_random_cache_size(self, cache_size: int):
        if cache_size <= 0:
            raise EnvironmentVariableError(
                'The random cache size should be a positive integer, while %d is provided'
                %cache_size
            )
        self._random_cache_size = int(cache_size)

    @property
    def precision(self) -> str:
        return self._precision

    @property
    def platform(self) -> str:
        return self._platform

    @property
    def is_parallel(self) -> bool:
        return self._platform == 'PARALLEL'

    @property
    def random_cache_size(self) -> int:
        return self._random_cache_size

env = Environment()
