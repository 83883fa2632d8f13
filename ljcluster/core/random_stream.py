#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : random_stream.py
created time : 2026/10/13
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import logging
import numpy as np
from ljcluster import SPATIAL_DIM
from ljcluster.environment import env
from ljcluster.error import *

logger = logging.getLogger(__name__)

UINT32_MASK = 0xFFFFFFFF

def derive_seed_array(seed: str) -> np.ndarray:
    '''Turn a seed string into the uint32 array used to initialize the generator.

    Every byte is shifted left by 8 bits, then each entry is multiplied in
    order by ``last_entry + index + 1``. Entries are updated in place, so the
    multiplication of the last entry sees its own updated value. All
    arithmetic wraps around at 32 bits.
    '''
    seed = str(seed)
    if len(seed) == 0:
        raise SeedPoorDefinedError('Seed string should not be empty')
    seeds = [(byte << 8) & UINT32_MASK for byte in seed.encode('utf-8')]
    num_seeds = len(seeds)
    for i in range(num_seeds):
        seeds[i] = (seeds[i] * (seeds[num_seeds-1] + i + 1)) & UINT32_MASK
    seeds = np.array(seeds, dtype=np.uint32)
    if not seeds.any():
        raise SeedPoorDefinedError(
            'Seed %r derives an all-zero seed array' %seed
        )
    return seeds

class RandomStream:
    '''Uniform random numbers in [0, 1) served from a fixed-size cache.

    The cache is regenerated as a whole, in one call to the underlying
    Mersenne-Twister generator, each time it has been consumed. The sequence
    of draws therefore only depends on the seed and not on the cache size.
    '''
    def __init__(self, seed, cache_size: int=None) -> None:
        self._seed = str(seed)
        self._seed_array = derive_seed_array(self._seed)
        self._cache_size = env.random_cache_size if cache_size == None else int(cache_size)
        if self._cache_size <= 0:
            raise EnvironmentVariableError(
                'The random cache size should be a positive integer, while %d is provided'
                %self._cache_size
            )
        self._generator = np.random.Generator(np.random.MT19937(self._seed_array))
        self._cache = None
        self._cursor = self._cache_size
        self._num_refills = 0
        logger.info('Random stream seeded with %r', self._seed)
        for index, value in enumerate(self._seed_array):
            logger.debug('seeds[%d] = %d', index, value)

    def __repr__(self) -> str:
        return '<ljcluster.core.RandomStream seed=%r, cursor %d/%d at %x>' %(
            self._seed, self._cursor, self._cache_size, id(self)
        )

    __str__ = __repr__

    def _refill(self):
        self._cache = self._generator.random(self._cache_size)
        self._cursor = 0
        self._num_refills += 1

    def next(self) -> float:
        if self._cache is None or self._cursor == self._cache_size:
            self._refill()
        value = self._cache[self._cursor]
        self._cursor += 1
        return float(value)

    def get_vector(self, direction: int=-1) -> np.ndarray:
        '''Random vector with components in [-1, 1).

        With ``direction == -1`` all three components are drawn in x, y, z
        order, otherwise only the requested axis is drawn and the others are 0.
        '''
        vec = np.zeros(SPATIAL_DIM, np.float64)
        if direction == -1:
            for i in range(SPATIAL_DIM):
                vec[i] = 2.0 * self.next() - 1.0
        elif 0 <= direction < SPATIAL_DIM:
            vec[direction] = 2.0 * self.next() - 1.0
        else:
            raise ValueError(
                'direction should be -1 or an axis in [0, %d), while %d is provided'
                %(SPATIAL_DIM, direction)
            )
        return vec

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def seed_array(self) -> np.ndarray:
        return self._seed_array.copy()

    @property
    def cache_size(self) -> int:
        return self._cache_size

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def num_refills(self) -> int:
        return self._num_refills
