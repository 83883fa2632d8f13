#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : test_random_stream.py
created time : 2026/10/13
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import pytest
import numpy as np
from ljcluster.core import RandomStream, derive_seed_array
from ljcluster.error import *

# Seed array of '1330445520', worked out by hand from its bytes
SEED_ARRAY = [
    154153216, 160458240, 160471296, 151044096, 163644416,
    163657728, 166818560, 166832128, 157401600, 151117824
]

def get_reference(num_values):
    # 53-bit doubles assembled from two raw 32-bit Mersenne-Twister words
    bit_generator = np.random.MT19937(np.array(SEED_ARRAY, dtype=np.uint32))
    words = bit_generator.random_raw(2 * num_values).astype(np.uint64)
    upper, lower = words[0::2] >> np.uint64(5), words[1::2] >> np.uint64(6)
    return (upper.astype(np.float64) * 67108864.0 + lower.astype(np.float64)) / 9007199254740992.0

def test_derive_seed_array():
    seeds = derive_seed_array('ab')
    assert seeds.dtype == np.uint32
    # 'a' = 97, 'b' = 98; entries are updated in place
    assert seeds[0] == (97 << 8) * ((98 << 8) + 1)
    assert seeds[1] == (98 << 8) * ((98 << 8) + 2)
    assert list(seeds) == [623010048, 629457920]

    assert list(derive_seed_array('1330445520')) == SEED_ARRAY

def test_derive_seed_array_wraps():
    seed = 'ÿ' * 20000
    seeds = derive_seed_array(seed)
    # U+00FF is encoded as the two bytes 0xC3 0xBF
    assert seeds.shape[0] == 40000
    last = (0xBF << 8) * ((0xBF << 8) + 40000)
    assert last > 0xFFFFFFFF
    assert seeds[39999] == last & 0xFFFFFFFF
    assert seeds[0] == (0xC3 << 8) * ((0xBF << 8) + 1)

def test_seed_exceptions():
    with pytest.raises(SeedPoorDefinedError):
        derive_seed_array('')

    with pytest.raises(SeedPoorDefinedError):
        derive_seed_array('\x00')

class TestRandomStream:
    def setup_method(self):
        self.seed = '1330445520'
        self.stream = RandomStream(self.seed, cache_size=16)

    def teardown_method(self):
        self.stream = None

    def test_attributes(self):
        assert self.stream.seed == self.seed
        assert self.stream.cache_size == 16
        assert self.stream.num_refills == 0
        assert (self.stream.seed_array == derive_seed_array(self.seed)).all()

    def test_exceptions(self):
        with pytest.raises(EnvironmentVariableError):
            RandomStream(self.seed, cache_size=0)

        with pytest.raises(ValueError):
            self.stream.get_vector(3)

    def test_next(self):
        reference = get_reference(40)
        values = np.array([self.stream.next() for _ in range(40)])
        assert (values == reference).all()
        assert ((values >= 0) & (values < 1)).all()

    def test_refill(self):
        for _ in range(16):
            self.stream.next()
        assert self.stream.num_refills == 1
        assert self.stream.cursor == 16
        self.stream.next()
        assert self.stream.num_refills == 2
        assert self.stream.cursor == 1

    def test_default_cache_size(self):
        stream = RandomStream(self.seed)
        reference = get_reference(stream.cache_size + 1)
        values = [stream.next() for _ in range(stream.cache_size + 1)]
        assert stream.num_refills == 2
        assert values == list(reference)

    def test_reproducibility(self):
        stream = RandomStream(self.seed, cache_size=5)
        values = [stream.next() for _ in range(30)]
        assert values == [self.stream.next() for _ in range(30)]

        stream = RandomStream('1330445521', cache_size=16)
        assert stream.next() != RandomStream(self.seed, cache_size=16).next()

    def test_get_vector(self):
        reference = get_reference(4)
        vec = self.stream.get_vector()
        assert vec == pytest.approx(2 * reference[:3] - 1)
        vec = self.stream.get_vector(1)
        assert vec[0] == 0
        assert vec[2] == 0
        assert vec[1] == pytest.approx(2 * reference[3] - 1)
