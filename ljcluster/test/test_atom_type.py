#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : test_atom_type.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import pytest
import numpy as np
from ljcluster.core import AtomType, AtomTypeTable
from ljcluster.error import *

class TestAtomType:
    def setup_method(self):
        self.atom_type = AtomType('AR', mass=39.948, sigma=3.405, epsilon=0.996)

    def teardown_method(self):
        self.atom_type = None

    def test_attributes(self):
        assert self.atom_type.symbol == 'AR'
        assert self.atom_type.mass == pytest.approx(39.948)
        assert self.atom_type.charge == 0
        assert self.atom_type.sigma == pytest.approx(3.405)
        assert self.atom_type.epsilon == pytest.approx(0.996)
        assert self.atom_type.is_finite

        atom_type = AtomType('NE')
        assert np.isnan(atom_type.sigma)
        assert np.isnan(atom_type.epsilon)
        assert not atom_type.is_finite

    def test_exceptions(self):
        with pytest.raises(ParameterPoorDefinedError):
            AtomType('')

        with pytest.raises(ParameterPoorDefinedError):
            AtomType('ARGON')

        with pytest.raises(ParameterPoorDefinedError):
            AtomType('AR', mass=39.948, sigma=0.0, epsilon=0.996)

        with pytest.raises(ParameterPoorDefinedError):
            AtomType('AR', mass=39.948, sigma=-3.405, epsilon=0.996)

        with pytest.raises(ParameterPoorDefinedError):
            AtomType('AR', mass=39.948, sigma=3.405, epsilon=-0.996)

        # Zero epsilon switches the interaction off and is allowed
        assert AtomType('AR', sigma=3.405, epsilon=0.0).epsilon == 0

    def test_copy(self):
        atom_type = self.atom_type.copy()
        assert atom_type == self.atom_type
        assert not atom_type is self.atom_type
        assert atom_type != AtomType('AR', mass=39.948, sigma=3.4, epsilon=0.996)

class TestAtomTypeTable:
    def setup_method(self):
        self.table = AtomTypeTable()
        self.table.add_atom_types(
            AtomType('Ar', mass=39.948, sigma=3.405, epsilon=0.996),
            AtomType('NE', mass=20.180, sigma=2.782, epsilon=0.288)
        )

    def teardown_method(self):
        self.table = None

    def test_attributes(self):
        assert len(self.table) == 2
        assert self.table.num_atom_types == 2
        assert self.table.symbols == ['Ar', 'NE']

    def test_exceptions(self):
        with pytest.raises(ParameterPoorDefinedError):
            self.table.get_atom_type('KR')

        with pytest.raises(TypeError):
            self.table.add_atom_types('KR')

    def test_get_atom_type(self):
        assert self.table.get_atom_type('AR').sigma == pytest.approx(3.405)
        assert self.table['ne'].epsilon == pytest.approx(0.288)
        assert 'ar' in self.table
        assert 'Ne' in self.table
        assert not 'KR' in self.table

    def test_redefinition(self):
        self.table.add_atom_types(AtomType('AR', mass=39.948, sigma=1.0, epsilon=1.0))
        assert len(self.table) == 2
        assert self.table['Ar'].sigma == 1.0
