#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : atom_type.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import math
from ljcluster.error import *

MAX_SYMBOL_LENGTH = 4

class AtomType:
    '''Mass, charge and Lennard-Jones parameters shared by all atoms of one type.

    The charge is stored for completeness only, no energy term uses it.
    '''
    def __init__(
        self, symbol: str, mass=0.0, charge=0.0,
        sigma=float('nan'), epsilon=float('nan')
    ) -> None:
        if not isinstance(symbol, str) or len(symbol) == 0 or len(symbol) > MAX_SYMBOL_LENGTH:
            raise ParameterPoorDefinedError(
                'Atom type symbol should contain 1 to %d characters, while %r is provided'
                %(MAX_SYMBOL_LENGTH, symbol)
            )
        # NaN marks a parameter that is not given yet
        if not math.isnan(float(sigma)) and not float(sigma) > 0:
            raise ParameterPoorDefinedError(
                'Sigma of atom type %s should be positive, while %s is provided'
                %(symbol, sigma)
            )
        if not math.isnan(float(epsilon)) and not float(epsilon) >= 0:
            raise ParameterPoorDefinedError(
                'Epsilon of atom type %s should be non-negative, while %s is provided'
                %(symbol, epsilon)
            )
        self._symbol = symbol
        self._mass = float(mass)
        self._charge = float(charge)
        self._sigma = float(sigma)
        self._epsilon = float(epsilon)

    def __repr__(self) -> str:
        return '<AtomType %s: sigma=%s, epsilon=%s at %x>' %(
            self._symbol, self._sigma, self._epsilon, id(self)
        )

    __str__ = __repr__

    def __eq__(self, o) -> bool:
        if not isinstance(o, AtomType):
            return False
        return (
            self._symbol == o.symbol and self._mass == o.mass and
            self._charge == o.charge and self._sigma == o.sigma and
            self._epsilon == o.epsilon
        )

    def copy(self):
        return AtomType(
            self._symbol, mass=self._mass, charge=self._charge,
            sigma=self._sigma, epsilon=self._epsilon
        )

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(i) for i in [
            self._mass, self._charge, self._sigma, self._epsilon
        ])

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def charge(self) -> float:
        return self._charge

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def epsilon(self) -> float:
        return self._epsilon

class AtomTypeTable:
    def __init__(self) -> None:
        self._atom_types = {}

    def __repr__(self) -> str:
        return '<AtomTypeTable object: %d atom types at %x>' %(self.num_atom_types, id(self))

    __str__ = __repr__

    def __len__(self) -> int:
        return len(self._atom_types)

    def __contains__(self, symbol: str) -> bool:
        return symbol.upper() in self._atom_types

    def __getitem__(self, symbol: str) -> AtomType:
        return self.get_atom_type(symbol)

    def add_atom_types(self, *atom_types):
        for atom_type in atom_types:
            if not isinstance(atom_type, AtomType):
                raise TypeError(
                    'ljcluster.core.AtomType type is excepted, while %s provided' %type(atom_type)
                )
            # Symbols are case insensitive, the last definition wins
            self._atom_types[atom_type.symbol.upper()] = atom_type

    def get_atom_type(self, symbol: str) -> AtomType:
        try:
            return self._atom_types[symbol.upper()]
        except KeyError:
            raise ParameterPoorDefinedError(
                'Atom type %s has not been defined, defined types: %s'
                %(symbol, self.symbols)
            )

    @property
    def symbols(self) -> list:
        return [atom_type.symbol for atom_type in self._atom_types.values()]

    @property
    def num_atom_types(self) -> int:
        return len(self._atom_types)
