#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : atom.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

from ljcluster.core.atom_type import AtomType

class Atom:
    def __init__(self, atom_id: int, atom_type: AtomType=None) -> None:
        self._atom_id = atom_id
        self._atom_type = None
        if atom_type != None:
            self.assign_atom_type(atom_type)

    def __repr__(self) -> str:
        return '<Atom %s-%d at %x>' %(self.symbol, self._atom_id, id(self))

    __str__ = __repr__

    def assign_atom_type(self, atom_type: AtomType):
        # Snapshot: later changes of the type table do not reach built atoms
        self._atom_type = atom_type.copy()

    @property
    def atom_id(self) -> int:
        return self._atom_id

    @property
    def atom_type(self) -> AtomType:
        return self._atom_type

    @property
    def is_typed(self) -> bool:
        return self._atom_type != None

    @property
    def symbol(self) -> str:
        return self._atom_type.symbol if self.is_typed else 'X'

    @property
    def mass(self) -> float:
        return self._atom_type.mass if self.is_typed else float('nan')

    @property
    def charge(self) -> float:
        return self._atom_type.charge if self.is_typed else float('nan')

    @property
    def sigma(self) -> float:
        return self._atom_type.sigma if self.is_typed else float('nan')

    @property
    def epsilon(self) -> float:
        return self._atom_type.epsilon if self.is_typed else float('nan')
