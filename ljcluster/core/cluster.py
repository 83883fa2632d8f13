#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : cluster.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import numpy as np
from ljcluster import SPATIAL_DIM
from ljcluster.environment import env
from ljcluster.core.atom import Atom
from ljcluster.core.atom_type import AtomType
from ljcluster.utils import get_center_of_mass, recentre_positions
from ljcluster.error import *

class Cluster:
    def __init__(self, num_atoms: int) -> None:
        if num_atoms < 0:
            raise AtomIndexError(
                'The number of atoms should be a non-negative integer, while %d is provided'
                %num_atoms
            )
        self._num_atoms = int(num_atoms)
        self._matrix_shape = [self._num_atoms, SPATIAL_DIM]
        self._atoms = [Atom(atom_id=i) for i in range(self._num_atoms)]
        self._positions = np.zeros(self._matrix_shape, env.NUMPY_FLOAT)
        self._update_atom_properties()

    def __repr__(self) -> str:
        return '<ljcluster.core.Cluster object with %d atoms at %x>' %(
            self._num_atoms, id(self)
        )

    __str__ = __repr__

    def _check_matrix_shape(self, matrix: np.ndarray):
        if matrix.ndim != 2:
            raise ArrayDimError(
                'A 2d array is required, while array with shape %s is provided'
                %list(matrix.shape)
            )
        row, col = matrix.shape
        if row != self._matrix_shape[0] or col != self._matrix_shape[1]:
            raise ArrayDimError(
                'The dimension of array should be [%d, %d], while array [%d, %d] is provided'
                %(self._matrix_shape[0], self._matrix_shape[1], row, col)
            )

    def _check_atom_index(self, atom_index: int):
        if atom_index < 0 or atom_index >= self._num_atoms:
            raise AtomIndexError(
                'Atom %d beyond the number of atoms %d' %(atom_index, self._num_atoms)
            )

    def _update_atom_properties(self):
        self._sigmas = np.array([atom.sigma for atom in self._atoms], env.NUMPY_FLOAT)
        self._epsilons = np.array([atom.epsilon for atom in self._atoms], env.NUMPY_FLOAT)
        self._masses = np.array([atom.mass for atom in self._atoms], env.NUMPY_FLOAT)
        self._charges = np.array([atom.charge for atom in self._atoms], env.NUMPY_FLOAT)

    def assign_atom_type(self, atom_type: AtomType, start: int=0, end: int=None):
        end = self._num_atoms if end == None else end
        if start < 0 or end > self._num_atoms or start > end:
            raise AtomIndexError(
                'Atom range [%d, %d) is not inside [0, %d)' %(start, end, self._num_atoms)
            )
        for atom in self._atoms[start:end]:
            atom.assign_atom_type(atom_type)
        self._update_atom_properties()

    def check_parameters(self):
        for atom in self._atoms:
            if not atom.is_typed or not atom.atom_type.is_finite:
                raise ParameterPoorDefinedError(
                    '%s has no finite force field parameters' %atom
                )

    def set_positions(self, positions: np.ndarray):
        positions = np.asarray(positions)
        self._check_matrix_shape(positions)
        self._positions = np.ascontiguousarray(positions, dtype=env.NUMPY_FLOAT)

    def get_position(self, atom_index: int) -> np.ndarray:
        self._check_atom_index(atom_index)
        return self._positions[atom_index, :].copy()

    def set_position(self, atom_index: int, position):
        self._check_atom_index(atom_index)
        self._positions[atom_index, :] = position

    def recentre(self) -> np.ndarray:
        return recentre_positions(self._positions)

    @property
    def center_of_mass(self) -> np.ndarray:
        return get_center_of_mass(self._positions)

    @property
    def num_atoms(self) -> int:
        return self._num_atoms

    @property
    def atoms(self) -> list:
        return self._atoms

    @property
    def symbols(self) -> list:
        return [atom.symbol for atom in self._atoms]

    @property
    def positions(self) -> np.ndarray:
        return self._positions

    @property
    def sigmas(self) -> np.ndarray:
        return self._sigmas

    @property
    def epsilons(self) -> np.ndarray:
        return self._epsilons

    @property
    def masses(self) -> np.ndarray:
        return self._masses

    @property
    def charges(self) -> np.ndarray:
        return self._charges
