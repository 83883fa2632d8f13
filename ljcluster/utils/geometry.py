#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : geometry.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import numpy as np
from ljcluster.error import *

def get_squared_bond(p1, p2):
    vec = np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)
    return float((vec**2).sum())

def get_bond(p1, p2):
    return np.sqrt(get_squared_bond(p1, p2))

def get_center_of_mass(positions: np.ndarray) -> np.ndarray:
    '''Centroid of the positions.

    No mass weighting is applied: every atom counts the same, so this is the
    barycentre of the coordinates.
    '''
    num_atoms = positions.shape[0]
    if num_atoms == 0:
        raise InvalidStateError(
            'Center of mass of an empty set of atoms is not defined'
        )
    return positions.sum(axis=0) / num_atoms

def recentre_positions(positions: np.ndarray) -> np.ndarray:
    # In place, the removed center is returned
    center = get_center_of_mass(positions)
    positions -= center
    return center
