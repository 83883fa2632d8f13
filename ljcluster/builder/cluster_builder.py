#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : cluster_builder.py
created time : 2026/10/14
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import logging
import numpy as np
from ljcluster.core import Cluster, SimulationContext, PLACEHOLDER_COORDINATE
from ljcluster.utils import get_bond
from ljcluster.builder import PLACEHOLDER_MODE, ZERO_MODE, RANDOM_MODE, BUILD_MODES
from ljcluster.builder import MIN_SEPARATION_FACTOR, DEFAULT_MAX_ATTEMPTS
from ljcluster.error import *

logger = logging.getLogger(__name__)

def has_conflict(positions: np.ndarray, sigmas: np.ndarray, atom_index: int, start: int=0) -> bool:
    '''Check atom ``atom_index`` against atoms ``start, ..., atom_index - 1``.

    Two atoms clash when their distance is below
    ``MIN_SEPARATION_FACTOR * (sigma_i + sigma_j)``.
    '''
    position = positions[atom_index, :]
    for j in range(start, atom_index):
        distance = get_bond(position, positions[j, :])
        if distance < MIN_SEPARATION_FACTOR * (sigmas[atom_index] + sigmas[j]):
            logger.info(
                'Atoms %d and %d too close for starting configuration: '
                'generating new coordinates for atom %d', j, atom_index, atom_index
            )
            return True
    return False

class ClusterBuilder:
    '''Assign starting coordinates to a range of atoms.

    Random placement draws each atom uniformly in a cube of half-width
    ``sqrt(num_atoms) - 1`` and redraws it while it clashes with an atom placed
    earlier in the same call. Atoms are handled in increasing index order and
    only lower indices are checked, so the result depends on that order.
    '''
    def __init__(self, max_attempts: int=DEFAULT_MAX_ATTEMPTS) -> None:
        if max_attempts <= 0:
            raise ValueError(
                'max_attempts should be a positive integer, while %d is provided' %max_attempts
            )
        self._max_attempts = int(max_attempts)
        self._num_rejections = 0

    def __repr__(self) -> str:
        return '<ljcluster.builder.ClusterBuilder object at %x>' %id(self)

    __str__ = __repr__

    @staticmethod
    def _check_mode(mode) -> int:
        if isinstance(mode, str):
            if not mode.upper() in BUILD_MODES:
                raise ValueError(
                    'Building mode %s is not supported, choose from %s'
                    %(mode, list(BUILD_MODES.keys()))
                )
            return BUILD_MODES[mode.upper()]
        if not mode in BUILD_MODES.values():
            raise ValueError(
                'Building mode %s is not supported, choose from %s'
                %(mode, list(BUILD_MODES.values()))
            )
        return mode

    def build(self, cluster: Cluster, context: SimulationContext, start: int, end: int, mode):
        mode = self._check_mode(mode)
        if start < 0 or end > cluster.num_atoms or start > end:
            raise AtomIndexError(
                'Atom range [%d, %d) is not inside [0, %d)' %(start, end, cluster.num_atoms)
            )
        self._num_rejections = 0
        positions = cluster.positions
        if mode == PLACEHOLDER_MODE:
            positions[start:end, :] = PLACEHOLDER_COORDINATE
        elif mode == ZERO_MODE:
            positions[start:end, :] = 0
        elif mode == RANDOM_MODE:
            if not np.isfinite(cluster.sigmas[start:end]).all():
                raise ParameterPoorDefinedError(
                    'Atoms in range [%d, %d) should be typed before random placement'
                    %(start, end)
                )
            context.cluster_radius = np.sqrt(context.num_atoms) - 1.0
            logger.info(
                'Randomly placing atoms %d to %d in a cube of half-width %.4f',
                start, end-1, context.cluster_radius
            )
            for atom_index in range(start, end):
                if not self._place_atom(positions, cluster.sigmas, context, atom_index, start):
                    raise PlacementExhaustedError(
                        'Atom %d could not be placed without clash after %d attempts'
                        %(atom_index, self._max_attempts)
                    )
            logger.info(
                'Atoms %d to %d placed with %d rejections', start, end-1, self._num_rejections
            )

    def _place_atom(self, positions, sigmas, context: SimulationContext, atom_index: int, start: int) -> bool:
        for _ in range(self._max_attempts):
            positions[atom_index, :] = context.cluster_radius * context.random_stream.get_vector()
            if not has_conflict(positions, sigmas, atom_index, start):
                return True
            self._num_rejections += 1
        return False

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def num_rejections(self) -> int:
        return self._num_rejections
