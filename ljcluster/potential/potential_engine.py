#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : potential_engine.py
created time : 2026/10/13
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import numpy as np
import numba as nb
from ljcluster import SPATIAL_DIM
from ljcluster.environment import env
from ljcluster.core import Cluster, SimulationContext
from ljcluster.potential import ALL_ATOMS, DEFAULT_CONFINEMENT_CONSTANT
from ljcluster.utils import get_center_of_mass
from ljcluster.error import *

@nb.njit()
def is_degenerate(d2):
    # r^12 underflowing to zero is as singular as d2 == 0
    d6 = d2 * d2 * d2
    return d6 * d6 == 0

@nb.njit()
def get_lennard_jones_energy(d2, sigma, epsilon):
    sigma2 = sigma * sigma
    sigma6 = sigma2 * sigma2 * sigma2
    sigma12 = sigma6 * sigma6
    d6 = d2 * d2 * d2
    d12 = d6 * d6
    return 4.0 * epsilon * (sigma12 / d12 - sigma6 / d6)

@nb.njit()
def get_lennard_jones_gradient_factor(d2, sigma, epsilon):
    # dV/dr_i = factor * (r_i - r_j)
    sigma2 = sigma * sigma
    sigma6 = sigma2 * sigma2 * sigma2
    sigma12 = sigma6 * sigma6
    d6 = d2 * d2 * d2
    d12 = d6 * d6
    return -24.0 * epsilon * (2.0 * sigma12 / d12 - sigma6 / d6) / d2

@nb.njit()
def get_confinement_energy(d2, sigma, epsilon, confinement_constant):
    scaled_sigma = confinement_constant * sigma
    vc = d2 / (scaled_sigma * scaled_sigma)
    vc2 = vc * vc
    vc4 = vc2 * vc2
    vc8 = vc4 * vc4
    return epsilon * vc8 * vc2

class PotentialEngine:
    '''Lennard-Jones energy and gradient of a cluster with a soft confinement.

    Pair parameters follow the Lorentz-Berthelot combining rules,
    ``epsilon_ij = sqrt(epsilon_i * epsilon_j)`` and
    ``sigma_ij = (sigma_i + sigma_j) / 2``. Every atom additionally feels
    ``epsilon_i * (d_cm^2 / (K * sigma_i)^2)^10`` where ``d_cm`` is its distance
    to the center of mass of the cluster and ``K`` the confinement constant.

    No cutoff and no periodic boundary are applied.
    '''
    def __init__(self, confinement_constant=DEFAULT_CONFINEMENT_CONSTANT) -> None:
        if confinement_constant <= 0:
            raise ValueError(
                'Confinement constant should be positive, while %s is provided'
                %confinement_constant
            )
        self._confinement_constant = env.NUMPY_FLOAT(confinement_constant)
        self._potential_energy = None
        self._confinement_energy = None
        self._forces = None
        # Kernel
        self._update_total_energy = nb.njit((
            env.NUMBA_FLOAT[:, ::1], # positions
            env.NUMBA_FLOAT[::1], # sigmas
            env.NUMBA_FLOAT[::1], # epsilons
            env.NUMBA_FLOAT[::1], # center_of_mass
            env.NUMBA_FLOAT # confinement_constant
        ))(self._update_total_energy_kernel)
        self._update_candidate_energy = nb.njit((
            env.NUMBA_FLOAT[:, ::1], # positions
            env.NUMBA_FLOAT[::1], # sigmas
            env.NUMBA_FLOAT[::1], # epsilons
            env.NUMBA_FLOAT[::1], # center_of_mass
            env.NUMBA_FLOAT, # confinement_constant
            env.NUMBA_INT # candidate
        ))(self._update_candidate_energy_kernel)
        self._update_forces = nb.njit(nb.void(
            env.NUMBA_FLOAT[:, ::1], # positions
            env.NUMBA_FLOAT[::1], # sigmas
            env.NUMBA_FLOAT[::1], # epsilons
            env.NUMBA_FLOAT[:, ::1], # forces
            env.NUMBA_INT[::1] # degenerate_neighbors
        ), parallel=env.is_parallel)(self._update_forces_kernel)

    def __repr__(self) -> str:
        return '<ljcluster.potential.PotentialEngine object>'

    def __str__(self) -> str:
        return 'Lennard-Jones potential with confinement constant %s' %self._confinement_constant

    @staticmethod
    def _update_total_energy_kernel(
        positions, sigmas, epsilons,
        center_of_mass, confinement_constant
    ):
        num_atoms = positions.shape[0]
        energy = 0.0
        confinement_energy = 0.0
        degenerate_i, degenerate_j = -1, -1
        for i in range(num_atoms):
            x1, y1, z1 = positions[i, 0], positions[i, 1], positions[i, 2]
            dx = center_of_mass[0] - x1
            dy = center_of_mass[1] - y1
            dz = center_of_mass[2] - z1
            d2 = dx*dx + dy*dy + dz*dz
            confinement_energy += get_confinement_energy(
                d2, sigmas[i], epsilons[i], confinement_constant
            )
            for j in range(i+1, num_atoms):
                dx = positions[j, 0] - x1
                dy = positions[j, 1] - y1
                dz = positions[j, 2] - z1
                d2 = dx*dx + dy*dy + dz*dz
                if is_degenerate(d2):
                    if degenerate_i == -1:
                        degenerate_i, degenerate_j = i, j
                    continue
                epsilon = np.sqrt(epsilons[i] * epsilons[j])
                sigma = 0.5 * (sigmas[i] + sigmas[j])
                energy += get_lennard_jones_energy(d2, sigma, epsilon)
        return energy, confinement_energy, degenerate_i, degenerate_j

    @staticmethod
    def _update_candidate_energy_kernel(
        positions, sigmas, epsilons,
        center_of_mass, confinement_constant, candidate
    ):
        num_atoms = positions.shape[0]
        energy = 0.0
        degenerate_j = -1
        x1, y1, z1 = positions[candidate, 0], positions[candidate, 1], positions[candidate, 2]
        dx = center_of_mass[0] - x1
        dy = center_of_mass[1] - y1
        dz = center_of_mass[2] - z1
        d2 = dx*dx + dy*dy + dz*dz
        confinement_energy = get_confinement_energy(
            d2, sigmas[candidate], epsilons[candidate], confinement_constant
        )
        for j in range(num_atoms):
            if j == candidate:
                continue
            dx = positions[j, 0] - x1
            dy = positions[j, 1] - y1
            dz = positions[j, 2] - z1
            d2 = dx*dx + dy*dy + dz*dz
            if is_degenerate(d2):
                if degenerate_j == -1:
                    degenerate_j = j
                continue
            epsilon = np.sqrt(epsilons[candidate] * epsilons[j])
            sigma = 0.5 * (sigmas[candidate] + sigmas[j])
            energy += get_lennard_jones_energy(d2, sigma, epsilon)
        return energy, confinement_energy, degenerate_j

    @staticmethod
    def _update_forces_kernel(
        positions, sigmas, epsilons,
        forces, degenerate_neighbors
    ):
        num_atoms = positions.shape[0]
        # Each i only writes its own row, rows are independent
        for i in nb.prange(num_atoms):
            fx, fy, fz = 0.0, 0.0, 0.0
            for j in range(num_atoms):
                if i == j:
                    continue
                dx = positions[i, 0] - positions[j, 0]
                dy = positions[i, 1] - positions[j, 1]
                dz = positions[i, 2] - positions[j, 2]
                d2 = dx*dx + dy*dy + dz*dz
                if is_degenerate(d2):
                    if degenerate_neighbors[i] == -1:
                        degenerate_neighbors[i] = j
                    continue
                epsilon = np.sqrt(epsilons[i] * epsilons[j])
                sigma = 0.5 * (sigmas[i] + sigmas[j])
                de = get_lennard_jones_gradient_factor(d2, sigma, epsilon)
                fx += de * dx
                fy += de * dy
                fz += de * dz
            forces[i, 0] = fx
            forces[i, 1] = fy
            forces[i, 2] = fz

    def _check_cluster(self, cluster: Cluster):
        if cluster.num_atoms == 0:
            raise InvalidStateError('Energy of an empty cluster is not defined')
        if not (np.isfinite(cluster.sigmas).all() and np.isfinite(cluster.epsilons).all()):
            cluster.check_parameters()

    def _get_kernel_arrays(self, cluster: Cluster):
        positions = np.ascontiguousarray(cluster.positions, dtype=env.NUMPY_FLOAT)
        sigmas = np.ascontiguousarray(cluster.sigmas, dtype=env.NUMPY_FLOAT)
        epsilons = np.ascontiguousarray(cluster.epsilons, dtype=env.NUMPY_FLOAT)
        return positions, sigmas, epsilons

    def evaluate(self, cluster: Cluster, context: SimulationContext=None, candidate: int=ALL_ATOMS):
        '''Pair energy and confinement energy of the cluster.

        With ``candidate == ALL_ATOMS`` every unordered pair and every atom's
        confinement is summed. Otherwise only the pairs involving the candidate
        and the candidate's own confinement are, which is what a single-atom
        trial move needs.

        The confinement energy is also written to ``context`` when given.
        '''
        self._check_cluster(cluster)
        positions, sigmas, epsilons = self._get_kernel_arrays(cluster)
        center_of_mass = np.ascontiguousarray(
            get_center_of_mass(positions), dtype=env.NUMPY_FLOAT
        )
        if candidate == ALL_ATOMS:
            energy, confinement_energy, degenerate_i, degenerate_j = self._update_total_energy(
                positions, sigmas, epsilons,
                center_of_mass, self._confinement_constant
            )
        else:
            if candidate < 0 or candidate >= cluster.num_atoms:
                raise AtomIndexError(
                    'Candidate atom %d beyond the number of atoms %d'
                    %(candidate, cluster.num_atoms)
                )
            energy, confinement_energy, degenerate_j = self._update_candidate_energy(
                positions, sigmas, epsilons,
                center_of_mass, self._confinement_constant, candidate
            )
            degenerate_i = candidate if degenerate_j != -1 else -1
        if degenerate_i != -1:
            raise DegenerateGeometryError(
                'Atom %d and atom %d overlap near position %s'
                %(degenerate_i, degenerate_j, positions[degenerate_i, :].tolist())
            )
        self._potential_energy = float(energy)
        self._confinement_energy = float(confinement_energy)
        if context != None:
            context.confinement_energy = self._confinement_energy
        return self._potential_energy, self._confinement_energy

    def evaluate_forces(self, cluster: Cluster) -> np.ndarray:
        '''Gradient of the pair energy with respect to each atom position.

        Row i holds ``sum_j de_ij * (r_i - r_j)`` with
        ``de_ij = -24 epsilon_ij (2 sigma_ij^12 / r^12 - sigma_ij^6 / r^6) / r^2``,
        i.e. dV/dr_i; the physical force is its negative. The confinement
        term does not contribute.
        '''
        self._check_cluster(cluster)
        positions, sigmas, epsilons = self._get_kernel_arrays(cluster)
        forces = np.zeros([cluster.num_atoms, SPATIAL_DIM], env.NUMPY_FLOAT)
        degenerate_neighbors = np.full(cluster.num_atoms, -1, env.NUMPY_INT)
        self._update_forces(positions, sigmas, epsilons, forces, degenerate_neighbors)
        degenerate_atoms = np.nonzero(degenerate_neighbors != -1)[0]
        if degenerate_atoms.shape[0] != 0:
            i = degenerate_atoms[0]
            raise DegenerateGeometryError(
                'Atom %d and atom %d overlap near position %s'
                %(i, degenerate_neighbors[i], positions[i, :].tolist())
            )
        self._forces = forces
        return forces

    @property
    def confinement_constant(self):
        return self._confinement_constant

    @property
    def potential_energy(self):
        return self._potential_energy

    @property
    def confinement_energy(self):
        return self._confinement_energy

    @property
    def forces(self):
        return self._forces
