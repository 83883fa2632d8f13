#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : context.py
created time : 2026/10/13
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

from ljcluster.core.random_stream import RandomStream

class SimulationContext:
    '''State shared by the builder and the potential engine during one run.

    Owned by the driver of the run, it is never stored at module level.
    '''
    def __init__(self, num_atoms: int, random_stream: RandomStream) -> None:
        self._num_atoms = int(num_atoms)
        self._random_stream = random_stream
        self._confinement_energy = 0.0
        self._cluster_radius = 0.0

    def __repr__(self) -> str:
        return '<ljcluster.core.SimulationContext with %d atoms at %x>' %(
            self._num_atoms, id(self)
        )

    __str__ = __repr__

    @property
    def num_atoms(self) -> int:
        return self._num_atoms

    @property
    def random_stream(self) -> RandomStream:
        return self._random_stream

    @property
    def confinement_energy(self) -> float:
        return self._confinement_energy

    @confinement_energy.setter
    def confinement_energy(self, val: float):
        self._confinement_energy = float(val)

    @property
    def cluster_radius(self) -> float:
        return self._cluster_radius

    @cluster_radius.setter
    def cluster_radius(self, val: float):
        self._cluster_radius = float(val)
