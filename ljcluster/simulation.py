#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : simulation.py
created time : 2026/10/16
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import time
import logging
import numpy as np
from ljcluster.core import Cluster, RandomStream, SimulationContext
from ljcluster.builder import ClusterBuilder, PLACEHOLDER_MODE, DEFAULT_MAX_ATTEMPTS
from ljcluster.potential import PotentialEngine, DEFAULT_CONFINEMENT_CONSTANT
from ljcluster.io import InputParser, XYZParser, XYZWriter, EnergyWriter
from ljcluster.error import *

logger = logging.getLogger(__name__)

class Simulation:
    def __init__(
        self, input_parser: InputParser, seed=None,
        max_attempts: int=DEFAULT_MAX_ATTEMPTS,
        confinement_constant=DEFAULT_CONFINEMENT_CONSTANT
    ) -> None:
        if input_parser.num_atoms == None:
            raise InputFilePoorDefinedError(
                'NATOMS is not defined in %s' %input_parser.file_path
            )
        self._input_parser = input_parser
        self._seed = str(int(time.time())) if seed == None else str(seed)
        self._cluster = Cluster(input_parser.num_atoms)
        self._context = SimulationContext(input_parser.num_atoms, RandomStream(self._seed))
        self._builder = ClusterBuilder(max_attempts)
        self._engine = PotentialEngine(confinement_constant)
        self._energy_writer = None
        self._energy = None
        self._confinement_energy = None

    def __repr__(self) -> str:
        return '<ljcluster.Simulation object with %d atoms at %x>' %(
            self._cluster.num_atoms, id(self)
        )

    __str__ = __repr__

    def __enter__(self):
        return self

    def __exit__(self, *arg):
        self.close()

    def build(self):
        num_atoms = self._cluster.num_atoms
        self._builder.build(self._cluster, self._context, 0, num_atoms, PLACEHOLDER_MODE)
        for atom_range in self._input_parser.atom_ranges:
            start, end = atom_range['start'], atom_range['end']
            self._cluster.assign_atom_type(atom_range['atom_type'], start, end)
            if atom_range['mode'] == 'FILE':
                self._read_positions(atom_range['file_path'], start, end)
            else:
                self._builder.build(
                    self._cluster, self._context, start, end, atom_range['mode']
                )

    def _read_positions(self, file_path: str, start: int, end: int):
        parser = XYZParser(file_path)
        positions = parser.get_positions(0)
        if positions.shape[0] == self._cluster.num_atoms:
            positions = positions[start:end, :]
        elif positions.shape[0] != end - start:
            raise ArrayDimError(
                '%s contains %d atoms, while %d or %d atoms are required'
                %(file_path, positions.shape[0], self._cluster.num_atoms, end - start)
            )
        self._cluster.positions[start:end, :] = positions
        logger.info('Atoms %d to %d read from %s', start, end - 1, file_path)

    def evaluate(self):
        self._energy, self._confinement_energy = self._engine.evaluate(self._cluster, self._context)
        return self._energy, self._confinement_energy

    def evaluate_forces(self) -> np.ndarray:
        return self._engine.evaluate_forces(self._cluster)

    def _write_coordinates(self, file_path: str, comment: str):
        if file_path == None:
            return None
        writer = XYZWriter(file_path, self._cluster.symbols)
        writer.write(self._cluster.positions, comment)
        logger.info('Coordinates saved in %s', file_path)

    def save_first_coordinates(self, comment: str=''):
        self._write_coordinates(self._input_parser.first_coordinate_file, comment)

    def save_last_coordinates(self, comment: str=''):
        self._write_coordinates(self._input_parser.last_coordinate_file, comment)

    def save_energy(self, sim_time=0.0, kinetic_energy=0.0):
        if self._input_parser.energy_file == None:
            return None
        if self._energy == None:
            self.evaluate()
        if self._energy_writer == None:
            self._energy_writer = EnergyWriter(self._input_parser.energy_file)
        # The confinement belongs to the potential felt by the atoms
        potential_energy = self._energy + self._confinement_energy
        self._energy_writer.write(
            sim_time, potential_energy, kinetic_energy, potential_energy + kinetic_energy
        )

    def close(self):
        if self._energy_writer != None:
            self._energy_writer.close()

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def input_parser(self) -> InputParser:
        return self._input_parser

    @property
    def cluster(self) -> Cluster:
        return self._cluster

    @property
    def context(self) -> SimulationContext:
        return self._context

    @property
    def builder(self) -> ClusterBuilder:
        return self._builder

    @property
    def engine(self) -> PotentialEngine:
        return self._engine

    @property
    def energy(self) -> float:
        return self._energy

    @property
    def confinement_energy(self) -> float:
        return self._confinement_energy
