#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : input_parser.py
created time : 2026/10/16
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import logging
from ljcluster.core import AtomType, AtomTypeTable
from ljcluster.error import *

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ['LANGEVIN', 'BROWNIAN']
SUPPORTED_COORDINATE_MODES = ['RANDOM', 'ZERO', 'FILE']
DEFAULT_SAVE_FREQUENCY = 1000

class InputParser:
    '''Parser of the keyword input file.

    One keyword per line, keywords and values are case insensitive and lines
    starting with ``#`` are skipped::

        METHOD LANGEVIN FRICTION 5.0 TIMESTEP 0.001
        NONBOND NOPBC NOCUT
        SAVE ENER 'ener.dat' EACH 100
        SAVE COOR FIRST XYZ 'first.xyz'
        SAVE COOR LAST XYZ 'last.xyz'
        SAVE COOR TRAJ DCD 'traj.dcd' EACH 100
        NATOMS 13
        TEMP 300.0
        NSTEPS 100000
        PARAMS AR MASS 39.948 EPS 0.996 SIG 3.405
        ATOM 1 TO END AR COOR RANDOM

    Atom ranges are 1-based and inclusive in the file, they are stored as
    0-based half-open ``[start, end)`` ranges.
    '''
    def __init__(self, file_path: str) -> None:
        self._file_path = file_path
        self._method = None
        self._friction = 0.0
        self._time_step = 0.0
        self._cuton = float('inf')
        self._cutoff = float('inf')
        self._energy_file = None
        self._energy_save_frequency = DEFAULT_SAVE_FREQUENCY
        self._first_coordinate_file = None
        self._last_coordinate_file = None
        self._trajectory_file = None
        self._trajectory_save_frequency = DEFAULT_SAVE_FREQUENCY
        self._num_atoms = None
        self._temperature = 0.0
        self._num_steps = 0
        self._atom_type_table = AtomTypeTable()
        self._atom_ranges = []
        with open(file_path, 'r') as f:
            for line_number, line in enumerate(f, start=1):
                self._parse_line(line, line_number)

    def __repr__(self) -> str:
        return '<ljcluster.io.InputParser %s at %x>' %(self._file_path, id(self))

    __str__ = __repr__

    def _get_token(self, tokens: list, index: int, line_number: int) -> str:
        if index >= len(tokens):
            raise InputFilePoorDefinedError(
                'Line %d of %s: keyword %s expects at least %d values, while %d are provided'
                %(line_number, self._file_path, tokens[0].upper(), index, len(tokens) - 1)
            )
        return tokens[index].strip('\'"')

    def _get_float(self, tokens: list, index: int, line_number: int) -> float:
        token = self._get_token(tokens, index, line_number)
        try:
            return float(token)
        except ValueError:
            raise InputFilePoorDefinedError(
                'Line %d of %s: %s is not a number' %(line_number, self._file_path, token)
            )

    def _get_int(self, tokens: list, index: int, line_number: int) -> int:
        token = self._get_token(tokens, index, line_number)
        try:
            return int(token)
        except ValueError:
            raise InputFilePoorDefinedError(
                'Line %d of %s: %s is not an integer' %(line_number, self._file_path, token)
            )

    def _parse_line(self, line: str, line_number: int):
        if line.startswith('#'):
            logger.info('Skipping line %s', line.rstrip())
            return
        tokens = line.split()
        if len(tokens) == 0:
            return
        keyword = tokens[0].upper()
        if keyword == 'METHOD':
            self._parse_method(tokens, line_number)
        elif keyword == 'NONBOND':
            self._parse_nonbond(tokens, line_number)
        elif keyword == 'SAVE':
            self._parse_save(tokens, line_number)
        elif keyword == 'NATOMS':
            self._num_atoms = self._get_int(tokens, 1, line_number)
            if self._num_atoms <= 0:
                raise InputFilePoorDefinedError(
                    'Line %d of %s: NATOMS should be positive, while %d is provided'
                    %(line_number, self._file_path, self._num_atoms)
                )
        elif keyword == 'TEMP':
            self._temperature = self._get_float(tokens, 1, line_number)
        elif keyword == 'NSTEPS':
            self._num_steps = self._get_int(tokens, 1, line_number)
        elif keyword == 'PARAMS':
            self._parse_params(tokens, line_number)
        elif keyword == 'ATOM':
            self._parse_atom(tokens, line_number)
        else:
            logger.warning(
                'Line %d of %s: unknown keyword %s is ignored', line_number, self._file_path, tokens[0]
            )

    def _parse_method(self, tokens: list, line_number: int):
        method = self._get_token(tokens, 1, line_number).upper()
        if not method in SUPPORTED_METHODS:
            raise InputFilePoorDefinedError(
                'Line %d of %s: METHOD %s is unknown, should be one of %s'
                %(line_number, self._file_path, method, SUPPORTED_METHODS)
            )
        self._method = method
        self._friction = self._get_float(tokens, 3, line_number)
        self._time_step = self._get_float(tokens, 5, line_number)

    def _parse_nonbond(self, tokens: list, line_number: int):
        boundary = self._get_token(tokens, 1, line_number).upper()
        if boundary != 'NOPBC':
            raise InputFilePoorDefinedError(
                'Line %d of %s: %s is not a valid boundary keyword, only NOPBC is supported'
                %(line_number, self._file_path, boundary)
            )
        if self._get_token(tokens, 2, line_number).upper() == 'NOCUT':
            self._cuton, self._cutoff = float('inf'), float('inf')
        else:
            self._cuton = self._get_float(tokens, 3, line_number)
            self._cutoff = self._get_float(tokens, 5, line_number)

    def _parse_save(self, tokens: list, line_number: int):
        target = self._get_token(tokens, 1, line_number).upper()
        if target == 'ENER':
            self._energy_file = self._get_token(tokens, 2, line_number)
            self._energy_save_frequency = self._get_int(tokens, 4, line_number)
        elif target == 'COOR':
            what = self._get_token(tokens, 2, line_number).upper()
            if what == 'FIRST':
                self._first_coordinate_file = self._get_token(tokens, 4, line_number)
            elif what == 'LAST':
                self._last_coordinate_file = self._get_token(tokens, 4, line_number)
            elif what == 'TRAJ':
                self._trajectory_file = self._get_token(tokens, 4, line_number)
                self._trajectory_save_frequency = self._get_int(tokens, 6, line_number)
            else:
                raise InputFilePoorDefinedError(
                    'Line %d of %s: SAVE COOR %s is unknown, should be FIRST, LAST or TRAJ'
                    %(line_number, self._file_path, what)
                )
        else:
            raise InputFilePoorDefinedError(
                'Line %d of %s: SAVE %s is unknown, should be ENER or COOR'
                %(line_number, self._file_path, target)
            )

    def _parse_params(self, tokens: list, line_number: int):
        try:
            atom_type = AtomType(
                self._get_token(tokens, 1, line_number),
                mass=self._get_float(tokens, 3, line_number),
                charge=0.0,
                epsilon=self._get_float(tokens, 5, line_number),
                sigma=self._get_float(tokens, 7, line_number)
            )
        except ParameterPoorDefinedError as error:
            raise InputFilePoorDefinedError(
                'Line %d of %s: %s' %(line_number, self._file_path, error)
            )
        self._atom_type_table.add_atom_types(atom_type)

    def _parse_atom(self, tokens: list, line_number: int):
        if self._num_atoms == None:
            raise InputFilePoorDefinedError(
                'Line %d of %s: NATOMS should be defined before ATOM'
                %(line_number, self._file_path)
            )
        start = self._get_int(tokens, 1, line_number) - 1
        end = self._get_token(tokens, 3, line_number)
        end = self._num_atoms if end.upper() == 'END' else self._get_int(tokens, 3, line_number)
        if end <= 0 or end > self._num_atoms:
            end = self._num_atoms
        if start < 0 or start >= end:
            raise InputFilePoorDefinedError(
                'Line %d of %s: atom range %d to %d is empty or beyond %d atoms'
                %(line_number, self._file_path, start + 1, end, self._num_atoms)
            )
        symbol = self._get_token(tokens, 4, line_number)
        if not symbol in self._atom_type_table:
            raise InputFilePoorDefinedError(
                'Line %d of %s: atom type %s is used before its PARAMS definition'
                %(line_number, self._file_path, symbol)
            )
        mode = self._get_token(tokens, 6, line_number).upper() if len(tokens) > 6 else 'RANDOM'
        file_path = None
        if mode == 'FILE':
            file_path = self._get_token(tokens, 7, line_number)
        elif not mode in SUPPORTED_COORDINATE_MODES:
            logger.warning(
                'Line %d of %s: coordinate mode %s is unknown, RANDOM is used',
                line_number, self._file_path, mode
            )
            mode = 'RANDOM'
        logger.info(
            'Building an atomic list from index %d to %d and of type %s', start, end - 1, symbol
        )
        # Snapshot of the type at this line, later PARAMS do not change it
        self._atom_ranges.append({
            'start': start, 'end': end,
            'atom_type': self._atom_type_table.get_atom_type(symbol),
            'mode': mode, 'file_path': file_path
        })

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def method(self) -> str:
        return self._method

    @property
    def friction(self) -> float:
        return self._friction

    @property
    def time_step(self) -> float:
        return self._time_step

    @property
    def cuton(self) -> float:
        return self._cuton

    @property
    def cutoff(self) -> float:
        return self._cutoff

    @property
    def energy_file(self) -> str:
        return self._energy_file

    @property
    def energy_save_frequency(self) -> int:
        return self._energy_save_frequency

    @property
    def first_coordinate_file(self) -> str:
        return self._first_coordinate_file

    @property
    def last_coordinate_file(self) -> str:
        return self._last_coordinate_file

    @property
    def trajectory_file(self) -> str:
        return self._trajectory_file

    @property
    def trajectory_save_frequency(self) -> int:
        return self._trajectory_save_frequency

    @property
    def num_atoms(self) -> int:
        return self._num_atoms

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def num_steps(self) -> int:
        return self._num_steps

    @property
    def atom_type_table(self) -> AtomTypeTable:
        return self._atom_type_table

    @property
    def atom_ranges(self) -> list:
        return self._atom_ranges
