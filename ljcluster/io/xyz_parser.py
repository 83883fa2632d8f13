#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : xyz_parser.py
created time : 2026/10/15
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import numpy as np
from ljcluster.environment import env
from ljcluster.error import *

class XYZParser:
    def __init__(self, file_path: str) -> None:
        if not file_path.endswith('.xyz'):
            raise FileFormatError('The file should end with .xyz suffix')
        self._file_path = file_path
        with open(self._file_path, 'r') as f:
            lines = f.read().splitlines()
        # Trailing blank lines are not frames
        while len(lines) != 0 and lines[-1].strip() == '':
            lines.pop()
        if len(lines) == 0:
            raise FileFormatError('%s contains no frame' %file_path)
        self._num_atoms = int(lines[0])
        frame_size = self._num_atoms + 2

        multiframe_positions = []
        for frame_start in range(0, len(lines), frame_size):
            frame_lines = lines[frame_start:frame_start+frame_size]
            particle_types, positions = self._parse_single_frame(frame_lines)
            multiframe_positions.append(positions)
        self._num_frames = len(multiframe_positions)
        if self._num_frames == 1:
            self._positions = multiframe_positions[0]
        else:
            self._positions = np.stack(multiframe_positions).astype(env.NUMPY_FLOAT)
        self._symbols = particle_types

    def _parse_single_line(self, line: str):
        data = line.strip().split()
        symbol = data[0]
        position = [float(data[-3]), float(data[-2]), float(data[-1])]
        return symbol, position

    def _parse_single_frame(self, frame_lines: list):
        # First line: number of atoms, second line: comment
        try:
            num_atoms = int(frame_lines[0])
        except ValueError:
            raise ArrayDimError(
                'Frame header %r is not a number of atoms, the previous frame holds more than %d atoms'
                %(frame_lines[0], self._num_atoms)
            )
        atom_lines = frame_lines[2:]
        if num_atoms != self._num_atoms or len(atom_lines) != self._num_atoms:
            raise ArrayDimError(
                'XYZ file contains %d atoms, while positions of %d atoms are provided' %(
                    self._num_atoms, len(atom_lines)
                )
            )
        symbols, positions = [], []
        for line in atom_lines:
            symbol, position = self._parse_single_line(line)
            symbols.append(symbol)
            positions.append(position)
        return symbols, np.array(positions, dtype=env.NUMPY_FLOAT)

    def get_positions(self, *frames):
        for frame in frames:
            if frame >= self._num_frames:
                raise ArrayDimError(
                    '%d beyond the number of frames %d stored in xyz file'
                    %(frame, self._num_frames)
                )
        if self._num_frames == 1:
            return self._positions.copy()
        if len(frames) == 1:
            return self._positions[frames[0]].copy()
        return self._positions[list(frames)].copy()

    @property
    def symbols(self) -> list:
        return self._symbols

    @property
    def num_frames(self) -> int:
        return self._num_frames

    @property
    def num_atoms(self) -> int:
        return self._num_atoms

    @property
    def positions(self) -> np.ndarray:
        return self._positions.copy()
