#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : energy_parser.py
created time : 2026/10/15
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import numpy as np
from ljcluster.io.energy_writer import ENERGY_FILE_HEADER_DTYPE, ENERGY_FILE_FRAME_DTYPE
from ljcluster.error import *

class EnergyParser:
    def __init__(self, file_path: str) -> None:
        self._file_path = file_path
        with open(file_path, 'rb') as f:
            data = f.read()
        header_size = ENERGY_FILE_HEADER_DTYPE.itemsize
        if len(data) < header_size:
            raise FileFormatError(
                '%s is shorter than the %d bytes frame count' %(file_path, header_size)
            )
        self._num_frames = int(np.frombuffer(data[:header_size], ENERGY_FILE_HEADER_DTYPE)[0])
        expected_size = header_size + self._num_frames * ENERGY_FILE_FRAME_DTYPE.itemsize
        if len(data) < expected_size:
            raise FileFormatError(
                '%s declares %d frames, which requires %d bytes, while only %d bytes are provided'
                %(file_path, self._num_frames, expected_size, len(data))
            )
        self._frames = np.frombuffer(
            data[header_size:expected_size], ENERGY_FILE_FRAME_DTYPE
        ).copy()

    @property
    def num_frames(self) -> int:
        return self._num_frames

    @property
    def times(self) -> np.ndarray:
        return self._frames['time'].copy()

    @property
    def potential_energies(self) -> np.ndarray:
        return self._frames['potential_energy'].copy()

    @property
    def kinetic_energies(self) -> np.ndarray:
        return self._frames['kinetic_energy'].copy()

    @property
    def total_energies(self) -> np.ndarray:
        return self._frames['total_energy'].copy()
