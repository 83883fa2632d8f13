#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : xyz_writer.py
created time : 2026/10/15
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import datetime
import numpy as np
from ljcluster.error import *

class XYZWriter:
    def __init__(self, file_path: str, symbols: list, mode: str = 'w') -> None:
        if not file_path.endswith('.xyz'):
            raise FileFormatError('The file should end with .xyz suffix')
        self._file_path = file_path
        self._mode = mode
        self._symbols = list(symbols)
        self._num_atoms = len(self._symbols)
        f = open(file_path, mode)
        f.close()

    def _write_info(self, info: str):
        with open(self._file_path, 'a') as f:
            print(info, file=f, end='')

    def write(self, positions: np.ndarray, comment: str=''):
        shape, is_shape_error = positions.shape, False
        is_2d_array = True if len(shape) == 2 else False
        if is_2d_array and shape[0] != self._num_atoms:
            is_shape_error = True
        elif not is_2d_array and len(shape) != 3:
            is_shape_error = True
        elif not is_2d_array and shape[1] != self._num_atoms:
            is_shape_error = True
        if is_shape_error:
            raise ArrayDimError(
                'The writer contains %s atoms while a positions array with shape %s is provided'
                %(self._num_atoms, list(shape))
            )
        if is_2d_array:
            self._write_frame(positions, comment)
        else:
            for frame in range(shape[0]):
                self._write_frame(positions[frame, :], comment)

    def _write_frame(self, positions: np.ndarray, comment: str):
        self._write_info('%d\n' %self._num_atoms)
        self._write_info(
            'XYZ FILE CREATED WITH LJCLUSTER %-11s %s\n' %(
                datetime.date.today().strftime('%d-%b-%Y').upper(), comment
            )
        )
        for i in range(self._num_atoms):
            self._write_info(
                '%s %.8f %.8f %.8f\n' %(
                    self._symbols[i],
                    positions[i, 0],
                    positions[i, 1],
                    positions[i, 2]
                )
            )

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def num_atoms(self) -> int:
        return self._num_atoms
