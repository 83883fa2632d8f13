#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : energy_writer.py
created time : 2026/10/15
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import numpy as np

# Binary layout, little endian:
# uint64 number of frames, then per frame float64 time, potential, kinetic, total
ENERGY_FILE_HEADER_DTYPE = np.dtype('<u8')
ENERGY_FILE_FRAME_DTYPE = np.dtype([
    ('time', '<f8'),
    ('potential_energy', '<f8'),
    ('kinetic_energy', '<f8'),
    ('total_energy', '<f8')
])

class EnergyWriter:
    def __init__(self, file_path: str) -> None:
        self._file_path = file_path
        self._num_frames = 0
        self._file = open(file_path, 'wb')
        self._write_header()

    def __repr__(self) -> str:
        return '<ljcluster.io.EnergyWriter %s: %d frames>' %(self._file_path, self._num_frames)

    __str__ = __repr__

    def __enter__(self):
        return self

    def __exit__(self, *arg):
        self.close()

    def _write_header(self):
        self._file.seek(0)
        self._file.write(np.array([self._num_frames], ENERGY_FILE_HEADER_DTYPE).tobytes())
        self._file.seek(0, 2)

    def write(self, time, potential_energy, kinetic_energy, total_energy):
        frame = np.array(
            [(time, potential_energy, kinetic_energy, total_energy)],
            ENERGY_FILE_FRAME_DTYPE
        )
        self._file.write(frame.tobytes())
        self._num_frames += 1
        # Keep the count valid even if the run stops before close
        self._write_header()
        self._file.flush()

    def close(self):
        if not self._file.closed:
            self._write_header()
            self._file.close()

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def num_frames(self) -> int:
        return self._num_frames
