#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : test_xyz_parser.py
created time : 2026/10/15
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import pytest, os
import numpy as np
from ljcluster.io import XYZParser
from ljcluster.error import *

cur_dir = os.path.dirname(os.path.abspath(__file__))
data_dir = os.path.join(cur_dir, 'data')

class TestXYZParser:
    def setup_method(self):
        self.parser = XYZParser(os.path.join(data_dir, 'neon.xyz'))

    def teardown_method(self):
        self.parser = None

    def test_attributes(self):
        assert self.parser.num_atoms == 3
        assert self.parser.num_frames == 1
        assert self.parser.symbols == ['NE', 'NE', 'NE']
        assert self.parser.positions.shape == (3, 3)
        assert self.parser.positions[1, 0] == pytest.approx(3.2)
        assert self.parser.positions[2, 2] == pytest.approx(-1.75)

    def test_exceptions(self, tmp_path):
        with pytest.raises(FileFormatError):
            XYZParser(os.path.join(data_dir, 'argon.inp'))

        file_path = str(tmp_path / 'empty.xyz')
        open(file_path, 'w').close()
        with pytest.raises(FileFormatError):
            XYZParser(file_path)

        file_path = str(tmp_path / 'short.xyz')
        with open(file_path, 'w') as f:
            f.write('3\ncomment\nNE 0 0 0\nNE 1 1 1\n')
        with pytest.raises(ArrayDimError):
            XYZParser(file_path)

        file_path = str(tmp_path / 'long.xyz')
        with open(file_path, 'w') as f:
            f.write('2\ncomment\nNE 0 0 0\nNE 1 1 1\nNE 2 2 2\n')
        with pytest.raises(ArrayDimError):
            XYZParser(file_path)

        with pytest.raises(ArrayDimError):
            self.parser.get_positions(1)

    def test_get_positions(self, tmp_path):
        file_path = str(tmp_path / 'traj.xyz')
        with open(file_path, 'w') as f:
            for frame in range(3):
                f.write('2\nframe %d\n' %frame)
                f.write('A %d 0 0\nB 0 %d 0\n' %(frame, frame))
            f.write('\n')
        parser = XYZParser(file_path)
        assert parser.num_frames == 3
        assert parser.positions.shape == (3, 2, 3)
        assert parser.get_positions(1)[0, 0] == 1
        positions = parser.get_positions(0, 2)
        assert positions.shape == (2, 2, 3)
        assert positions[1, 1, 1] == 2
