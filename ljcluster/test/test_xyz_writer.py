#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : test_xyz_writer.py
created time : 2026/10/15
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import pytest
import numpy as np
from ljcluster.io import XYZWriter, XYZParser
from ljcluster.error import *

class TestXYZWriter:
    def setup_method(self):
        self.symbols = ['AR', 'AR', 'NE']
        self.positions = np.array([
            [0, 0, 0], [1.5, -2.25, 3.125], [9999.9, 9999.9, 9999.9]
        ])

    def teardown_method(self):
        self.positions = None

    def test_attributes(self, tmp_path):
        writer = XYZWriter(str(tmp_path / 'test.xyz'), self.symbols)
        assert writer.num_atoms == 3
        assert writer.file_path.endswith('test.xyz')

    def test_exceptions(self, tmp_path):
        with pytest.raises(FileFormatError):
            XYZWriter(str(tmp_path / 'test.pdb'), self.symbols)

        writer = XYZWriter(str(tmp_path / 'test.xyz'), self.symbols)
        with pytest.raises(ArrayDimError):
            writer.write(np.ones([4, 3]))

        with pytest.raises(ArrayDimError):
            writer.write(np.ones([2, 4, 3]))

        with pytest.raises(ArrayDimError):
            writer.write(np.ones(3))

    def test_write(self, tmp_path):
        file_path = str(tmp_path / 'test.xyz')
        writer = XYZWriter(file_path, self.symbols)
        writer.write(self.positions, 'initial configuration')
        with open(file_path, 'r') as f:
            lines = f.read().splitlines()
        assert len(lines) == 5
        assert lines[0] == '3'
        assert lines[1].startswith('XYZ FILE CREATED WITH LJCLUSTER')
        assert lines[1].endswith('initial configuration')
        assert lines[3] == 'AR 1.50000000 -2.25000000 3.12500000'
        assert lines[4] == 'NE 9999.90000000 9999.90000000 9999.90000000'

        parser = XYZParser(file_path)
        assert parser.symbols == self.symbols
        assert parser.positions == pytest.approx(self.positions)

    def test_write_multiple_frames(self, tmp_path):
        file_path = str(tmp_path / 'test.xyz')
        writer = XYZWriter(file_path, self.symbols)
        writer.write(np.stack([self.positions, self.positions + 1]))
        writer.write(self.positions + 2)
        parser = XYZParser(file_path)
        assert parser.num_frames == 3
        assert parser.get_positions(2) == pytest.approx(self.positions + 2)

    def test_append_mode(self, tmp_path):
        file_path = str(tmp_path / 'test.xyz')
        XYZWriter(file_path, self.symbols).write(self.positions)
        XYZWriter(file_path, self.symbols, mode='a').write(self.positions)
        assert XYZParser(file_path).num_frames == 2
        XYZWriter(file_path, self.symbols).write(self.positions)
        assert XYZParser(file_path).num_frames == 1
