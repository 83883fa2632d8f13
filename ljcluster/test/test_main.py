#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : test_main.py
created time : 2026/10/17
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import io
import pytest
import logging
from ljcluster.__main__ import main, run, get_argument_parser
from ljcluster.io import EnergyParser, XYZParser

def write_input(tmp_path):
    file_path = str(tmp_path / 'input.inp')
    with open(file_path, 'w') as f:
        f.write(
            'METHOD LANGEVIN FRICTION 5.0 TIMESTEP 0.001\n'
            'NONBOND NOPBC NOCUT\n'
            "SAVE ENER '%s' EACH 10\n" %(tmp_path / 'ener.dat') +
            "SAVE COOR LAST XYZ '%s'\n" %(tmp_path / 'last.xyz') +
            'NATOMS 13\n'
            'PARAMS AR MASS 39.948 EPS 1.0 SIG 0.1\n'
            'ATOM 1 TO END AR COOR RANDOM\n'
        )
    return file_path

class TestMain:
    def setup_method(self):
        self.logger = logging.getLogger('ljcluster')

    def teardown_method(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
        self.logger.setLevel(logging.NOTSET)
        self.logger.propagate = True

    def test_argument_parser(self):
        args = get_argument_parser().parse_args(['-i', 'input.inp', '-seed', '12', '-log', 'info'])
        assert args.input_file == 'input.inp'
        assert args.seed == '12'
        assert args.log_level == 'info'
        assert args.output_file == None

        with pytest.raises(SystemExit):
            get_argument_parser().parse_args(['-seed', '12'])

        with pytest.raises(SystemExit):
            get_argument_parser().parse_args(['-i', 'input.inp', '-log', 'verbose'])

    def test_run(self, tmp_path):
        output = io.StringIO()
        energy, confinement_energy = run(write_input(tmp_path), seed='7', file=output)
        report = output.getvalue()
        assert 'Seed   = 7' in report
        assert 'natom       = 13' in report
        assert report.rstrip().endswith('End of program')
        parser = EnergyParser(str(tmp_path / 'ener.dat'))
        assert parser.num_frames == 1
        assert parser.potential_energies[0] == pytest.approx(energy + confinement_energy)
        assert XYZParser(str(tmp_path / 'last.xyz')).num_atoms == 13

    def test_main(self, tmp_path):
        output_file = str(tmp_path / 'out.txt')
        argv = ['-i', write_input(tmp_path), '-seed', '7', '-o', output_file, '-log', 'no']
        assert main(argv) == 0
        with open(output_file, 'r') as f:
            assert 'End of program' in f.read()

        output = io.StringIO()
        energy, _ = run(write_input(tmp_path), seed='7', file=output)
        assert ('LJ energy          %f' %energy) in output.getvalue()

    def test_main_error(self, tmp_path):
        argv = ['-i', str(tmp_path / 'missing.inp'), '-o', str(tmp_path / 'out.txt'), '-log', 'no']
        assert main(argv) == 1
