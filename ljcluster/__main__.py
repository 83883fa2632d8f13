#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : __main__.py
created time : 2026/10/17
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import os
import sys
import time
import socket
import logging
import argparse
from ljcluster.environment import env
from ljcluster.io import InputParser
from ljcluster.simulation import Simulation
from ljcluster.utils import setup_logging, LOG_LEVELS

logger = logging.getLogger('ljcluster')

def get_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='ljcluster',
        description='Build and score a Lennard-Jones cluster described by an input file',
        epilog='Example: python -m ljcluster -i input_file -seed 1330445520 -o out.txt -log info'
    )
    parser.add_argument('-i', dest='input_file', required=True, help='input file')
    parser.add_argument('-seed', dest='seed', default=None, help='random seed string, unix time by default')
    parser.add_argument('-o', dest='output_file', default=None, help='write the report to this file instead of stdout')
    parser.add_argument(
        '-log', dest='log_level', default='warn', choices=list(LOG_LEVELS.keys()),
        help='logging level, warn by default'
    )
    return parser

def print_summary(simulation: Simulation, file):
    input_parser = simulation.input_parser
    print('Seed   = %s\n' %simulation.seed, file=file)
    print('Energy      saved each %d steps in file %s' %(
        input_parser.energy_save_frequency, input_parser.energy_file), file=file)
    print('Trajectory  saved each %d steps in file %s' %(
        input_parser.trajectory_save_frequency, input_parser.trajectory_file), file=file)
    print('Initial configuration saved in file %s' %input_parser.first_coordinate_file, file=file)
    print('Final   configuration saved in file %s\n' %input_parser.last_coordinate_file, file=file)
    print('method      = %s' %input_parser.method, file=file)
    print('natom       = %d' %input_parser.num_atoms, file=file)
    print('nsteps      = %d' %input_parser.num_steps, file=file)
    print('T           = %f' %input_parser.temperature, file=file)
    print('friction    = %f' %input_parser.friction, file=file)
    print('tstep       = %f' %input_parser.time_step, file=file)
    print('nb cuton    = %f' %input_parser.cuton, file=file)
    print('nb cutoff   = %f' %input_parser.cutoff, file=file)
    print('precision   = %s' %env.precision, file=file)
    print('platform    = %s\n' %env.platform, file=file)

def run(input_file: str, seed=None, file=sys.stdout):
    print('Welcome to ljcluster! Now initialising parameters...\n', file=file)
    print('DATE     : %s' %time.strftime('%c'), file=file)
    print('HOSTNAME : %s' %socket.gethostname(), file=file)
    print('PWD      : %s\n' %os.getcwd(), file=file)
    with Simulation(InputParser(input_file), seed=seed) as simulation:
        print_summary(simulation, file)
        simulation.build()
        simulation.save_first_coordinates('initial configuration')
        energy, confinement_energy = simulation.evaluate()
        simulation.save_energy(0.0)
        print('LJ energy          %f' %energy, file=file)
        print('Confinement energy %f' %confinement_energy, file=file)
        print('Placement rejections of last range %d' %simulation.builder.num_rejections, file=file)
        simulation.save_last_coordinates('final configuration')
    print('End of program', file=file)
    return energy, confinement_energy

def main(argv=None) -> int:
    args = get_argument_parser().parse_args(argv)
    setup_logging(args.log_level)
    output = sys.stdout if args.output_file == None else open(args.output_file, 'w')
    try:
        run(args.input_file, seed=args.seed, file=output)
    except Exception as error:
        logger.error('%s: %s', type(error).__name__, error)
        return 1
    finally:
        if output is not sys.stdout:
            output.close()
    return 0

if __name__ == '__main__':
    sys.exit(main())
