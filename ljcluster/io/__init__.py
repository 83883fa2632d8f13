__author__ = "ljcluster developers"
__maintainer__ = "ljcluster developers"
__copyright__ = "(C)Copyright 2026-present, ljcluster organization"
__license__ = "BSD"

# Input file
from ljcluster.io.input_parser import InputParser

# Coordinate file
from ljcluster.io.xyz_parser import XYZParser
from ljcluster.io.xyz_writer import XYZWriter

# Energy file
ENERGY_FILE_LAYOUT = '''Layout of binary energy file created by ljcluster
+-- uint64 number of frames
+-- frame-0
|   +-- float64 time
|   +-- float64 potential energy
|   +-- float64 kinetic energy
|   +-- float64 total energy
.
.
+-- frame-x
'''
from ljcluster.io.energy_writer import EnergyWriter
from ljcluster.io.energy_parser import EnergyParser

__all__ = [
    'InputParser',
    'XYZParser', 'XYZWriter',
    'EnergyWriter', 'EnergyParser'
]
