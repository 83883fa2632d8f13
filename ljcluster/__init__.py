__author__ = "ljcluster developers"
__maintainer__ = "ljcluster developers"
__copyright__ = "(C)Copyright 2026-present, ljcluster organization"
__license__ = "BSD"
__version__ = "0.1.0"

# Constant
SPATIAL_DIM = 3

# Import
from ljcluster.environment import env
import ljcluster.utils as utils
import ljcluster.core as core
import ljcluster.potential as potential
import ljcluster.builder as builder
import ljcluster.io as io
from ljcluster.simulation import Simulation
