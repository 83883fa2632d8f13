__author__ = "ljcluster developers"
__maintainer__ = "ljcluster developers"
__copyright__ = "(C)Copyright 2026-present, ljcluster organization"
__license__ = "BSD"

from ljcluster.utils.geometry import get_bond, get_squared_bond
from ljcluster.utils.geometry import get_center_of_mass, recentre_positions
from ljcluster.utils.logger import setup_logging, LOG_LEVELS

__all__ = [
    'get_bond', 'get_squared_bond',
    'get_center_of_mass', 'recentre_positions',
    'setup_logging', 'LOG_LEVELS'
]
