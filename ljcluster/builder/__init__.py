__author__ = "ljcluster developers"
__maintainer__ = "ljcluster developers"
__copyright__ = "(C)Copyright 2026-present, ljcluster organization"
__license__ = "BSD"

# Building modes
PLACEHOLDER_MODE = -1
ZERO_MODE = 0
RANDOM_MODE = 1
BUILD_MODES = {
    'PLACEHOLDER': PLACEHOLDER_MODE,
    'ZERO': ZERO_MODE,
    'RANDOM': RANDOM_MODE
}

# Minimum distance between two randomly placed atoms, in unit of sigma_i + sigma_j
MIN_SEPARATION_FACTOR = 5.0
DEFAULT_MAX_ATTEMPTS = 100000

from ljcluster.builder.cluster_builder import ClusterBuilder, has_conflict

__all__ = [
    'PLACEHOLDER_MODE', 'ZERO_MODE', 'RANDOM_MODE', 'BUILD_MODES',
    'MIN_SEPARATION_FACTOR', 'DEFAULT_MAX_ATTEMPTS',
    'ClusterBuilder', 'has_conflict'
]
