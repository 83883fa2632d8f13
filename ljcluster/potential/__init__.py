__author__ = "ljcluster developers"
__maintainer__ = "ljcluster developers"
__copyright__ = "(C)Copyright 2026-present, ljcluster organization"
__license__ = "BSD"

# Candidate value requesting the energy of the whole cluster
ALL_ATOMS = -1
# Confinement radius in unit of sigma
DEFAULT_CONFINEMENT_CONSTANT = 4.0

from ljcluster.potential.potential_engine import PotentialEngine

__all__ = [
    'ALL_ATOMS',
    'DEFAULT_CONFINEMENT_CONSTANT',
    'PotentialEngine'
]
