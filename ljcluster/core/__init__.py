__author__ = "ljcluster developers"
__maintainer__ = "ljcluster developers"
__copyright__ = "(C)Copyright 2026-present, ljcluster organization"
__license__ = "BSD"

# Coordinate assigned to atoms that have not been placed yet
PLACEHOLDER_COORDINATE = 9999.9

from ljcluster.core.atom_type import AtomType, AtomTypeTable
from ljcluster.core.atom import Atom
from ljcluster.core.cluster import Cluster
from ljcluster.core.random_stream import RandomStream, derive_seed_array
from ljcluster.core.context import SimulationContext

__all__ = [
    "AtomType",
    "AtomTypeTable",
    "Atom",
    "Cluster",
    "RandomStream",
    "derive_seed_array",
    "SimulationContext",
]
