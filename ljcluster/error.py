#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : error.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

class EnvironmentVariableError(Exception):
    '''This error occurs when:
    - The precision, platform or random cache size of environment is not supported

    Used in:
    - ljcluster.environment
    '''
    pass

class SeedPoorDefinedError(Exception):
    '''This error occurs when:
    - The seed string is empty
    - The seed array derived from the seed string contains only zeros

    Used in:
    - ljcluster.core.random_stream
    '''
    pass

class ParameterPoorDefinedError(Exception):
    '''This error occurs when:
    - The symbol of atom type is empty or longer than 4 characters
    - An atom type is requested from AtomTypeTable without being defined
    - Energy is evaluated while some atoms have no finite parameters
    - Atoms are randomly placed before being typed

    Used in:
    - ljcluster.core.atom_type
    - ljcluster.core.cluster
    - ljcluster.potential.potential_engine
    - ljcluster.builder.cluster_builder
    '''
    pass

class AtomIndexError(Exception):
    '''This error occurs when:
    - Candidate atom of energy evaluation is beyond the number of atoms
    - Atom range of cluster building is beyond the number of atoms

    Used in:
    - ljcluster.core.cluster
    - ljcluster.potential.potential_engine
    - ljcluster.builder.cluster_builder
    '''
    pass

class ArrayDimError(Exception):
    '''This error occurs when:
    - The dimension of position matrix does not match the number of atoms
    - XYZ file contains a different number of atoms than declared

    Used in:
    - ljcluster.core.cluster
    - ljcluster.io.xyz_parser
    - ljcluster.io.xyz_writer
    - ljcluster.simulation
    '''
    pass

class InvalidStateError(Exception):
    '''This error occurs when:
    - Center of mass is requested for an empty set of atoms
    - Energy or force is evaluated for an empty cluster

    Used in:
    - ljcluster.utils.geometry
    - ljcluster.potential.potential_engine
    '''
    pass

class DegenerateGeometryError(Exception):
    '''This error occurs when:
    - Two atoms share the same position, so that their squared distance is zero

    Used in:
    - ljcluster.potential.potential_engine
    '''
    pass

class PlacementExhaustedError(Exception):
    '''This error occurs when:
    - An atom cannot be randomly placed without steric clash within the maximum number of attempts

    Used in:
    - ljcluster.builder.cluster_builder
    '''
    pass

class FileFormatError(Exception):
    '''This error occurs when:
    - file suffix appears in an unexpected way
    - binary energy file is truncated

    Used in:
    - ljcluster.io.xyz_parser
    - ljcluster.io.xyz_writer
    - ljcluster.io.energy_parser
    '''
    pass

class InputFilePoorDefinedError(Exception):
    '''This error occurs when:
    - Unknown simulation method or boundary keyword appears in input file
    - Atoms are defined before the number of atoms
    - Atoms refer to an undefined atom type
    - A keyword is followed by a wrong number of values

    Used in:
    - ljcluster.io.input_parser
    '''
    pass
