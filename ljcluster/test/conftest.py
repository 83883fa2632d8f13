#!/usr/bin/env python
# -*- encoding: utf-8 -*-
'''
file : conftest.py
created time : 2026/10/12
author : ljcluster developers
copyright : (C)Copyright 2026-present, ljcluster organization
'''

import pytest

test_order = [
     'environment',
     'geometry',
     'atom_type', 'atom', 'cluster',
     'random_stream',
     'potential_engine',
     'cluster_builder',
     'input_parser',
     'xyz_parser', 'xyz_writer',
     'energy_file',
     'simulation',
     'main'
]

def pytest_collection_modifyitems(items):
     current_index = 0
     for test in test_order:
          indexes = []
          for id, item in enumerate(items):
               if 'test_'+test+'.py' in item.nodeid:
                    indexes.append(id)
          for id, index in enumerate(indexes):
               items[current_index+id], items[index] = items[index], items[current_index+id]
          current_index += len(indexes)
