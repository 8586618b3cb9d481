"""
Unit tests for solver settings.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json
import math

import pytest
from pyswingarm.solver_settings import SolverSettings, DEFAULT_SETTINGS, SAG_METHODS


class TestDefaults:

    def test_default_values(self):
        s = DEFAULT_SETTINGS
        assert s.search_interval == (-math.pi / 2, math.pi / 4)
        assert s.root_tolerance == 0.001
        assert s.root_max_iterations == 100
        assert s.derivative_step == 0.0001
        assert s.degenerate_threshold == 1e-10
        assert s.golden_tolerance == 1e-8
        assert s.sag_step == 0.0005
        assert s.sag_max_iterations == 200000
        assert s.sag_method == 'scan'
        assert s.sag_method in SAG_METHODS

    def test_defaults_validate(self):
        DEFAULT_SETTINGS.validate()


class TestValidation:

    def test_empty_interval(self):
        with pytest.raises(ValueError, match="search_interval"):
            DEFAULT_SETTINGS.replace(search_interval=(0.5, -0.5)).validate()

    def test_non_positive_step(self):
        with pytest.raises(ValueError, match="sag_step"):
            DEFAULT_SETTINGS.replace(sag_step=0.0).validate()

    def test_zero_iterations(self):
        with pytest.raises(ValueError, match="root_max_iterations"):
            DEFAULT_SETTINGS.replace(root_max_iterations=0).validate()

    def test_unknown_method(self):
        with pytest.raises(ValueError, match="Unknown sag method"):
            DEFAULT_SETTINGS.replace(sag_method='euler').validate()


class TestSerialization:

    def test_round_trip(self):
        s = DEFAULT_SETTINGS.replace(search_interval=(-1.0, 1.0), sag_method='brentq')
        data = json.loads(json.dumps(s.to_dict()))
        assert data['search_interval'] == [-1.0, 1.0]
        assert SolverSettings.from_dict(data) == s

    def test_partial_dict_keeps_defaults(self):
        s = SolverSettings.from_dict({'sag_step': 0.001})
        assert s.sag_step == 0.001
        assert s.root_tolerance == DEFAULT_SETTINGS.root_tolerance

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown solver settings"):
            SolverSettings.from_dict({'timestep': 0.01})
