"""
Tests for SimulationSettings

Verifies default values, validation messages and JSON persistence.
"""

import json
from dataclasses import FrozenInstanceError

import pytest

from config.simulation_settings import DEFAULT_SETTINGS, SimulationSettings


class TestSimulationSettings:
    """Tests for the settings dataclass"""

    def test_defaults_are_valid(self):
        is_valid, errors = SimulationSettings().validate()
        assert is_valid
        assert errors == []

    def test_default_league_shape(self):
        assert DEFAULT_SETTINGS.max_roster_size == 53
        assert DEFAULT_SETTINGS.draft_rounds == 7
        assert DEFAULT_SETTINGS.draft_class_size >= DEFAULT_SETTINGS.draft_rounds * 32

    @pytest.mark.parametrize("overrides,fragment", [
        ({'max_roster_size': 0}, "max_roster_size"),
        ({'min_roster_size': 60}, "min_roster_size"),
        ({'salary_cap': 0}, "salary_cap"),
        ({'draft_rounds': 0}, "draft_rounds"),
        ({'draft_class_size': 100}, "draft_class_size"),
        ({'score_stddev': -1.0}, "score_stddev"),
        ({'overtime_chance': 1.5}, "overtime_chance"),
    ])
    def test_invalid_values_reported(self, overrides, fragment):
        is_valid, errors = SimulationSettings(**overrides).validate()
        assert not is_valid
        assert any(fragment in error for error in errors)

    def test_settings_are_immutable(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SETTINGS.salary_cap = 1

    def test_from_dict_ignores_unknown_keys(self):
        settings = SimulationSettings.from_dict({'salary_cap': 200_000_000, 'stadium': 'Lambeau'})
        assert settings.salary_cap == 200_000_000
        assert settings.max_roster_size == 53

    def test_json_round_trip(self, tmp_path):
        path = tmp_path / "settings.json"
        original = SimulationSettings(salary_cap=300_000_000, enable_free_agency=False)

        original.to_json(str(path))
        loaded = SimulationSettings.from_json(str(path))

        assert loaded == original
        assert json.loads(path.read_text())['salary_cap'] == 300_000_000
