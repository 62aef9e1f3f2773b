"""Tests for settings and catalog models."""

import pytest
from pydantic import ValidationError

from domain.models import BodyDefinition, HillDefinition, ScannerSettings


class TestScannerSettingsValidators:
    """Tests for ScannerSettings validators."""

    def test_defaults(self):
        settings = ScannerSettings()
        assert settings.initial_scan_points == 50_000
        assert settings.filter_size == 100
        assert settings.smallest_increment_deg == 0.001
        assert settings.precompute_budget_ms == 4000
        assert settings.precompute_on_startup is True
        assert settings.dump_file_name == 'ElevationScannerDump.cfg'

    @pytest.mark.parametrize('field', ['initial_scan_points', 'filter_size'])
    def test_counts_must_be_positive(self, field):
        with pytest.raises(ValidationError):
            ScannerSettings(**{field: 0})

    def test_count_from_string(self):
        """Values read as strings are coerced."""
        assert ScannerSettings(filter_size='25').filter_size == 25

    @pytest.mark.parametrize('value', [0.0, -0.5, 180.0, 500.0])
    def test_increment_out_of_range(self, value):
        with pytest.raises(ValidationError):
            ScannerSettings(smallest_increment_deg=value)

    def test_increment_in_range(self):
        assert ScannerSettings(smallest_increment_deg=0.01).smallest_increment_deg == 0.01

    def test_dump_file_name_stripped(self):
        assert ScannerSettings(dump_file_name='  out.cfg ').dump_file_name == 'out.cfg'

    def test_dump_file_name_empty(self):
        with pytest.raises(ValidationError):
            ScannerSettings(dump_file_name='   ')

    def test_unknown_keys_ignored(self):
        """Older settings files may carry keys that no longer exist."""
        settings = ScannerSettings.model_validate({'filter_size': 10, 'legacy_option': True})
        assert settings.filter_size == 10

    def test_negative_budget_allowed(self):
        assert ScannerSettings(precompute_budget_ms=-1).precompute_budget_ms == -1


class TestBodyDefinition:
    """Tests for catalog entry models."""

    def test_minimal(self):
        body = BodyDefinition(name='Mun')
        assert body.parent is None
        assert body.solid_surface is True
        assert body.hills == []

    def test_empty_name(self):
        with pytest.raises(ValidationError):
            BodyDefinition(name='')

    def test_negative_sma(self):
        with pytest.raises(ValidationError):
            BodyDefinition(name='Mun', semi_major_axis=-5.0)

    def test_hills_from_dicts(self):
        body = BodyDefinition.model_validate(
            {
                'name': 'Mun',
                'hills': [{'latitude': 1.0, 'longitude': 2.0, 'height': 3.0, 'width_deg': 4.0}],
            }
        )
        assert body.hills[0] == HillDefinition(latitude=1.0, longitude=2.0, height=3.0, width_deg=4.0)

    @pytest.mark.parametrize(
        'override',
        [{'latitude': 91.0}, {'longitude': -181.0}, {'width_deg': 0.0}],
    )
    def test_hill_bounds(self, override):
        values = {'latitude': 0.0, 'longitude': 0.0, 'height': 1.0, 'width_deg': 1.0}
        values.update(override)
        with pytest.raises(ValidationError):
            HillDefinition(**values)
