"""Tests for the metrics store."""

import json

import pytest

from awair.lib.config import MetricName
from awair.lib.metrics import MetricsStore, full_metric_name
from awair.poller.models import AirData

DEVICE = "http://awair-a.local/air-data/latest"


class TestFullMetricName:
    """Tests for exposed metric names."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            (MetricName.TEMPERATURE, "awair_climate_temp_c"),
            (MetricName.HUMIDITY, "awair_climate_relative_humidity"),
            (MetricName.CO2, "awair_climate_co2_ppm"),
            (MetricName.VOC, "awair_climate_voc_ppb"),
            (MetricName.PM25, "awair_climate_pm25_ug_m3"),
            (MetricName.SCORE, "awair_climate_score"),
        ],
    )
    def test_namespaced_names(self, name, expected):
        assert full_metric_name(name) == expected


class TestMetricsStore:
    """Tests for MetricsStore get/set/update."""

    def test_unset_metric_is_none(self, store):
        assert store.get(MetricName.TEMPERATURE, DEVICE) is None

    def test_set_then_get(self, store):
        store.set(MetricName.TEMPERATURE, DEVICE, 21.5)

        assert store.get(MetricName.TEMPERATURE, DEVICE) == 21.5

    def test_last_write_wins(self, store):
        store.set(MetricName.SCORE, DEVICE, 80)
        store.set(MetricName.SCORE, DEVICE, 92)

        assert store.get(MetricName.SCORE, DEVICE) == 92.0

    def test_integers_stored_as_float(self, store):
        store.set(MetricName.CO2, DEVICE, 612)

        value = store.get(MetricName.CO2, DEVICE)
        assert isinstance(value, float)
        assert value == 612.0

    def test_devices_are_independent(self, store):
        store.set(MetricName.TEMPERATURE, DEVICE, 21.5)
        store.set(MetricName.TEMPERATURE, "http://other", 18.0)

        assert store.get(MetricName.TEMPERATURE, DEVICE) == 21.5
        assert store.get(MetricName.TEMPERATURE, "http://other") == 18.0

    def test_stores_do_not_share_state(self):
        first = MetricsStore()
        second = MetricsStore()

        first.set(MetricName.TEMPERATURE, DEVICE, 21.5)

        assert second.get(MetricName.TEMPERATURE, DEVICE) is None

    def test_update_sets_six_metrics(self, store, air_data):
        store.update(DEVICE, AirData.model_validate_json(json.dumps(air_data)))

        assert store.get(MetricName.TEMPERATURE, DEVICE) == 21.5
        assert store.get(MetricName.HUMIDITY, DEVICE) == 40.2
        assert store.get(MetricName.CO2, DEVICE) == 612.0
        assert store.get(MetricName.VOC, DEVICE) == 110.0
        assert store.get(MetricName.PM25, DEVICE) == 8.0
        assert store.get(MetricName.SCORE, DEVICE) == 87.0

    def test_update_uses_raw_co2_not_estimate(self, store):
        store.update(DEVICE, AirData(co2=500, co2_est=900))

        assert store.get(MetricName.CO2, DEVICE) == 500.0


class TestRender:
    """Tests for the text exposition output."""

    def test_help_and_type_lines(self, store):
        output = store.render().decode()

        assert "# HELP awair_climate_temp_c The current temperature in C" in output
        assert "# TYPE awair_climate_temp_c gauge" in output
        assert "# TYPE awair_climate_score gauge" in output

    def test_no_samples_before_first_update(self, store):
        output = store.render().decode()

        assert "device_address=" not in output

    def test_samples_labelled_by_device(self, store):
        store.set(MetricName.TEMPERATURE, DEVICE, 21.5)

        output = store.render().decode()

        assert f'awair_climate_temp_c{{device_address="{DEVICE}"}} 21.5' in output

    def test_process_metrics_optional(self):
        assert "process_" not in MetricsStore().render().decode()
        with_process = MetricsStore(process_metrics=True).render().decode()
        assert "python_info" in with_process
