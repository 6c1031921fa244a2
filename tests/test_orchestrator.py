import pytest

from pom_grading.config.size_systems import SIZE_SYSTEMS
from pom_grading.exceptions import InvalidBaseSizeError
from pom_grading.grading.chart_generator import generate_size_chart
from pom_grading.grading.orchestrator import generate_all_size_charts


def test_charts_for_every_system(sample_records):
    charts = generate_all_size_charts(sample_records, "US", "S")

    assert list(charts) == ["US", "EU", "UK"]
    for system_key, system_chart in charts.items():
        assert system_chart.system_config is SIZE_SYSTEMS[system_key]
        assert list(system_chart.chart) == list(SIZE_SYSTEMS[system_key].sizes)


def test_base_size_is_mapped_per_system(sample_records):
    charts = generate_all_size_charts(sample_records, "US", "S")

    assert charts["US"].base_size == "S"
    assert charts["EU"].base_size == "36"
    assert charts["UK"].base_size == "8"
    for system_chart in charts.values():
        assert system_chart.chart[system_chart.base_size]["A"] == 66.0
        assert system_chart.chart[system_chart.base_size]["B"] == 54.0


def test_custom_rules_apply_to_base_system_only(sample_records):
    charts = generate_all_size_charts(sample_records, "US", "S", {"B": 10.0})

    assert charts["US"].chart["M"]["B"] == 64.0
    assert charts["EU"].chart["38"]["B"] == 57.0
    assert charts["UK"].chart["10"]["B"] == 57.5


def test_matches_single_system_generation(sample_records):
    rules = {"A": 3.0}
    charts = generate_all_size_charts(sample_records, "EU", "40", rules)

    assert charts["EU"].chart == generate_size_chart(sample_records, "40", "EU", rules)
    assert charts["US"].chart == generate_size_chart(sample_records, charts["US"].base_size, "US")
    assert charts["UK"].chart == generate_size_chart(sample_records, "12", "UK")


def test_invalid_base_size_in_base_system_raises(sample_records):
    with pytest.raises(InvalidBaseSizeError):
        generate_all_size_charts(sample_records, "US", "38")
