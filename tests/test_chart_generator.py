import pytest

from pom_grading.config.size_systems import SIZE_SYSTEMS, UK_SIZE_SYSTEM
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.exceptions import InvalidBaseSizeError
from pom_grading.grading.chart_generator import generate_size_chart
from pom_grading.parsing.pom_parser import parse_pom_input

US_SIZES = SIZE_SYSTEMS["US"].sizes


def test_half_chest_grades_by_default_increment():
    records = [MeasurementRecord("B", "½ Chest", 54.0)]

    chart = generate_size_chart(records, "S", "US")

    assert chart["M"]["B"] == 58.0
    assert chart["XS"]["B"] == 50.0
    assert chart["S"]["B"] == 54.0


def test_end_to_end_from_text(sample_pom_text):
    records = parse_pom_input(sample_pom_text)

    chart = generate_size_chart(records, "S", "US")

    assert chart["S"]["A"] == 66.0
    assert chart["L"]["A"] == 71.0
    assert [chart[size]["A"] for size in US_SIZES] == [63.5, 66.0, 68.5, 71.0, 73.5, 76.0, 78.5]


@pytest.mark.parametrize("system_key", list(SIZE_SYSTEMS))
def test_chart_covers_every_size_for_every_base(sample_records, system_key):
    sizes = SIZE_SYSTEMS[system_key].sizes

    for base_size in sizes:
        chart = generate_size_chart(sample_records, base_size, system_key)

        assert list(chart) == list(sizes)
        assert all(set(values) == {"A", "B"} for values in chart.values())


@pytest.mark.parametrize(("system_key", "base_size"), [("US", "38"), ("EU", "M"), ("UK", "5")])
def test_invalid_base_size_raises(sample_records, system_key, base_size):
    with pytest.raises(InvalidBaseSizeError) as exc_info:
        generate_size_chart(sample_records, base_size, system_key)

    assert isinstance(exc_info.value, ValueError)
    assert str(exc_info.value) == f"Base size {base_size} not found in {system_key} system"


def test_generation_is_idempotent(sample_records):
    rules = {"A": 1.25}

    assert generate_size_chart(sample_records, "M", "US", rules) == generate_size_chart(
        sample_records, "M", "US", rules
    )


@pytest.mark.parametrize("system_key", list(SIZE_SYSTEMS))
def test_values_increase_along_size_sequence(sample_records, system_key):
    sizes = SIZE_SYSTEMS[system_key].sizes
    chart = generate_size_chart(sample_records, sizes[len(sizes) // 2], system_key)

    for code in ("A", "B"):
        values = [chart[size][code] for size in sizes]
        assert all(earlier < later for earlier, later in zip(values, values[1:]))


def test_values_are_floored_at_minimum():
    records = [MeasurementRecord("B", "½ Chest", 1.0)]

    chart = generate_size_chart(records, "XXXL", "US")

    assert chart["XS"]["B"] == 0.1
    assert chart["XXXL"]["B"] == 1.0
    assert all(values["B"] > 0 for values in chart.values())


def test_rounding_halves_go_up():
    records = [MeasurementRecord("Z", "Flat", 10.25)]

    chart = generate_size_chart(records, "M", "US", {"Z": 0})

    assert chart["M"]["Z"] == 10.3
    assert chart["XS"]["Z"] == 10.3


def test_rounding_happens_after_offset_arithmetic():
    records = [MeasurementRecord("Z", "Fine", 50.04)]

    chart = generate_size_chart(records, "XS", "US", {"Z": 0.04})

    assert chart["XS"]["Z"] == 50.0
    assert chart["S"]["Z"] == 50.1


def test_custom_rules_override_defaults(sample_records):
    chart = generate_size_chart(sample_records, "M", "US", {"B": 5.0})

    assert chart["L"]["B"] == 59.0
    assert chart["L"]["A"] == 68.5


def test_nan_custom_rule_does_not_leak_into_chart(sample_records):
    chart = generate_size_chart(sample_records, "M", "US", {"B": float("nan")})

    assert chart["L"]["B"] == 58.0
    assert chart["XS"]["B"] == 46.0


def test_unknown_codes_use_heuristic_increment():
    records = [MeasurementRecord("SLEEVE_LENGTH", "Sleeve", 60.0)]

    chart = generate_size_chart(records, "10", UK_SIZE_SYSTEM)

    assert chart["12"]["SLEEVE_LENGTH"] == 62.2


def test_repeated_code_uses_last_record():
    records = [MeasurementRecord("B", "½ Chest", 54.0), MeasurementRecord("B", "½ Chest", 60.0)]

    chart = generate_size_chart(records, "S", "US")

    assert chart["S"]["B"] == 60.0


def test_empty_records_give_empty_size_entries():
    chart = generate_size_chart([], "M", "US")

    assert chart == {size: {} for size in US_SIZES}


def test_values_are_plain_floats(sample_records):
    chart = generate_size_chart(sample_records, "S", "US")

    assert type(chart["M"]["A"]) is float
