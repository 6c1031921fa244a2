import pytest

from pom_grading.config.size_systems import SIZE_SYSTEMS
from pom_grading.data.models.size_system import SizeSystem
from pom_grading.grading.size_mapper import map_size_across_systems


@pytest.mark.parametrize("system_key", list(SIZE_SYSTEMS))
def test_same_system_returns_size_unchanged(system_key):
    for size in SIZE_SYSTEMS[system_key].sizes:
        assert map_size_across_systems(size, system_key, system_key) == size


def test_same_system_does_not_validate_size():
    assert map_size_across_systems("NOTASIZE", "US", "US") == "NOTASIZE"


@pytest.mark.parametrize(("from_system", "to_system", "expected"), [("US", "EU", "34"), ("EU", "UK", "6"), ("UK", "US", "S")])
def test_unknown_size_falls_back_to_second_target_size(from_system, to_system, expected):
    assert map_size_across_systems("NOTASIZE", from_system, to_system) == expected


@pytest.mark.parametrize(
    ("size", "from_system", "to_system", "expected"),
    [
        ("XS", "US", "EU", "32"),
        ("S", "US", "EU", "36"),
        ("M", "US", "EU", "38"),
        ("XXXL", "US", "EU", "52"),
        ("S", "US", "UK", "8"),
        ("40", "EU", "US", "M"),
        ("42", "EU", "US", "L"),
        ("14", "UK", "EU", "42"),
        ("14", "UK", "US", "L"),
        ("4", "UK", "US", "XS"),
        ("24", "UK", "US", "XXXL"),
    ],
)
def test_proportional_mapping(size, from_system, to_system, expected):
    assert map_size_across_systems(size, from_system, to_system) == expected


def test_halfway_proportion_rounds_up():
    source = SizeSystem(key="THREE", name="Three", sizes=("S", "M", "L"), size_type="letter")
    target = SizeSystem(key="TWO", name="Two", sizes=("1", "2"), size_type="numeric")

    assert map_size_across_systems("M", source, target) == "2"


def test_mapped_size_always_belongs_to_target():
    for from_key, from_system in SIZE_SYSTEMS.items():
        for to_key, to_system in SIZE_SYSTEMS.items():
            for size in from_system.sizes:
                assert map_size_across_systems(size, from_key, to_key) in to_system.sizes
