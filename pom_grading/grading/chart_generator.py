"""
Size chart generation from base size measurements.
"""
from typing import List, Mapping, Optional
import numpy as np
from pom_grading.config.app_config import MIN_MEASUREMENT
from pom_grading.config.size_systems import SizeSystemRef, get_size_system
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.data.models.size_system import SizeChart
from pom_grading.exceptions import InvalidBaseSizeError
from pom_grading.grading.rule_resolver import resolve_increment
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def round_half_up(values: np.ndarray, decimals: int = 1) -> np.ndarray:
    """
    Round to a number of decimals with halves going up, unlike np.round.

    Args:
        values (np.ndarray): Values to round
        decimals (int): Decimal places to keep

    Returns:
        np.ndarray: Rounded values
    """
    scale = 10 ** decimals
    return np.floor(values * scale + 0.5) / scale


def grade_measurement(
    base_value: float,
    offsets: np.ndarray,
    increment: float
) -> np.ndarray:
    """
    Grade one base measurement across a set of signed size-step offsets.

    Rounding happens after the offset arithmetic and the result is floored
    at MIN_MEASUREMENT.

    Args:
        base_value (float): Measurement at the base size
        offsets (np.ndarray): Size steps away from the base, one per size
        increment (float): cm per size step

    Returns:
        np.ndarray: Graded measurements aligned with offsets
    """
    adjusted = base_value + offsets * increment
    return np.maximum(MIN_MEASUREMENT, round_half_up(adjusted, 1))


def generate_size_chart(
    base_pom_data: List[MeasurementRecord],
    base_size: str,
    size_system: SizeSystemRef,
    custom_grading_rules: Optional[Mapping[str, float]] = None
) -> SizeChart:
    """
    Generate a full size chart from base size measurements.

    Every size of the system gets an entry, however far from the base it is.
    When a POM code appears more than once the later record wins.

    Args:
        base_pom_data (List[MeasurementRecord]): Measurements for the base size
        base_size (str): Label of the base size
        size_system (SizeSystemRef): Target size system key or configuration
        custom_grading_rules (Optional[Mapping[str, float]]): Sparse user overrides

    Returns:
        SizeChart: Size label -> POM code -> measurement in cm

    Raises:
        InvalidBaseSizeError: If base_size is not one of the system's sizes
    """
    system_config = get_size_system(size_system)
    sizes = system_config.sizes

    base_size_index = system_config.index_of(base_size)
    if base_size_index == -1:
        raise InvalidBaseSizeError(base_size, system_config.key)

    size_chart: SizeChart = {size: {} for size in sizes}
    offsets = np.arange(len(sizes), dtype=float) - base_size_index

    for pom_item in base_pom_data:
        increment = resolve_increment(pom_item.code, system_config, custom_grading_rules)
        graded = grade_measurement(pom_item.measurement, offsets, increment)

        for size, value in zip(sizes, graded.tolist()):
            size_chart[size][pom_item.code] = value

    logger.debug(
        f"Generated {system_config.key} chart for base size {base_size} "
        f"with {len(base_pom_data)} POM(s) across {len(sizes)} sizes"
    )
    return size_chart
