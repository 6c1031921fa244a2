"""
Multi-system size chart generation.
"""
from typing import Dict, List, Mapping, Optional
from pom_grading.config.size_systems import SIZE_SYSTEMS, SizeSystemRef, get_size_system
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.data.models.size_system import SystemChart
from pom_grading.grading.chart_generator import generate_size_chart
from pom_grading.grading.size_mapper import map_size_across_systems
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


def generate_all_size_charts(
    pom_data: List[MeasurementRecord],
    base_size_system: SizeSystemRef,
    base_size: str,
    custom_grading_rules: Optional[Mapping[str, float]] = None
) -> Dict[str, SystemChart]:
    """
    Generate size charts for every configured size system.

    Each system is graded from its mapped equivalent of the base size. Custom
    grading rules apply to the base system only; every other system uses its
    own defaults.

    Args:
        pom_data (List[MeasurementRecord]): Measurements for the base size
        base_size_system (SizeSystemRef): System the base size belongs to
        base_size (str): Base size label
        custom_grading_rules (Optional[Mapping[str, float]]): Overrides for the base system

    Returns:
        Dict[str, SystemChart]: System key -> chart with its configuration

    Raises:
        InvalidBaseSizeError: If base_size is not in the base system
    """
    base_system = get_size_system(base_size_system)
    result: Dict[str, SystemChart] = {}

    for system_key, system_config in SIZE_SYSTEMS.items():
        is_base_system = system_key == base_system.key
        grading_rules = custom_grading_rules if is_base_system and custom_grading_rules else None

        target_base_size = map_size_across_systems(base_size, base_system, system_config)
        chart = generate_size_chart(pom_data, target_base_size, system_config, grading_rules)

        result[system_key] = SystemChart(
            chart=chart,
            system_config=system_config,
            base_size=target_base_size
        )

    logger.debug(f"Generated charts for {len(result)} size systems from {base_system.key} {base_size}")
    return result
