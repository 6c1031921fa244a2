"""
Cross-system size mapping.

This is a proportional interpolation across ordered size sequences, not an
industry cross-reference table.
"""
import math
from pom_grading.config.size_systems import SizeSystemRef, get_size_system
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Index used when the source size cannot be located
FALLBACK_SIZE_INDEX = 1


def map_size_across_systems(
    size: str,
    from_system: SizeSystemRef,
    to_system: SizeSystemRef
) -> str:
    """
    Map a size from one system to the equivalent size in another system.

    Args:
        size (str): Size label in the source system
        from_system (SizeSystemRef): Source size system
        to_system (SizeSystemRef): Target size system

    Returns:
        str: Equivalent label in the target system; the target's second size
        when the label is not part of the source system
    """
    source = get_size_system(from_system)
    target = get_size_system(to_system)

    if source.key == target.key:
        return size

    from_sizes = source.sizes
    to_sizes = target.sizes

    from_index = source.index_of(size)
    if from_index == -1:
        logger.debug(f"Size {size} not in {source.key}; defaulting to {to_sizes[FALLBACK_SIZE_INDEX]}")
        return to_sizes[FALLBACK_SIZE_INDEX]

    # Halves round up
    proportion = from_index / (len(from_sizes) - 1)
    target_index = math.floor(proportion * (len(to_sizes) - 1) + 0.5)
    target_index = min(max(target_index, 0), len(to_sizes) - 1)

    return to_sizes[target_index]
