"""
Static size system configuration for the POM size grader.

The table is built once at import and exposed through read-only mappings.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Union
from pom_grading.config.app_config import DEFAULT_BASE_SIZE
from pom_grading.data.models.size_system import SizeSystem
from pom_grading.exceptions import UnknownSizeSystemError
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

# Default grade increments, cm per size step.
# Length POMs: A front length, F sleeve, G collar height, H1 pocket length,
# I cuff height, J hem height. Width POMs: B ½ chest, C ½ bottom, D ½ biceps,
# E armhole, H2 pocket width, K shoulder to shoulder, L cuff relax.
US_SIZE_SYSTEM = SizeSystem(
    key="US",
    name="US (Letter)",
    sizes=("XS", "S", "M", "L", "XL", "XXL", "XXXL"),
    size_type="letter",
    default_grading_rules={
        "A": 2.5, "F": 2.0, "G": 0.3, "H1": 1.0, "I": 0.3, "J": 0.3,
        "B": 4.0, "C": 3.0, "D": 1.5, "E": 2.0, "H2": 0.5, "K": 2.0, "L": 1.0,
    },
)

# EU has more sizes, so each step grades less
EU_SIZE_SYSTEM = SizeSystem(
    key="EU",
    name="EU (Numeric)",
    sizes=("32", "34", "36", "38", "40", "42", "44", "46", "48", "50", "52"),
    size_type="numeric",
    default_grading_rules={
        "A": 2.0, "F": 1.5, "G": 0.25, "H1": 0.8, "I": 0.25, "J": 0.25,
        "B": 3.0, "C": 2.5, "D": 1.2, "E": 1.5, "H2": 0.4, "K": 1.5, "L": 0.8,
    },
)

UK_SIZE_SYSTEM = SizeSystem(
    key="UK",
    name="UK (Numeric)",
    sizes=("4", "6", "8", "10", "12", "14", "16", "18", "20", "22", "24"),
    size_type="numeric",
    default_grading_rules={
        "A": 2.2, "F": 1.8, "G": 0.3, "H1": 0.9, "I": 0.3, "J": 0.3,
        "B": 3.5, "C": 2.8, "D": 1.3, "E": 1.8, "H2": 0.45, "K": 1.8, "L": 0.9,
    },
)

# Iteration order is US, EU, UK
SIZE_SYSTEMS: Mapping[str, SizeSystem] = MappingProxyType({
    system.key: system for system in (US_SIZE_SYSTEM, EU_SIZE_SYSTEM, UK_SIZE_SYSTEM)
})

# Fallback increments for POM codes without a default rule
MEASUREMENT_TYPE_SUGGESTIONS: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "length": MappingProxyType({"US": 2.5, "EU": 2.0, "UK": 2.2}),
    "width": MappingProxyType({"US": 4.0, "EU": 3.0, "UK": 3.5}),
    "small": MappingProxyType({"US": 0.5, "EU": 0.4, "UK": 0.45}),
})

SizeSystemRef = Union[str, SizeSystem]


def get_size_system(system: SizeSystemRef) -> SizeSystem:
    """
    Resolve a size system key (or an already resolved system) to its configuration.

    Args:
        system (SizeSystemRef): System key such as "US", or a SizeSystem

    Returns:
        SizeSystem: The configured size system

    Raises:
        UnknownSizeSystemError: If the key is not configured
    """
    if isinstance(system, SizeSystem):
        return system
    try:
        return SIZE_SYSTEMS[system]
    except KeyError:
        logger.debug(f"Lookup of unknown size system: {system!r}")
        raise UnknownSizeSystemError(system) from None


def default_base_size(system: SizeSystemRef, preferred: Optional[str] = DEFAULT_BASE_SIZE) -> str:
    """
    Pick the base size to use when none is given.

    Args:
        system (SizeSystemRef): Size system key or configuration
        preferred (Optional[str]): Configured default, used only if the system has it

    Returns:
        str: The preferred size when valid, otherwise the system's second size
    """
    system_config = get_size_system(system)
    if preferred and preferred in system_config.sizes:
        return preferred
    return system_config.sizes[1]
