"""
Grading rule resolution.

The increment for a POM code is resolved through an ordered list of
strategies: custom overrides, then the size system defaults, then a
heuristic suggestion from the code name. The first strategy that returns a
value wins.
"""
import math
from typing import Callable, List, Mapping, Optional
from pom_grading.config.size_systems import (
    MEASUREMENT_TYPE_SUGGESTIONS,
    SizeSystemRef,
    get_size_system,
)
from pom_grading.data.models.size_system import GradingRules

LENGTH_MARKERS = ("LENGTH", "HEIGHT")
WIDTH_MARKERS = ("WIDTH", "CHEST", "HIP")

IncrementStrategy = Callable[[str, SizeSystemRef, Optional[Mapping[str, float]]], Optional[float]]


def custom_increment(
    code: str,
    system: SizeSystemRef,
    custom_rules: Optional[Mapping[str, float]] = None
) -> Optional[float]:
    """
    Look up a user override for a POM code.

    An empty or missing override set is treated as "no overrides". A present
    value of 0 is honoured; NaN or infinite values are treated as absent.

    Args:
        code (str): POM code
        system (SizeSystemRef): Active size system (unused by this tier)
        custom_rules (Optional[Mapping[str, float]]): Sparse user overrides

    Returns:
        Optional[float]: The override, or None if the code has none
    """
    if not custom_rules:
        return None
    value = custom_rules.get(code)
    if value is None:
        return None
    value = float(value)
    # NaN and infinite overrides fall through to the next tier
    return value if math.isfinite(value) else None


def default_increment(
    code: str,
    system: SizeSystemRef,
    custom_rules: Optional[Mapping[str, float]] = None
) -> Optional[float]:
    """
    Look up the size system's built-in increment for a POM code.
    """
    return get_size_system(system).default_grading_rules.get(code)


def suggest_increment(
    code: str,
    system: SizeSystemRef,
    custom_rules: Optional[Mapping[str, float]] = None
) -> float:
    """
    Suggest an increment from the POM code name.

    Codes containing LENGTH or HEIGHT grade like a length, codes containing
    WIDTH, CHEST or HIP grade like a width, anything else gets the small
    increment. Matching is case-insensitive.

    Args:
        code (str): POM code
        system (SizeSystemRef): Active size system
        custom_rules (Optional[Mapping[str, float]]): Ignored

    Returns:
        float: The suggested increment for the system
    """
    system_key = get_size_system(system).key
    code_upper = code.upper()

    if any(marker in code_upper for marker in LENGTH_MARKERS):
        measurement_type = "length"
    elif any(marker in code_upper for marker in WIDTH_MARKERS):
        measurement_type = "width"
    else:
        measurement_type = "small"

    return MEASUREMENT_TYPE_SUGGESTIONS[measurement_type][system_key]


# Resolution order, highest precedence first
GRADING_STRATEGIES: List[IncrementStrategy] = [
    custom_increment,
    default_increment,
    suggest_increment,
]


def resolve_increment(
    code: str,
    system: SizeSystemRef,
    custom_rules: Optional[Mapping[str, float]] = None
) -> float:
    """
    Resolve the per-size-step increment for a POM code.

    Args:
        code (str): POM code
        system (SizeSystemRef): Active size system key or configuration
        custom_rules (Optional[Mapping[str, float]]): Sparse user overrides

    Returns:
        float: Increment in cm per size step
    """
    for strategy in GRADING_STRATEGIES:
        increment = strategy(code, system, custom_rules)
        if increment is not None:
            return increment
    # suggest_increment always answers, so this is unreachable
    raise LookupError(f"No grading increment for {code}")


def get_default_grading_rules(system: SizeSystemRef) -> GradingRules:
    """
    Get an editable copy of a size system's default grading rules.

    Args:
        system (SizeSystemRef): Size system key or configuration

    Returns:
        GradingRules: A fresh dictionary of POM code to increment
    """
    return dict(get_size_system(system).default_grading_rules)
