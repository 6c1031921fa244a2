"""
Validation utilities for size grading.
"""
import math
from numbers import Real
from typing import Any, List, Mapping
from pom_grading.config.app_config import MAX_REASONABLE_INCREMENT
from pom_grading.config.size_systems import SIZE_SYSTEMS


def validate_grading_rules(rules: Mapping[str, Any]) -> List[str]:
    """
    Check grading rule values and describe any that look wrong.

    Nothing is raised; callers decide whether the messages should block.

    Args:
        rules (Mapping[str, Any]): POM code to increment

    Returns:
        List[str]: Human readable warnings, empty when every rule is acceptable
    """
    errors = []

    for code, increment in rules.items():
        if isinstance(increment, bool) or not isinstance(increment, Real) or math.isnan(increment):
            errors.append(f"{code}: Must be a valid number")
        elif increment < 0:
            errors.append(f"{code}: Must be positive")
        elif increment > MAX_REASONABLE_INCREMENT:
            errors.append(f"{code}: Seems too large (>{MAX_REASONABLE_INCREMENT:g}cm per size)")

    return errors


def validate_size_system(system_key: str) -> bool:
    """
    Validate that a size system key is configured.

    Args:
        system_key (str): The key to validate (e.g., "US")

    Returns:
        bool: True if the system exists, False otherwise
    """
    return system_key in SIZE_SYSTEMS


def validate_base_size(system_key: str, base_size: str) -> bool:
    """
    Validate that a base size belongs to a size system.

    Args:
        system_key (str): The size system key
        base_size (str): The base size label

    Returns:
        bool: True if the label is one of the system's sizes, False otherwise
    """
    if not validate_size_system(system_key):
        return False
    return base_size in SIZE_SYSTEMS[system_key].sizes
