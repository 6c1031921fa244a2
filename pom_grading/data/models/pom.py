"""
Point-of-Measure data models.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class MeasurementRecord:
    """
    One parsed Point-of-Measure line for the base size.
    """
    code: str  # Short POM identifier (e.g., "A", "H1")
    description: str  # Human readable location (e.g., "½ Chest")
    measurement: float  # Base size value in centimeters, always > 0
