"""
Size system and size chart data models.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

# Type aliases shared across the grading engine
GradingRules = Dict[str, float]  # Key: POM code, Value: cm per size step
SizeChart = Dict[str, Dict[str, float]]  # Key: size label, Value: POM code -> cm


@dataclass(frozen=True)
class SizeSystem:
    """
    Represents a named, ordered catalog of size labels with default grading rules.
    """
    key: str  # Lookup key (e.g., "US")
    name: str  # Display name (e.g., "US (Letter)")
    sizes: Tuple[str, ...]  # Ordered labels, smallest first
    size_type: str  # "letter" or "numeric", informational only
    default_grading_rules: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the containers so the configuration table stays read-only
        object.__setattr__(self, "sizes", tuple(self.sizes))
        object.__setattr__(
            self, "default_grading_rules", MappingProxyType(dict(self.default_grading_rules))
        )

    def index_of(self, size: str) -> int:
        """
        Get the position of a size label, or -1 when the label is not in this system.
        """
        try:
            return self.sizes.index(size)
        except ValueError:
            return -1


@dataclass
class SystemChart:
    """
    A graded chart paired with the size system it was built for.
    """
    chart: SizeChart
    system_config: SizeSystem
    base_size: str


@dataclass
class ChartTable:
    """
    Display form of a size chart.
    """
    headers: List[str]
    rows: List[List[str]]
    system_name: str
