"""
Application-wide configuration settings for the POM size grader.
"""
import os
from typing import Optional

# Default settings
DEFAULT_SIZE_SYSTEM = os.environ.get("POM_GRADING_DEFAULT_SYSTEM", "US")
# Unset: each system defaults to its second size
DEFAULT_BASE_SIZE: Optional[str] = os.environ.get("POM_GRADING_DEFAULT_BASE_SIZE") or None
DEFAULT_RULES_STORE = os.environ.get("POM_GRADING_RULES_STORE", "grading_rules.json")
DEFAULT_LOG_DIR: Optional[str] = os.environ.get("POM_GRADING_LOG_DIR") or None
DEFAULT_OUTPUT_DIR = None  # Will be generated based on timestamp if None

# Grading arithmetic
MIN_MEASUREMENT = 0.1  # cm, floor for any graded value
MAX_REASONABLE_INCREMENT = 10.0  # cm per size step, validation threshold

# Rule profile storage
CUSTOM_RULES_KEY_PREFIX = "custom-grading-rules-"

# Export layout
SIZE_CHARTS_DIR = "size-charts"
PROJECT_SUMMARY_FILE = "project-summary.txt"
COMBINED_CHART_FILE = "combined-size-charts.csv"
