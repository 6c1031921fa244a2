"""
Utility package for size grading.

Validation helpers live in pom_grading.utils.validation; they depend on the
size system configuration, which itself logs through this package.
"""
from pom_grading.utils.date_helpers import (
    format_generated_date,
    format_generated_timestamp,
    get_timestamp_str
)
from pom_grading.utils.logging_config import setup_logging, get_logger
