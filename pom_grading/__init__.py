"""
POM Size Grading Package.

This package turns a base size Point-of-Measure set into graded size charts
across US, EU and UK size systems.
"""
from pom_grading.main import run_grading

__version__ = "1.0.0"
