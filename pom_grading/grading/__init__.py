"""
Size grading engine.
"""
from pom_grading.grading.rule_resolver import (
    resolve_increment,
    custom_increment,
    default_increment,
    suggest_increment,
    get_default_grading_rules
)
from pom_grading.grading.chart_generator import generate_size_chart
from pom_grading.grading.size_mapper import map_size_across_systems
from pom_grading.grading.orchestrator import generate_all_size_charts
