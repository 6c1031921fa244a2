"""
POM text parsing.
"""
from pom_grading.parsing.pom_parser import parse_pom_input, extract_pom_for_labeling
