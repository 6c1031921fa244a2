#!/usr/bin/env python3
"""
CLI entry point for the POM Size Grader.
"""
import sys
from pom_grading.cli.grading_cli import main

if __name__ == "__main__":
    sys.exit(main())
