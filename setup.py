#!/usr/bin/env python3
"""
Setup script for the POM Size Grader.
"""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pom-size-grading",
    version="1.0.0",
    author="Fashion Tech Pack Team",
    description="Size grading engine turning base size POM measurements into multi-system size charts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas",
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "pom-grading=pom_grading.cli.grading_cli:main",
        ],
    },
)
