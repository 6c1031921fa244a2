"""
Size chart formatting and export.
"""
from pom_grading.export.formatter import (
    format_size_chart_for_display,
    export_size_chart_as_csv,
    size_chart_to_dataframe,
    generate_project_summary
)
from pom_grading.export.csv_exporter import CSVExporter
