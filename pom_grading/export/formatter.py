"""
Formatting of size charts for display and CSV export.
"""
from datetime import datetime
from typing import List, Mapping, Optional
import pandas as pd
from pom_grading.config.size_systems import SIZE_SYSTEMS, SizeSystemRef, get_size_system
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.data.models.size_system import ChartTable, SizeChart
from pom_grading.utils.date_helpers import format_generated_date, format_generated_timestamp


def format_number(value: float) -> str:
    """
    Render a measurement the short way: 58.0 becomes "58", 50.5 stays "50.5".
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_size_chart_for_display(
    size_chart: SizeChart,
    pom_data: List[MeasurementRecord],
    size_system: SizeSystemRef
) -> ChartTable:
    """
    Format a size chart as a table with one row per POM.

    Args:
        size_chart (SizeChart): Chart built for size_system
        pom_data (List[MeasurementRecord]): Records the chart was built from
        size_system (SizeSystemRef): The chart's size system

    Returns:
        ChartTable: Headers, rows of "<value> cm" cells, and the system name
    """
    system_config = get_size_system(size_system)
    headers = ["POM Code", "Description", *system_config.sizes]
    rows = [
        [
            item.code,
            item.description,
            *(f"{format_number(size_chart[size][item.code])} cm" for size in system_config.sizes),
        ]
        for item in pom_data
    ]

    return ChartTable(headers=headers, rows=rows, system_name=system_config.name)


def export_size_chart_as_csv(
    size_chart: SizeChart,
    pom_data: List[MeasurementRecord],
    size_system: SizeSystemRef,
    base_size: str,
    generated_at: Optional[datetime] = None
) -> str:
    """
    Export a size chart as CSV text with a short comment header.

    Cells are comma-joined as they are; no quoting is applied.

    Args:
        size_chart (SizeChart): Chart built for size_system
        pom_data (List[MeasurementRecord]): Records the chart was built from
        size_system (SizeSystemRef): The chart's size system
        base_size (str): Base size the chart was graded from
        generated_at (Optional[datetime]): Generation time (default: now)

    Returns:
        str: The CSV document
    """
    table = format_size_chart_for_display(size_chart, pom_data, size_system)

    csv_lines = [
        f"# Size Chart - {table.system_name} (Base Size: {base_size})",
        f"# Generated on {format_generated_date(generated_at)}",
        "",
        ",".join(table.headers),
        *(",".join(row) for row in table.rows),
    ]
    return "\n".join(csv_lines)


def size_chart_to_dataframe(
    size_chart: SizeChart,
    pom_data: List[MeasurementRecord],
    size_system: SizeSystemRef
) -> pd.DataFrame:
    """
    Convert a size chart to a DataFrame with numeric size columns.

    Args:
        size_chart (SizeChart): Chart built for size_system
        pom_data (List[MeasurementRecord]): Records the chart was built from
        size_system (SizeSystemRef): The chart's size system

    Returns:
        pd.DataFrame: One row per POM; "POM Code", "Description", then one column per size
    """
    system_config = get_size_system(size_system)
    columns = ["POM Code", "Description", *system_config.sizes]

    data = []
    for item in pom_data:
        row = {"POM Code": item.code, "Description": item.description}
        for size in system_config.sizes:
            row[size] = size_chart[size][item.code]
        data.append(row)

    return pd.DataFrame(data, columns=columns)


def generate_project_summary(
    pom_data: List[MeasurementRecord],
    base_size_system: SizeSystemRef,
    base_size: str,
    original_image_name: Optional[str] = None,
    custom_grading_rules: Optional[Mapping[str, float]] = None,
    generated_at: Optional[datetime] = None
) -> str:
    """
    Build the plain-text project summary shipped with exported size charts.

    Args:
        pom_data (List[MeasurementRecord]): Base size measurements
        base_size_system (SizeSystemRef): System the base size belongs to
        base_size (str): Base size label
        original_image_name (Optional[str]): Name of the source garment image
        custom_grading_rules (Optional[Mapping[str, float]]): Overrides used for the base system
        generated_at (Optional[datetime]): Generation time (default: now)

    Returns:
        str: The summary document
    """
    base_system = get_size_system(base_size_system)
    active_custom_rules = bool(custom_grading_rules)

    measurement_lines = "\n".join(
        f"{item.code} - {item.description}: {format_number(item.measurement)} cm" for item in pom_data
    )
    system_lines = "\n".join(
        f"- {system.name}: {', '.join(system.sizes)}" for system in SIZE_SYSTEMS.values()
    )

    if active_custom_rules:
        rules_note = "Custom grading rules were used for the base system."
        rule_lines = "\n".join(
            f"{code}: +{format_number(increment)}cm per size grade"
            for code, increment in custom_grading_rules.items()
        )
    else:
        rules_note = "Industry standard grading rules were used."
        rule_lines = ""

    return f"""# Fashion Technical Sketch Project Summary

## Project Details
- Generated: {format_generated_timestamp(generated_at)}
- Original Image: {original_image_name or 'Unknown'}
- Base Size System: {base_system.name}
- Base Size: {base_size}
- Custom Grading Rules: {'Yes' if active_custom_rules else 'No'}

## Point of Measure (POM) Specifications
Total Measurements: {len(pom_data)}

{measurement_lines}

## Size Systems Generated
{system_lines}

## Grading Rules Applied
{rules_note}

{rule_lines}

## File Contents
- project-summary.txt: This summary file
- size-charts/: Size charts for all systems ({', '.join(SIZE_SYSTEMS)})
"""
