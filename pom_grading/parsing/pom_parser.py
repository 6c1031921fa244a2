"""
Point-of-Measure (POM) text parser.

Accepts free-form text in either the dashed form
"A - Front Length From Shoulder - 66" or a table form where columns are
separated by tabs or runs of two or more spaces. Parsing is best effort:
lines that cannot be read are dropped without raising.
"""
import re
from typing import List, Optional
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)

HEADER_MARKERS = ("pom code", "description")
DASH_SEPARATOR = " - "
TABLE_SEPARATOR = re.compile(r"\s{2,}|\t+")
# ASCII digits only
NON_NUMERIC_CHARS = re.compile(r"[^0-9.]")
LEADING_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")


def _is_header(line: str) -> bool:
    lowered = line.lower()
    return any(marker in lowered for marker in HEADER_MARKERS)


def _split_line(line: str) -> List[str]:
    """
    Split a line into trimmed segments using the dashed or table layout.

    Args:
        line (str): A single non-blank input line

    Returns:
        List[str]: The segments; dashed lines keep empty segments
    """
    if DASH_SEPARATOR in line:
        return [part.strip() for part in line.split(DASH_SEPARATOR)]
    return [part.strip() for part in TABLE_SEPARATOR.split(line) if part.strip()]


def parse_measurement(text: str) -> Optional[float]:
    """
    Read a positive measurement from a text cell such as "66 cm".

    Every character other than digits and "." is removed first, then the
    longest leading decimal literal is read, so "12.5.3" reads as 12.5.

    Args:
        text (str): The raw measurement cell

    Returns:
        Optional[float]: The value, or None when no positive number can be read
    """
    cleaned = NON_NUMERIC_CHARS.sub("", text)
    match = LEADING_NUMBER.match(cleaned)
    if not match:
        return None

    value = float(match.group(0))
    if value <= 0:
        return None
    return value


def parse_pom_input(pom_input: str) -> List[MeasurementRecord]:
    """
    Parse POM input text into measurement records.

    Only the first three segments of a line are read; with the dashed layout
    a description that itself contains " - " is truncated at that point.
    Duplicate codes are kept in input order.

    Args:
        pom_input (str): Raw multi-line POM text

    Returns:
        List[MeasurementRecord]: One record per valid line, in input order
    """
    records: List[MeasurementRecord] = []
    lines = [line for line in pom_input.strip().split("\n") if line.strip()]
    skipped = 0

    for line in lines:
        if _is_header(line):
            continue

        parts = _split_line(line)
        if len(parts) < 3:
            skipped += 1
            continue

        code, description, measurement_text = parts[0], parts[1], parts[2]
        measurement = parse_measurement(measurement_text)

        if code and description and measurement is not None:
            records.append(MeasurementRecord(code, description, measurement))
        else:
            skipped += 1

    if skipped:
        logger.debug(f"Dropped {skipped} unreadable POM line(s)")

    return records


def extract_pom_for_labeling(records: List[MeasurementRecord]) -> str:
    """
    Render POM codes and descriptions, without measurements, for sketch labeling.

    Args:
        records (List[MeasurementRecord]): Parsed measurement records

    Returns:
        str: One "<code> - <description>" line per record
    """
    return "\n".join(f"{record.code} - {record.description}" for record in records)
