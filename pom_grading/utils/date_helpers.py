"""
Date helper utilities for size chart exports.
"""
from datetime import datetime
from typing import Optional


def format_generated_date(generated_at: Optional[datetime] = None) -> str:
    """
    Format a date for the "Generated on" line of a chart export.

    Args:
        generated_at (Optional[datetime]): Moment of generation (default: now)

    Returns:
        str: Date formatted as M/D/YYYY without zero padding
    """
    moment = generated_at or datetime.now()
    return f"{moment.month}/{moment.day}/{moment.year}"


def format_generated_timestamp(generated_at: Optional[datetime] = None) -> str:
    """
    Format a full timestamp for project summaries.

    Args:
        generated_at (Optional[datetime]): Moment of generation (default: now)

    Returns:
        str: Timestamp string (M/D/YYYY, HH:MM:SS)
    """
    moment = generated_at or datetime.now()
    return f"{format_generated_date(moment)}, {moment.strftime('%H:%M:%S')}"


def get_timestamp_str() -> str:
    """
    Get a timestamp string for filenames.

    Returns:
        str: Timestamp string (YYYYMMDD_HHMMSS)
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
