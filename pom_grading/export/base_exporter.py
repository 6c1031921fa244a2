"""
Base exporter interface for packaging graded size charts.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Mapping, Optional
import pandas as pd
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.data.models.size_system import SystemChart


class BaseExporter(ABC):
    """
    Abstract base class for exporters that package graded size charts.
    """

    @abstractmethod
    def export(
        self,
        size_charts: Dict[str, SystemChart],
        pom_data: List[MeasurementRecord],
        base_size_system: str,
        base_size: str,
        output_dir: str,
        custom_grading_rules: Optional[Mapping[str, float]] = None,
        original_image_name: Optional[str] = None,
        generated_at: Optional[datetime] = None
    ) -> str:
        """
        Export size charts for every system to a specified format.

        Args:
            size_charts (Dict[str, SystemChart]): Charts organized by system key
            pom_data (List[MeasurementRecord]): Records the charts were built from
            base_size_system (str): System the base size belongs to
            base_size (str): Base size label
            output_dir (str): Base directory for output files
            custom_grading_rules (Optional[Mapping[str, float]]): Overrides used for the base system
            original_image_name (Optional[str]): Name of the source garment image
            generated_at (Optional[datetime]): Generation time (default: now)

        Returns:
            str: Path to the exported data
        """
        pass

    def prepare_dataframe(
        self,
        size_charts: Dict[str, SystemChart],
        pom_data: List[MeasurementRecord]
    ) -> pd.DataFrame:
        """
        Prepare a long-form DataFrame covering every system, size and POM.

        Args:
            size_charts (Dict[str, SystemChart]): Charts organized by system key
            pom_data (List[MeasurementRecord]): Records the charts were built from

        Returns:
            pd.DataFrame: Columns SYSTEM, BASE_SIZE, SIZE, POM_CODE, DESCRIPTION, MEASUREMENT_CM
        """
        columns = ['SYSTEM', 'BASE_SIZE', 'SIZE', 'POM_CODE', 'DESCRIPTION', 'MEASUREMENT_CM']
        if not size_charts or not pom_data:
            return pd.DataFrame(columns=columns)

        data = []

        for system_key, system_chart in size_charts.items():
            for size in system_chart.system_config.sizes:
                for item in pom_data:
                    data.append({
                        'SYSTEM': system_key,
                        'BASE_SIZE': system_chart.base_size,
                        'SIZE': size,
                        'POM_CODE': item.code,
                        'DESCRIPTION': item.description,
                        'MEASUREMENT_CM': system_chart.chart[size][item.code]
                    })

        return pd.DataFrame(data, columns=columns)
