"""
CSV exporter for graded size charts.
"""
from datetime import datetime
from typing import Dict, List, Mapping, Optional
import os
from pom_grading.config.app_config import (
    COMBINED_CHART_FILE,
    PROJECT_SUMMARY_FILE,
    SIZE_CHARTS_DIR,
)
from pom_grading.data.models.pom import MeasurementRecord
from pom_grading.data.models.size_system import SystemChart
from pom_grading.export.base_exporter import BaseExporter
from pom_grading.export.formatter import export_size_chart_as_csv, generate_project_summary
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class CSVExporter(BaseExporter):
    """
    Exporter that writes the project summary and per-system CSV charts to a directory.
    """

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
        Export size charts as CSV files.

        Layout under output_dir:
            project-summary.txt
            size-charts/<SYSTEM>-size-chart.csv
            size-charts/combined-size-charts.csv

        Returns:
            str: Path to the output directory
        """
        generated_at = generated_at or datetime.now()
        charts_dir = os.path.join(output_dir, SIZE_CHARTS_DIR)
        os.makedirs(charts_dir, exist_ok=True)

        summary = generate_project_summary(
            pom_data,
            base_size_system,
            base_size,
            original_image_name=original_image_name,
            custom_grading_rules=custom_grading_rules,
            generated_at=generated_at
        )
        summary_path = os.path.join(output_dir, PROJECT_SUMMARY_FILE)
        self._write_text(summary_path, summary)
        logger.info(f"Exported project summary to {summary_path}")

        for system_key, system_chart in size_charts.items():
            csv_content = export_size_chart_as_csv(
                system_chart.chart,
                pom_data,
                system_chart.system_config,
                system_chart.base_size,
                generated_at=generated_at
            )
            output_path = os.path.join(charts_dir, f"{system_key}-size-chart.csv")
            self._write_text(output_path, csv_content)
            logger.info(f"Exported {system_key} size chart to {output_path}")

        self._export_combined_csv(size_charts, pom_data, charts_dir)

        return output_dir

    def _export_combined_csv(
        self,
        size_charts: Dict[str, SystemChart],
        pom_data: List[MeasurementRecord],
        output_dir: str
    ) -> None:
        """
        Export a combined long-form CSV file with all systems.

        Args:
            size_charts (Dict[str, SystemChart]): Charts organized by system key
            pom_data (List[MeasurementRecord]): Records the charts were built from
            output_dir (str): Output directory
        """
        combined_df = self.prepare_dataframe(size_charts, pom_data)
        if combined_df.empty:
            logger.debug("No chart rows to combine; skipping combined CSV")
            return

        combined_output_path = os.path.join(output_dir, COMBINED_CHART_FILE)
        combined_df.to_csv(combined_output_path, index=False)
        logger.info(f"Exported combined size charts to {combined_output_path}")

    @staticmethod
    def _write_text(path: str, content: str) -> None:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
