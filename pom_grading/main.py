"""
Main entry point for the POM size grading application.
"""
import logging
from typing import Dict, Mapping, Optional

from pom_grading.config.app_config import (
    DEFAULT_LOG_DIR,
    DEFAULT_RULES_STORE,
    DEFAULT_SIZE_SYSTEM,
)
from pom_grading.config.size_systems import default_base_size, get_size_system
from pom_grading.data.connectors.base_connector import BaseStore
from pom_grading.data.connectors.json_file_store import JsonFileStore
from pom_grading.data.models.size_system import GradingRules, SystemChart
from pom_grading.data.repositories.grading_rules_repository import GradingRulesRepository
from pom_grading.exceptions import GradingError, InvalidBaseSizeError
from pom_grading.export.base_exporter import BaseExporter
from pom_grading.export.csv_exporter import CSVExporter
from pom_grading.grading.orchestrator import generate_all_size_charts
from pom_grading.parsing.pom_parser import parse_pom_input
from pom_grading.utils.date_helpers import get_timestamp_str
from pom_grading.utils.logging_config import setup_logging
from pom_grading.utils.validation import validate_grading_rules


class GradingApp:
    """
    Main application class for POM size grading.
    """

    def __init__(
        self,
        rules_store: Optional[BaseStore] = None,
        exporter: Optional[BaseExporter] = None,
        log_level=logging.INFO,
        log_dir: Optional[str] = DEFAULT_LOG_DIR
    ):
        """
        Initialize the application.

        Args:
            rules_store (Optional[BaseStore]): Store for grading rule profiles
            exporter (Optional[BaseExporter]): Packaging collaborator for the charts
            log_level: Logging level
            log_dir (Optional[str]): Directory for log files
        """
        # Set up logging
        self.logger = setup_logging(log_level=log_level, log_dir=log_dir)

        self.rules_repository = GradingRulesRepository(rules_store or JsonFileStore(DEFAULT_RULES_STORE))
        self.exporter = exporter or CSVExporter()

        # Default values
        self.base_size_system = DEFAULT_SIZE_SYSTEM
        self.base_size = default_base_size(self.base_size_system)
        self.custom_grading_rules: GradingRules = {}
        self.output_dir = None

    def configure(
        self,
        base_size_system: Optional[str] = None,
        base_size: Optional[str] = None,
        rules_profile: Optional[str] = None,
        custom_grading_rules: Optional[Mapping[str, float]] = None,
        output_dir: Optional[str] = None
    ) -> None:
        """
        Configure the application.

        Args:
            base_size_system (Optional[str]): Key of the base size system
            base_size (Optional[str]): Base size label
            rules_profile (Optional[str]): Saved profile to load as custom rules
            custom_grading_rules (Optional[Mapping[str, float]]): Extra overrides, applied over the profile
            output_dir (Optional[str]): Output directory for results

        Raises:
            GradingError: If the system is unknown or the profile does not exist
        """
        self.base_size_system = get_size_system(base_size_system or DEFAULT_SIZE_SYSTEM).key
        self.base_size = base_size or default_base_size(self.base_size_system)

        rules: GradingRules = {}
        if rules_profile:
            profile = self.rules_repository.get_profile(self.base_size_system, rules_profile)
            if profile is None:
                raise GradingError(
                    f"No grading profile named {rules_profile!r} for {self.base_size_system}"
                )
            rules.update(profile)
        if custom_grading_rules:
            rules.update(custom_grading_rules)
        self.custom_grading_rules = rules

        for warning in validate_grading_rules(self.custom_grading_rules):
            self.logger.warning(f"Grading rule check: {warning}")

        if output_dir:
            self.output_dir = output_dir
        else:
            # Generate default timestamped directory
            self.output_dir = f"size_charts_{get_timestamp_str()}"

    def save_profile(self, name: str) -> None:
        """
        Save the configured custom rules as a named profile for the base system.
        """
        self.rules_repository.save_custom_grading_rules(
            self.base_size_system, self.custom_grading_rules, name
        )
        self.logger.info(f"Saved grading profile {name!r} for {self.base_size_system}")

    def grade(self, pom_text: str) -> Dict[str, SystemChart]:
        """
        Parse POM text and grade it across every size system.

        Args:
            pom_text (str): Raw POM input

        Returns:
            Dict[str, SystemChart]: Charts organized by system key
        """
        pom_data = parse_pom_input(pom_text)
        self.logger.info(f"Parsed {len(pom_data)} POM measurement(s)")
        return generate_all_size_charts(
            pom_data, self.base_size_system, self.base_size, self.custom_grading_rules
        )

    def run_grading(self, pom_text: str, original_image_name: Optional[str] = None) -> str:
        """
        Run the complete grading process and export the results.

        Args:
            pom_text (str): Raw POM input
            original_image_name (Optional[str]): Name of the source garment image

        Returns:
            str: Path to the output directory

        Raises:
            InvalidBaseSizeError: If the base size is not part of the base system
        """
        self.logger.info(
            f"Starting size grading from {self.base_size_system} base size {self.base_size}"
        )

        try:
            pom_data = parse_pom_input(pom_text)
            if not pom_data:
                self.logger.warning("No valid POM lines found in input")

            size_charts = generate_all_size_charts(
                pom_data, self.base_size_system, self.base_size, self.custom_grading_rules
            )

            output_dir = self.exporter.export(
                size_charts,
                pom_data,
                self.base_size_system,
                self.base_size,
                self.output_dir,
                custom_grading_rules=self.custom_grading_rules,
                original_image_name=original_image_name
            )
        except InvalidBaseSizeError as e:
            self.logger.error(f"Cannot grade: {e}")
            raise

        self.logger.info(f"Size grading complete. Results saved in {output_dir}")
        return output_dir


def run_grading(
    pom_text: str,
    base_size_system: Optional[str] = None,
    base_size: Optional[str] = None,
    output_dir: Optional[str] = None,
    rules_profile: Optional[str] = None,
    custom_grading_rules: Optional[Mapping[str, float]] = None,
    rules_store_path: Optional[str] = None,
    exporter: Optional[BaseExporter] = None,
    log_level: int = logging.INFO
) -> str:
    """
    Run size grading with the specified parameters.

    Args:
        pom_text (str): Raw POM input
        base_size_system (Optional[str]): Key of the base size system
        base_size (Optional[str]): Base size label
        output_dir (Optional[str]): Output directory for results
        rules_profile (Optional[str]): Saved profile to use as custom rules
        custom_grading_rules (Optional[Mapping[str, float]]): Extra overrides
        rules_store_path (Optional[str]): JSON file holding saved profiles
        exporter (Optional[BaseExporter]): Packaging collaborator
        log_level (int): Logging level

    Returns:
        str: Path to the output directory
    """
    app = GradingApp(
        rules_store=JsonFileStore(rules_store_path or DEFAULT_RULES_STORE),
        exporter=exporter,
        log_level=log_level
    )
    app.configure(
        base_size_system=base_size_system,
        base_size=base_size,
        rules_profile=rules_profile,
        custom_grading_rules=custom_grading_rules,
        output_dir=output_dir
    )

    return app.run_grading(pom_text)
