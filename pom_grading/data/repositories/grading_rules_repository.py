"""
Repository for named custom grading rule profiles.
"""
import json
from typing import Dict, Optional
from pom_grading.config.app_config import CUSTOM_RULES_KEY_PREFIX
from pom_grading.config.size_systems import SizeSystemRef, get_size_system
from pom_grading.data.connectors.base_connector import BaseStore
from pom_grading.data.models.size_system import GradingRules
from pom_grading.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class GradingRulesRepository:
    """
    Stores custom grading rule profiles per size system.

    Each system's profiles live under the key "custom-grading-rules-<SYSTEM>"
    as a JSON object mapping profile name to GradingRules.
    """

    def __init__(self, store: BaseStore):
        """
        Initialize the repository with a key/value store.

        Args:
            store (BaseStore): The store to use
        """
        self.store = store

    @staticmethod
    def storage_key(size_system: SizeSystemRef) -> str:
        """
        Get the store key for a size system's profiles.
        """
        return f"{CUSTOM_RULES_KEY_PREFIX}{get_size_system(size_system).key}"

    def load_custom_grading_rules(self, size_system: SizeSystemRef) -> Dict[str, GradingRules]:
        """
        Load every saved profile for a size system.

        Args:
            size_system (SizeSystemRef): Size system key or configuration

        Returns:
            Dict[str, GradingRules]: Profile name -> rules; empty when nothing is saved
        """
        raw = self.store.get(self.storage_key(size_system))
        return json.loads(raw) if raw else {}

    def save_custom_grading_rules(
        self,
        size_system: SizeSystemRef,
        rules: GradingRules,
        name: str
    ) -> None:
        """
        Save a profile, replacing any existing profile with the same name.

        Args:
            size_system (SizeSystemRef): Size system key or configuration
            rules (GradingRules): POM code -> increment
            name (str): Profile name
        """
        existing = self.load_custom_grading_rules(size_system)
        existing[name] = dict(rules)
        self.store.set(self.storage_key(size_system), json.dumps(existing))
        logger.debug(f"Saved grading profile {name!r} with {len(rules)} rule(s)")

    def get_profile(self, size_system: SizeSystemRef, name: str) -> Optional[GradingRules]:
        """
        Get a single profile by name, or None if it was never saved.
        """
        return self.load_custom_grading_rules(size_system).get(name)

    def delete_profile(self, size_system: SizeSystemRef, name: str) -> bool:
        """
        Delete a profile.

        Returns:
            bool: True if the profile existed, False otherwise
        """
        existing = self.load_custom_grading_rules(size_system)
        if name not in existing:
            return False

        del existing[name]
        key = self.storage_key(size_system)
        if existing:
            self.store.set(key, json.dumps(existing))
        else:
            self.store.delete(key)
        return True
