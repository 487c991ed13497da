"""Unified configuration loader."""

from pathlib import Path

from .options import OptionsConfig
from .requirements import RequirementConfig
from .travel import TravelRuleConfig


class ConfigLoader:
    """Unified loader for all planning configuration files."""

    def __init__(self, config_dir: Path | None = None):
        """
        Initialize configuration loader.

        Args:
            config_dir: Path to directory containing configuration files.
                       Expected (all optional) files:
                       - travel-rules.json
                       - requirements.json
                       - options.json
                       Missing files fall back to defaults.
        """
        if config_dir is None:
            config_dir = Path("config")

        self.config_dir = Path(config_dir)

        self.travel = TravelRuleConfig(self._get_path("travel-rules.json"))
        self.requirements = RequirementConfig(self._get_path("requirements.json"))
        self.options = OptionsConfig(self._get_path("options.json"))

    def _get_path(self, filename: str) -> Path | None:
        """Get path to config file if it exists."""
        path = self.config_dir / filename
        return path if path.exists() else None
