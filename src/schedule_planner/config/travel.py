"""Travel rule configuration loader."""

import json
from pathlib import Path

from ..exceptions import ConfigError
from ..models import TravelRules


class TravelRuleConfig:
    """Loader for travel rules from travel-rules.json."""

    def __init__(self, rules_path: Path | None = None):
        self.rules = TravelRules.default()

        if rules_path and rules_path.exists():
            self._load(rules_path)

    def _load(self, path: Path) -> None:
        """Load travel rules from JSON."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ConfigError(str(path), "expected a travel rules object")

        try:
            self.rules = TravelRules.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(str(path), f"bad travel rule entry ({e})") from e
