"""Requirement set configuration loader."""

import json
from pathlib import Path

from ..exceptions import ConfigError
from ..requirements import RequirementSet


class RequirementConfig:
    """Loader for declared requirements from requirements.json."""

    def __init__(self, requirements_path: Path | None = None):
        self.requirement_set = RequirementSet()

        if requirements_path and requirements_path.exists():
            self._load(requirements_path)

    def _load(self, path: Path) -> None:
        """Load {"ALL": {...}, "<courseID>": {...}} from JSON."""
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict) or not all(isinstance(v, dict) for v in data.values()):
            raise ConfigError(str(path), "expected an object of requirement objects")
        self.requirement_set = RequirementSet.from_dict(data)
