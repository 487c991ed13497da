"""Planning options configuration loader."""

import json
from pathlib import Path

from ..exceptions import ConfigError
from ..models import PlanningOptions


class OptionsConfig:
    """Loader for default planning options from options.json."""

    def __init__(self, options_path: Path | None = None):
        self.options = PlanningOptions()

        if options_path and options_path.exists():
            self._load(options_path)

    def _load(self, path: Path) -> None:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ConfigError(str(path), "expected an options object")

        try:
            self.options = PlanningOptions.from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigError(str(path), str(e)) from e
