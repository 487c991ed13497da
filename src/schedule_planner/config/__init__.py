"""Configuration loaders for the planner."""

from .loader import ConfigLoader
from .options import OptionsConfig
from .requirements import RequirementConfig
from .travel import TravelRuleConfig

__all__ = [
    "ConfigLoader",
    "OptionsConfig",
    "RequirementConfig",
    "TravelRuleConfig",
]
