"""Configuration classes for dagpath search engines."""

from dataclasses import dataclass


@dataclass
class SearchConfig:
    """Behaviour switches shared by all shortest-path engines."""

    # Raise ContractViolationError for edges that do not move strictly
    # forward, instead of skipping them.
    strict: bool = False


# Global configuration instance, used when an engine gets config=None
SEARCH_CONFIG = SearchConfig()
