"""Validated configuration for a search run."""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ExtractorName = Literal["sequence", "next_hop"]


class TiePolicy(str, Enum):
    """Which predecessor is kept when two routes reach a node at equal cost."""

    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"

    def accepts(self, tentative: float, known: float) -> bool:
        """Return ``True`` when ``tentative`` should replace ``known``."""

        if self is TiePolicy.FIRST_WINS:
            return tentative < known
        return tentative <= known


class SearchConfig(BaseModel):
    """Options shared by every entry point of :mod:`pathsearch.search`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    tie_policy: TiePolicy = Field(default=TiePolicy.LAST_WINS)
    validate_weights: bool = Field(default=True)
    extractor: ExtractorName = Field(default="sequence")
    log_expansions: bool = Field(default=False)


DEFAULT_CONFIG = SearchConfig()

__all__ = ["DEFAULT_CONFIG", "ExtractorName", "SearchConfig", "TiePolicy"]
