"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

DEFAULT_MAX_CLUSTER_DEPTH: Final[int] = 100


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar leniency and resource bounds."""

    mode: ParseMode = ParseMode.PERMISSIVE
    allow_missing_closing_paren: bool = True
    max_cluster_depth: int = DEFAULT_MAX_CLUSTER_DEPTH

    def __post_init__(self):
        if self.max_cluster_depth < 1:
            raise ValueError("max_cluster_depth must be at least 1")

    @staticmethod
    def for_mode(mode: ParseMode, *, max_cluster_depth: int = DEFAULT_MAX_CLUSTER_DEPTH) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(
                mode=mode,
                allow_missing_closing_paren=False,
                max_cluster_depth=max_cluster_depth,
            )

        return ParserOptions(
            mode=mode,
            allow_missing_closing_paren=True,
            max_cluster_depth=max_cluster_depth,
        )
