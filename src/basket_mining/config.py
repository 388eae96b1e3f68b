"""Configuration models for frequent itemset and association rule mining."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

ALGORITHMS = ("apriori", "fp-growth")


class ConfigurationError(ValueError):
    """Raised when mining thresholds or the engine name are unusable."""


@dataclass
class OutputPaths:
    """Directory layout for exported mining results."""

    root: Path
    itemsets: Path = field(init=False)
    rules: Path = field(init=False)
    tree: Path = field(init=False)

    def __post_init__(self) -> None:
        self.itemsets = self.root / "itemsets.json"
        self.rules = self.root / "rules.json"
        self.tree = self.root / "fp_tree.json"
        self.root.mkdir(parents=True, exist_ok=True)


@dataclass
class MiningConfig:
    """Thresholds and engine selection for one mining run."""

    min_support: float = 0.4
    min_confidence: float = 0.6
    algorithm: str = "fp-growth"

    def validate(self) -> "MiningConfig":
        for name in ("min_support", "min_confidence"):
            value = getattr(self, name)
            if not 0.0 < value <= 1.0:
                raise ConfigurationError(f"{name} must be in (0, 1], got {value!r}")
        if self.algorithm not in ALGORITHMS:
            raise ConfigurationError(
                f"Unsupported algorithm {self.algorithm!r}; expected one of {', '.join(ALGORITHMS)}"
            )
        return self


@dataclass
class RunConfig:
    """Aggregate configuration for a command-line mining run."""

    mining: MiningConfig = field(default_factory=MiningConfig)
    output_root: Optional[Path] = None
    separator: str = ","

    @property
    def outputs(self) -> Optional[OutputPaths]:
        if self.output_root is None:
            return None
        return OutputPaths(self.output_root)
