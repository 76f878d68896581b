# src/apriori_rules/config.py

from dataclasses import dataclass
from typing import Optional


class ConfigError(ValueError):
    """Raised when mining parameters are out of range."""


@dataclass(frozen=True)
class MiningConfig:
    """
    Parameters for one mining run. Fixed for the lifetime of the run.

      - min_support: minimum relative support, in (0, 1]
      - min_conf: minimum confidence, rules must be strictly above it
      - transaction_field / product_field: record keys (or DataFrame columns)
      - support_precision / confidence_precision: rounding of reported values
      - support_sum_pruning: skip oversized joins whose parents' summed
        relative support is below min_support
      - max_length: optional cap on itemset size (None = unbounded)
    """
    min_support: float = 0.2
    min_conf: float = 0.5
    transaction_field: str = "transaction_id"
    product_field: str = "product"
    support_precision: int = 4
    confidence_precision: int = 2
    support_sum_pruning: bool = True
    max_length: Optional[int] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not 0 < self.min_support <= 1:
            raise ConfigError(f"min_support must be in (0, 1], got {self.min_support}")
        if self.min_conf <= 0:
            raise ConfigError(f"min_conf must be positive, got {self.min_conf}")
        if self.support_precision < 0 or self.confidence_precision < 0:
            raise ConfigError("precision must be non-negative")
        if self.max_length is not None and self.max_length < 1:
            raise ConfigError(f"max_length must be at least 1, got {self.max_length}")
        if not self.transaction_field or not self.product_field:
            raise ConfigError("field names must be non-empty")
