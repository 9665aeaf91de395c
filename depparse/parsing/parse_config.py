import math
from typing import Optional, Mapping, Any

from dataclasses import dataclass

from depparse.models.parser_factory import ParserFactory
from depparse.utils.constants import config

DEFAULT_CHUNK_SIZE = 50


@dataclass
class ParseConfig:
    # Parser type: eisner, eisner-dp, arborescence, greedy-heads, arc-standard
    algorithm: str = 'eisner'

    # Sampling
    max_samples: int = 1000
    sample_percent: Optional[float] = None

    # Cooperative scheduling
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self):
        # validates and normalizes aliases such as 'chu-liu'
        self.algorithm = ParserFactory.from_string(self.algorithm).value
        if self.max_samples < 0:
            raise ValueError(f"max_samples must be >= 0, got {self.max_samples}")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1, got {self.chunk_size}")
        if self.sample_percent is not None and not 0 < self.sample_percent <= 100:
            raise ValueError(f"sample_percent must be in (0, 100], got {self.sample_percent}")

    @classmethod
    def from_config(cls, cfg: Optional[Mapping[str, Any]] = None, **overrides: Any) -> 'ParseConfig':
        parsing = dict((cfg if cfg is not None else config).get('parsing', {}))
        parsing.update({k: v for k, v in overrides.items() if v is not None})
        return cls(
            algorithm=parsing.get('algorithm', 'eisner'),
            max_samples=parsing.get('max_samples', 1000),
            sample_percent=parsing.get('sample_percent'),
            chunk_size=parsing.get('chunk_size', DEFAULT_CHUNK_SIZE),
        )

    def sample_limit(self, available: int) -> int:
        """Number of samples to process out of ``available``."""
        limit = available
        if self.sample_percent is not None:
            limit = math.ceil(available * self.sample_percent / 100)
        return min(limit, self.max_samples)
