from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


DEFAULT_BOUNDARY = "\n"


@dataclass(frozen=True)
class ChainConfig:
    """Settings for building and sampling a chain.

    Attributes:
        boundary_char: Character that ends a chain. Runs of it collapse to a
            single boundary token, and the same token keys the start table.
        seed: Seed for the model's random generator. None draws fresh OS
            entropy, so output differs between runs.
    """

    boundary_char: str = DEFAULT_BOUNDARY
    seed: int | None = None

    def __post_init__(self) -> None:
        if len(self.boundary_char) != 1:
            raise ValueError("boundary_char must be a single character")
        if self.boundary_char == " ":
            raise ValueError("boundary_char cannot be the space character")
        if self.seed is not None and self.seed < 0:
            raise ValueError("seed must be >= 0")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ChainConfig":
        """Create a ChainConfig from a dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
