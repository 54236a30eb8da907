"""Search configuration.

SearchConfig bundles the four search parameters with the optional seed and
report file. It can be loaded from a JSON object using the same keys:

    {"n": 2, "genus": 2, "q_start": 2, "max_trials": 1000000, "seed": 7}
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_MAX_TRIALS = 1000000


@dataclass
class SearchConfig:
    """
    Parameters of one pointless-curve search.

    Attributes:
        n: Exponent of y, >= 2
        genus: Target genus, >= 1
        q_start: Smallest field order examined, >= 2
        max_trials: Polynomials tested per (degree, field) pair, >= 1
        seed: Seed for the random generator, None for fresh entropy
        output: File the report lines are appended to, None for stdout only
    """
    n: int
    genus: int
    q_start: int = 2
    max_trials: int = DEFAULT_MAX_TRIALS
    seed: Optional[int] = None
    output: Optional[Path] = None

    def __post_init__(self):
        if self.output is not None:
            self.output = Path(self.output)

    def validate(self) -> 'SearchConfig':
        """Check parameter ranges; returns self.

        Raises:
            ValueError: If any parameter is out of range
        """
        if self.n < 2:
            raise ValueError(f"n must be >= 2, got {self.n}")
        if self.genus < 1:
            raise ValueError(f"genus must be >= 1, got {self.genus}")
        if self.q_start < 2:
            raise ValueError(f"q_start must be >= 2, got {self.q_start}")
        if self.max_trials < 1:
            raise ValueError(f"max_trials must be >= 1, got {self.max_trials}")
        return self

    def with_overrides(self, **overrides: Any) -> 'SearchConfig':
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.output is not None:
            data["output"] = str(self.output)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchConfig':
        """Build from a mapping; unknown keys are rejected.

        Raises:
            ValueError: On unknown or missing keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        try:
            return cls(**data)
        except TypeError as e:
            raise ValueError(f"Invalid config: {e}") from e


def read_config_file(path: str) -> Dict[str, Any]:
    """Read a JSON object of config keys, possibly partial.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a JSON object
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a JSON object: {path}")
    return data
