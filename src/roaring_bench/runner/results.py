import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..measure import Stats


@dataclass(frozen=True)
class ResultRow:
    dataset: str
    impl: str
    bits_per_value: float
    and2by2: Stats
    or2by2: Stats
    wide_or: Stats
    contains3: Stats

    def timings(self) -> tuple[Stats, Stats, Stats, Stats]:
        return (self.and2by2, self.or2by2, self.wide_or, self.contains3)

    def to_dict(self) -> dict[str, Any]:
        return {
            "dataset": self.dataset,
            "impl": self.impl,
            # JSON has no NaN
            "bits_per_value": None if math.isnan(self.bits_per_value) else self.bits_per_value,
            "and2by2": self.and2by2.to_dict(),
            "or2by2": self.or2by2.to_dict(),
            "wideOr": self.wide_or.to_dict(),
            "contains3": self.contains3.to_dict(),
        }


@dataclass
class RunReport:
    metadata: dict[str, Any]
    rows: list[ResultRow]

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": self.metadata,
            "rows": [r.to_dict() for r in self.rows],
        }

    def save(self, output_path: Path) -> Path:
        """Write the report as JSON, creating parent directories."""
        resolved = (
            output_path if output_path.suffix == ".json" else output_path.with_suffix(".json")
        )
        resolved.parent.mkdir(parents=True, exist_ok=True)
        with resolved.open("w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
        return resolved
