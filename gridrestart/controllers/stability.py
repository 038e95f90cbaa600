"""Generation-weighted grid stability score."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from gridrestart.domain.models import GenerationAsset


@dataclass(frozen=True)
class StabilityTable:
    """Stability coefficient per normalized class label.

    Built once per run from the asset list; the first asset of each class
    sets the coefficient for the whole class.
    """

    coefficients: dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_assets(cls, assets: Iterable[GenerationAsset]) -> "StabilityTable":
        coefficients: dict[str, float] = {}
        for asset in assets:
            coefficients.setdefault(asset.type_label, asset.stability)
        return cls(coefficients)

    def coefficient(self, label: str, default: float = 1.0) -> float:
        return self.coefficients.get(label, default)

    def weighted_average(self, generated_by_type_mw: Mapping[str, float]) -> float:
        """Weighted mean of class stabilities, weighted by generated MW.

        Classes unknown to the table carry no weight. Returns 0 when nothing
        is generated.
        """
        weighted_sum = 0.0
        total_weight = 0.0
        for label, generated in generated_by_type_mw.items():
            if label not in self.coefficients:
                continue
            weighted_sum += self.coefficients[label] * generated
            total_weight += generated

        if total_weight <= 0:
            return 0.0
        return min(1.0, max(0.0, weighted_sum / total_weight))
