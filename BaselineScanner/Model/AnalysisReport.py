from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from BaselineScanner.Model.MaturityTier import MaturityTier

"""A single classified feature."""
@dataclass(frozen=True)
class FeatureRecord:
    name: str
    tier: MaturityTier

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "category": self.tier.label}


"""Aggregated feature usage across all analyzed documents."""
@dataclass
class AnalysisReport:
    stats: Dict[MaturityTier, int] = field(default_factory=lambda: {tier: 0 for tier in MaturityTier})
    features: List[FeatureRecord] = field(default_factory=list)
    documents_analyzed: int = 0
    documents_failed: int = 0
    message: Optional[str] = None

    @property
    def total_features(self) -> int:
        return len(self.features)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "stats": {tier.key: self.stats.get(tier, 0) for tier in MaturityTier},
            "features": [record.to_dict() for record in self.features],
            "totalFeatures": self.total_features,
            "documentsAnalyzed": self.documents_analyzed,
            "documentsFailed": self.documents_failed,
        }
        if self.message:
            data["message"] = self.message
        return data
