"""
Assign a maturity tier to feature tokens using a ReferenceCatalog.
"""
from typing import Dict, Iterable, List

from BaselineScanner.Business.ReferenceCatalog import ReferenceCatalog
from BaselineScanner.Model.MaturityTier import MaturityTier


class FeatureClassifier:
    """Match tokens against catalog tiers in priority order; first match wins.

    A token matches a tier when any reference entry is a substring of the token
    or the token is a substring of the entry. Tokens matching no tier are
    classified Stable.
    """

    PRIORITY = (
        MaturityTier.NEWLY_AVAILABLE,
        MaturityTier.WIDELY_AVAILABLE,
        MaturityTier.EXPERIMENTAL,
        MaturityTier.STABLE,
    )

    def __init__(self, catalog: ReferenceCatalog):
        self.catalog = catalog

    @staticmethod
    def matches(token: str, entries: Iterable[str]) -> bool:
        return any(entry in token or token in entry for entry in entries)

    def classify(self, token: str) -> MaturityTier:
        for tier in self.PRIORITY:
            if self.matches(token, self.catalog.tokens_for(tier)):
                return tier
        return MaturityTier.STABLE

    def categorize(self, tokens: Iterable[str]) -> Dict[MaturityTier, List[str]]:
        """Group tokens by tier, keeping input order within each tier."""
        categorized: Dict[MaturityTier, List[str]] = {tier: [] for tier in self.PRIORITY}
        for token in tokens:
            categorized[self.classify(token)].append(token)
        return categorized
