"""
Immutable per-tier reference data used to classify feature tokens.
"""
import json
import logging
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional

from BaselineScanner.Exception.ScanErrors import CatalogError
from BaselineScanner.Model.MaturityTier import MaturityTier
from BaselineScanner.Utility.CatalogConfiguration import DEFAULT_BASELINE_CATALOG

logger = logging.getLogger(__name__)


class ReferenceCatalog:
    """Read-only mapping from MaturityTier to a set of reference substrings.

    The catalog is validated once at construction; a structurally invalid
    catalog raises CatalogError so the failure surfaces at startup.
    """

    def __init__(self, entries: Optional[Mapping[str, Iterable[str]]] = None):
        entries = DEFAULT_BASELINE_CATALOG if entries is None else entries
        self._tokens: Mapping[MaturityTier, FrozenSet[str]] = MappingProxyType(self._validate(entries))

    @staticmethod
    def _validate(entries: Any) -> Dict[MaturityTier, FrozenSet[str]]:
        if not isinstance(entries, Mapping):
            raise CatalogError("Catalog must be a mapping of tier key to a list of tokens")
        tokens: Dict[MaturityTier, FrozenSet[str]] = {}
        for tier in MaturityTier:
            values = entries.get(tier.key)
            if values is None:
                raise CatalogError(f"Catalog is missing tier '{tier.key}'")
            if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
                raise CatalogError(f"Catalog tier '{tier.key}' must be a list of strings")
            values = list(values)
            if not values:
                raise CatalogError(f"Catalog tier '{tier.key}' is empty")
            for value in values:
                if not isinstance(value, str) or not value:
                    raise CatalogError(f"Catalog tier '{tier.key}' contains an invalid entry: {value!r}")
            tokens[tier] = frozenset(values)
        unknown = set(entries) - {tier.key for tier in MaturityTier}
        if unknown:
            logger.warning("Ignoring unknown catalog tiers: %s", ", ".join(sorted(unknown)))
        return tokens

    @classmethod
    def from_file(cls, filepath: str) -> "ReferenceCatalog":
        """Load a catalog from a JSON file shaped like DEFAULT_BASELINE_CATALOG."""
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(f"Unable to load catalog from {filepath}: {e}") from e
        logger.info("Loaded reference catalog from %s", filepath)
        return cls(entries)

    def tokens_for(self, tier: MaturityTier) -> FrozenSet[str]:
        return self._tokens[tier]
