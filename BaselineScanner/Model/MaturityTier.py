from enum import Enum


"""Browser-support maturity buckets, declared in classification priority order."""
class MaturityTier(Enum):
    NEWLY_AVAILABLE = ("newlyAvailable", "Newly Available")
    WIDELY_AVAILABLE = ("widelyAvailable", "Widely Available")
    EXPERIMENTAL = ("experimental", "Experimental")
    STABLE = ("stable", "Stable")

    def __init__(self, key: str, label: str):
        self.key = key
        self.label = label
