from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

"""Feature tokens found in one style-sheet document, distinct and in discovery order."""
@dataclass(frozen=True)
class ExtractionResult:
    identifier: str
    tokens: Tuple[str, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def token_set(self) -> FrozenSet[str]:
        return frozenset(self.tokens)

    @classmethod
    def failed(cls, identifier: str, error: str) -> "ExtractionResult":
        return cls(identifier=identifier, tokens=(), error=error)
