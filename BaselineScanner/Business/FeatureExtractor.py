"""
Extract the CSS features used by a single style-sheet document.

Detection is lexical: selector, property and value text produced by tinycss2
is checked for a fixed list of markers, so unrelated constructs sharing a
substring register the same token.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Optional

import tinycss2

from BaselineScanner.Exception.ScanErrors import DocumentParseError
from BaselineScanner.Model.ExtractionResult import ExtractionResult
from BaselineScanner.Utility.CatalogConfiguration import AT_RULE_MARKERS, SELECTOR_MARKERS, VALUE_MARKERS

logger = logging.getLogger(__name__)


class FeatureExtractor:
    def __init__(self,
                 selector_markers: Optional[Mapping[str, str]] = None,
                 value_markers: Optional[Mapping[str, str]] = None,
                 at_rule_markers: Optional[Mapping[str, str]] = None):
        self.selector_markers = dict(selector_markers or SELECTOR_MARKERS)
        self.value_markers = dict(value_markers or VALUE_MARKERS)
        self.at_rule_markers = dict(at_rule_markers or AT_RULE_MARKERS)

    def extract(self, identifier: str, text: str) -> ExtractionResult:
        """Extract tokens from one document; parse failures yield an empty, failed result."""
        try:
            tokens = self.extract_tokens(text, identifier)
        except DocumentParseError as e:
            logger.warning("Skipping unparsable document %s", e)
            return ExtractionResult.failed(identifier, str(e))
        except Exception as e:
            logger.exception("Error parsing CSS document %s", identifier)
            return ExtractionResult.failed(identifier, f"{identifier}: {e}")
        return ExtractionResult(identifier=identifier, tokens=tuple(tokens))

    def extract_tokens(self, text: str, identifier: str = "<string>") -> List[str]:
        """Return distinct feature tokens in discovery order. Raises DocumentParseError."""
        rules = tinycss2.parse_stylesheet(text, skip_comments=True, skip_whitespace=True)
        found: Dict[str, None] = {}
        self._walk(rules, identifier, found, in_rule=False)
        return list(found)

    def _walk(self, nodes: Iterable, identifier: str, found: Dict[str, None], in_rule: bool) -> None:
        for node in nodes:
            if node.type == "error":
                raise DocumentParseError(identifier, node.message, node.source_line, node.source_column)
            if node.type == "qualified-rule":
                self._collect_selector(tinycss2.serialize(node.prelude), found)
                self._walk(self._parse_block(node.content), identifier, found, in_rule=True)
            elif node.type == "at-rule":
                self._collect_at_rule(node.at_keyword, found)
                if node.content is not None:
                    self._walk(self._parse_block(node.content), identifier, found, in_rule)
            elif node.type == "declaration" and in_rule:
                self._collect_declaration(node.name, tinycss2.serialize(node.value), found)

    @classmethod
    def _parse_block(cls, content: list) -> list:
        # Blocks may mix declarations with nested rules (CSS nesting, SCSS, at-rule bodies)
        return tinycss2.parse_blocks_contents(cls._strip_star_hacks(content),
                                              skip_comments=True, skip_whitespace=True)

    @staticmethod
    def _strip_star_hacks(content: list) -> list:
        """Drop the `*` of legacy IE property hacks such as `*zoom: 1`."""
        significant = [i for i, token in enumerate(content) if token.type not in ("whitespace", "comment")]
        dropped = set()
        previous = None
        for n, i in enumerate(significant):
            token = content[i]
            at_start = previous is None or previous == ";" or previous.type == "{} block"
            following = [content[j] for j in significant[n + 1:n + 3]]
            if (at_start and token == "*" and len(following) == 2
                    and following[0].type == "ident" and following[1] == ":"):
                dropped.add(i)
            previous = token
        return [token for i, token in enumerate(content) if i not in dropped]

    def _collect_selector(self, selector: str, found: Dict[str, None]) -> None:
        for marker, token in self.selector_markers.items():
            if marker in selector:
                found.setdefault(token)

    def _collect_declaration(self, prop: str, value: str, found: Dict[str, None]) -> None:
        if prop.startswith("_"):
            # `_prop` underscore hack names the same property
            prop = prop[1:]
        found.setdefault(prop)
        for marker, token in self.value_markers.items():
            if marker in value:
                found.setdefault(token)

    def _collect_at_rule(self, name: str, found: Dict[str, None]) -> None:
        token = self.at_rule_markers.get(name)
        if token:
            found.setdefault(token)
