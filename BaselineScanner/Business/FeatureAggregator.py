"""
Run extraction over a batch of documents and build the AnalysisReport.
"""
import logging
from typing import Dict, Iterable, Optional, Sequence, Tuple

from BaselineScanner.Business.FeatureClassifier import FeatureClassifier
from BaselineScanner.Business.FeatureExtractor import FeatureExtractor
from BaselineScanner.Business.ReferenceCatalog import ReferenceCatalog
from BaselineScanner.Events.event_dispatcher import EventDispatcher
from BaselineScanner.Model.AnalysisReport import AnalysisReport, FeatureRecord
from BaselineScanner.Model.ExtractionResult import ExtractionResult

logger = logging.getLogger(__name__)

NO_DOCUMENTS_MESSAGE = "No CSS files found in the repository"

Document = Tuple[str, str]


class FeatureAggregator:
    """Union per-document feature tokens and classify each distinct token once."""

    def __init__(self, catalog: ReferenceCatalog,
                 extractor: Optional[FeatureExtractor] = None,
                 dispatcher: Optional[EventDispatcher] = None):
        self.classifier = FeatureClassifier(catalog)
        self.extractor = extractor or FeatureExtractor()
        self.dispatcher = dispatcher or EventDispatcher()

    def analyze(self, documents: Sequence[Document]) -> AnalysisReport:
        if not documents:
            logger.info("No documents supplied, returning empty report")
            return AnalysisReport(message=NO_DOCUMENTS_MESSAGE)

        logger.info("Analyzing %d CSS documents", len(documents))
        results = [self.extractor.extract(identifier, text) for identifier, text in documents]
        report = self.build_report(results)
        self.dispatcher.dispatch("analysis_completed", report=report)
        return report

    def build_report(self, results: Iterable[ExtractionResult]) -> AnalysisReport:
        distinct: Dict[str, None] = {}
        analyzed = failed = 0
        for result in results:
            analyzed += 1
            if not result.ok:
                failed += 1
                self.dispatcher.dispatch("document_failed", identifier=result.identifier, error=result.error)
                continue
            for token in result.tokens:
                distinct.setdefault(token)

        categorized = self.classifier.categorize(distinct)
        report = AnalysisReport(documents_analyzed=analyzed, documents_failed=failed)
        for tier, tokens in categorized.items():
            report.stats[tier] = len(tokens)
            report.features.extend(FeatureRecord(name=token, tier=tier) for token in tokens)

        if failed:
            logger.warning("%d of %d documents could not be parsed", failed, analyzed)
        logger.info("Found %d distinct features", report.total_features)
        return report
