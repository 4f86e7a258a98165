"""Operations: token exchange, paginated reads, bulk writes, classification."""

from graph_list_kit.operations.bulk import BulkMutator
from graph_list_kit.operations.classifier import FAILURE_MARKERS, ResultClassifier, classify
from graph_list_kit.operations.pagination import PageFetcher, RawPage, parse_page
from graph_list_kit.operations.token import TokenClient

__all__ = [
    "TokenClient",
    "PageFetcher",
    "RawPage",
    "parse_page",
    "BulkMutator",
    "ResultClassifier",
    "FAILURE_MARKERS",
    "classify",
]
