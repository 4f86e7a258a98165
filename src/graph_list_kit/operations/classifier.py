"""Success/failure classification of combined bulk responses.

The verdict is a substring scan of the combined response text. A marker
anywhere in the text fails the whole batch, even if it sits inside an
otherwise successful item's payload.
"""

import logging
from collections.abc import Sequence

from ..exceptions import ClassifiedFailure
from ..models.result import Failure, Success, WriteOutcome

logger = logging.getLogger(__name__)

FAILURE_MARKERS: tuple[str, ...] = ("BadRequest", "InternalServerError", "Invalid request")


class ResultClassifier:
    """Decides whether a combined bulk response counts as success.

    Args:
        markers: Substrings that mark a failure
        strict: Also fail when any recorded outcome has a non-2xx status
    """

    def __init__(self, markers: Sequence[str] = FAILURE_MARKERS, strict: bool = False) -> None:
        self.markers = tuple(markers)
        self.strict = strict

    def find_marker(self, combined_text: str) -> str | None:
        """Return the first failure marker found in the text, if any."""
        for marker in self.markers:
            if marker in combined_text:
                return marker
        return None

    def classify(
        self,
        combined_text: str,
        outcomes: Sequence[WriteOutcome] | None = None,
    ) -> Success[str] | Failure:
        """Classify combined response text.

        Args:
            combined_text: All response bodies joined together
            outcomes: Per-item outcomes, attached to the result details and
                consulted in strict mode

        Returns:
            Success or Failure, both carrying the full combined text
        """
        details = {"outcomes": list(outcomes)} if outcomes is not None else {}

        marker = self.find_marker(combined_text)
        if marker is not None:
            logger.error(f"Bulk response contains failure marker {marker!r}")
            return Failure(
                payload=combined_text,
                error=ClassifiedFailure(
                    f"Combined response contains failure marker {marker!r}",
                    marker=marker,
                    details=details,
                ),
            )

        if self.strict and outcomes:
            rejected = [o for o in outcomes if not o.is_success]
            if rejected:
                logger.error(f"{len(rejected)} bulk item(s) returned a non-2xx status")
                return Failure(
                    payload=combined_text,
                    error=ClassifiedFailure(
                        f"{len(rejected)} of {len(outcomes)} item(s) returned a non-2xx status",
                        details=details,
                    ),
                )

        return Success(value=combined_text, details=details)


def classify(combined_text: str) -> Success[str] | Failure:
    """Classify combined text with the default markers."""
    return ResultClassifier().classify(combined_text)
