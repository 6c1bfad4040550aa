from collections.abc import Sequence

from kakeibo.classifiers.base import Classifier
from kakeibo.classifiers.keywords import KeywordClassifier
from kakeibo.logger import get_logger

logger = get_logger(__name__)


class CategorySuggester:
    """Runs classifiers in priority order and returns the first suggestion."""

    def __init__(self, classifiers: Sequence[Classifier] | None = None):
        if classifiers is None:
            classifiers = [KeywordClassifier()]
        self.classifiers: list[Classifier] = list(classifiers)

    def classify(self, memo: str) -> str | None:
        for classifier in self.classifiers:
            classifier_name = classifier.__class__.__name__
            category = classifier.classify(memo)
            if category:
                logger.debug("%s suggested '%s' for '%s'", classifier_name, category, memo[:50])
                return category
        logger.debug("No classifier matched '%s'", memo[:50])
        return None

    def suggest(self, memo: str, current: str = "") -> str:
        """Category to show in the form: the suggestion, else what the user already chose."""
        return self.classify(memo) or current
