from unittest.mock import MagicMock

from kakeibo.classifiers.base import Classifier
from kakeibo.manager import CategorySuggester


def test_default_chain_uses_keywords() -> None:
    suggester = CategorySuggester()
    assert suggester.classify("Bus fare") == "Transport"


def test_chain_priority() -> None:
    first = MagicMock(spec=Classifier)
    second = MagicMock(spec=Classifier)
    suggester = CategorySuggester([first, second])

    # Case 1: first classifier answers
    first.classify.return_value = "Food"
    assert suggester.classify("anything") == "Food"
    second.classify.assert_not_called()

    # Case 2: first fails, second answers
    first.classify.return_value = None
    second.classify.return_value = "Utilities"
    assert suggester.classify("anything") == "Utilities"

    # Case 3: nothing matches
    second.classify.return_value = None
    assert suggester.classify("anything") is None


def test_suggest_keeps_user_choice_without_match() -> None:
    suggester = CategorySuggester()
    assert suggester.suggest("Gift for mum", current="Gifts") == "Gifts"
    assert suggester.suggest("Gift for mum") == ""
    assert suggester.suggest("Lunch", current="Gifts") == "Food"
