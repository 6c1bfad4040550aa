from abc import ABC, abstractmethod


class Classifier(ABC):
    @abstractmethod
    def classify(self, memo: str) -> str | None:
        """Suggest a category label for the memo, or ``None``."""
        pass
