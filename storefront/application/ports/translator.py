from abc import ABC, abstractmethod


class TranslatorPort(ABC):
    @abstractmethod
    def translate(self, key: str, **params: object) -> str:
        """Resolve a message key. Unknown keys come back unchanged."""
        raise NotImplementedError
