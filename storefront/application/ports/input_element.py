from abc import ABC, abstractmethod


class InputElementPort(ABC):
    """The rendered text input the search overlay is bound to."""

    @abstractmethod
    def focus(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def blur(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def set_selection(self, start: int, end: int) -> None:
        raise NotImplementedError
