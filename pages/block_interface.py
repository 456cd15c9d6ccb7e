from abc import ABC, abstractmethod

from core.locator import Locator


class BlockInterface(ABC):
    """
    Zestaw możliwości każdego bloku.
    Wywołujący (strony, inne bloki) rozmawiają z blokiem tylko przez te metody.
    """

    @abstractmethod
    def is_visible(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def wait_for_element_visible(self, selector: str, strategy: str = Locator.SELECTOR_CSS) -> bool | None:
        raise NotImplementedError

    @abstractmethod
    def wait_for_element_not_visible(self, selector: str, strategy: str = Locator.SELECTOR_CSS) -> bool | None:
        raise NotImplementedError

    @abstractmethod
    def get_render_instance(self, render_name: str) -> "BlockInterface":
        raise NotImplementedError

    @abstractmethod
    def reinit_root_element(self) -> "BlockInterface":
        raise NotImplementedError
