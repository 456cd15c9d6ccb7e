import copy
import logging

from core.element import ElementInterface
from core.exceptions import InvalidBlockConfigError
from core.locator import Locator
from pages.block_interface import BlockInterface

logger = logging.getLogger(__name__)


class Block(BlockInterface):
    """
    Klasa bazowa dla wszystkich bloków — fragmentów strony.
    Blok jest zawężony do swojego elementu głównego i wystawia metody
    do interakcji z tą częścią strony (rozszerzenie koncepcji Page Object).

    Zagnieżdżone bloki ("rendery") deklaruje się w config:
        {'renders': {'header': {'class': 'HeaderBlock',
                                'locator': '#header',
                                'strategy': 'css selector',
                                'renders': {...}}}}

    Dostęp z jednego wątku — cache renderów nie jest chroniony lockiem.
    """

    def __init__(self, element: ElementInterface, block_factory, config: dict):
        self._root_element = element
        self.block_factory = block_factory
        self.config = config
        self.render_instances: dict[str, BlockInterface] = {}

        self._init()

    def _init(self):
        # Hook — nadpisz w klasie dziedziczącej
        pass

    def reinit_root_element(self) -> "Block":
        """Nowy uchwyt elementu głównego, żeby blok działał po przeładowaniu strony."""
        self._root_element = copy.copy(self._root_element)
        return self

    def is_visible(self) -> bool:
        return self._root_element.is_visible()

    def wait_for_element_visible(self, selector: str, strategy: str = Locator.SELECTOR_CSS) -> bool | None:
        root = self._root_element

        def _visible():
            return True if root.find(selector, strategy).is_visible() else None

        return root.wait_until(_visible)

    def wait_for_element_not_visible(self, selector: str, strategy: str = Locator.SELECTOR_CSS) -> bool | None:
        root = self._root_element

        def _not_visible():
            return True if not root.find(selector, strategy).is_visible() else None

        return root.wait_until(_not_visible)

    def _call_render(self, render_type: str, method: str, arguments: list | None = None) -> None:
        block = self.get_render_instance(render_type)
        getattr(block, method)(*(arguments or []))

    def get_render_instance(self, render_name: str) -> BlockInterface:
        """
        Zwraca blok zadeklarowany w config['renders'][render_name].
        Tworzony przy pierwszym dostępie przez fabrykę, potem brany z cache.
        """
        if render_name not in self.render_instances:
            block_meta = (self.config.get('renders') or {}).get(render_name) or {}
            class_name = block_meta.get('class')

            if not class_name:
                raise InvalidBlockConfigError(render_name, class_name)

            element = self._root_element.find(
                block_meta['locator'],
                block_meta.get('strategy', Locator.SELECTOR_CSS),
            )
            config = {'renders': block_meta.get('renders') or {}}

            logger.info(f"[{self.__class__.__name__}] Tworzę render '{render_name}' ({class_name})")
            self.render_instances[render_name] = self.block_factory.create(
                class_name,
                element=element,
                config=config,
            )

        # TODO: po przeładowaniu strony render trzyma stary element — trzeba go odświeżyć
        return self.render_instances[render_name]
