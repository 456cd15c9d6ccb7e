"""
BlockFactory — rejestr klas bloków i tworzenie renderów.
Odpowiedzialności:
  1. Mapuje nazwę klasy z config ('HeaderBlock') → klasa Pythona
  2. Tworzy instancje bloków dla Block.get_render_instance()
  3. Sprawdza config przy ładowaniu — nieznane klasy wychodzą od razu, nie w trakcie testu
"""
import logging

from core.element import ElementInterface
from core.exceptions import UnknownBlockClassError
from pages.block_interface import BlockInterface

logger = logging.getLogger(__name__)


class BlockFactory:
    def __init__(self):
        self._registry: dict[str, type[BlockInterface]] = {}

    def register(self, name: str, cls: type[BlockInterface] | None = None):
        """
        Rejestruje klasę bloku pod nazwą używaną w config.

        Bezpośrednio:
            factory.register('HeaderBlock', HeaderBlock)
        Jako dekorator:
            @factory.register('HeaderBlock')
            class HeaderBlock(Block): ...
        """
        if cls is None:
            def _decorator(block_cls):
                self.register(name, block_cls)
                return block_cls
            return _decorator

        if not (isinstance(cls, type) and issubclass(cls, BlockInterface)):
            raise TypeError(f"{cls!r} nie implementuje BlockInterface")

        if name in self._registry and self._registry[name] is not cls:
            logger.warning(f"[BlockFactory] Nadpisuję '{name}': {self._registry[name].__name__} → {cls.__name__}")

        self._registry[name] = cls
        logger.debug(f"[BlockFactory] Zarejestrowano '{name}' → {cls.__name__}")
        return cls

    def is_registered(self, name: str) -> bool:
        return name in self._registry

    def registered(self) -> dict[str, type[BlockInterface]]:
        """Zwraca kopię rejestru nazwa → klasa."""
        return dict(self._registry)

    def create(self, class_name: str, element: ElementInterface, config: dict) -> BlockInterface:
        cls = self._registry.get(class_name)
        if cls is None:
            raise UnknownBlockClassError(class_name)
        return cls(element, self, config)

    def validate(self, config: dict) -> None:
        """
        Przechodzi rekurencyjnie po config['renders'] i sprawdza czy każda
        zadeklarowana klasa jest w rejestrze.
        Render bez klasy zostawiamy — zgłosi go Block.get_render_instance().
        """
        for render_name, meta in (config.get('renders') or {}).items():
            meta = meta or {}
            class_name = meta.get('class')
            if class_name and class_name not in self._registry:
                logger.error(f"[BlockFactory] Render '{render_name}' wskazuje nieznaną klasę '{class_name}'")
                raise UnknownBlockClassError(class_name)
            self.validate({'renders': meta.get('renders') or {}})
