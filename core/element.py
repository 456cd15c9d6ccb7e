"""
Element — uchwyt do elementu strony, na którym pracują bloki.
Playwright jest TYLKO tutaj. Bloki znają wyłącznie ElementInterface.
"""
import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Locator as PlaywrightLocator
from playwright.sync_api import Page

import settings
from core.locator import Locator

logger = logging.getLogger(__name__)


class ElementInterface(ABC):
    """
    Kontrakt klienta elementu, z którego korzystają bloki.
    Implementacja musi wspierać copy.copy() — kopia to niezależny uchwyt
    wskazujący ten sam element (używane po przeładowaniu strony).
    """

    @abstractmethod
    def is_visible(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find(self, selector: str, strategy: str = Locator.SELECTOR_CSS) -> "ElementInterface":
        raise NotImplementedError

    @abstractmethod
    def wait_until(self, callback: Callable[[], Any]) -> Optional[Any]:
        """
        Wywołuje callback aż zwróci wartość prawdziwą albo minie timeout.
        Zwraca tę wartość lub None po timeoucie.
        """
        raise NotImplementedError


class Element(ElementInterface):
    def __init__(
        self,
        context,
        selector: str | None = None,
        strategy: str = Locator.SELECTOR_CSS,
        timeout_ms: int | None = None,
        interval_ms: int | None = None,
    ):
        # context: Playwright Page albo Element-rodzic
        self.context = context
        self.selector = selector
        self.strategy = strategy
        self.timeout_ms = settings.WAIT_TIMEOUT_MS if timeout_ms is None else timeout_ms
        self.interval_ms = settings.WAIT_INTERVAL_MS if interval_ms is None else interval_ms
        self._locator: PlaywrightLocator | None = None

    def __copy__(self) -> "Element":
        # Nowy uchwyt, bez zapamiętanego lokatora
        return type(self)(
            self.context,
            self.selector,
            self.strategy,
            timeout_ms=self.timeout_ms,
            interval_ms=self.interval_ms,
        )

    def __repr__(self) -> str:
        return f"Element({self.strategy!r}, {self.selector!r})"

    # ── Lokator ───────────────────────────────────────────────────────────────

    @property
    def page(self) -> Page:
        if isinstance(self.context, Element):
            return self.context.page
        return self.context

    def locator(self) -> PlaywrightLocator:
        """Leniwie buduje Playwright Locator, zawężony do rodzica."""
        if self._locator is None:
            parent = self.context.locator() if isinstance(self.context, Element) else None

            if self.selector is None:
                self._locator = parent if parent is not None else self.page.locator("html")
            else:
                pw_selector = Locator.to_playwright(self.selector, self.strategy)
                scope = parent if parent is not None else self.page
                self._locator = scope.locator(pw_selector)
        return self._locator

    # ── ElementInterface ──────────────────────────────────────────────────────

    def is_visible(self) -> bool:
        # Brak elementu w DOM = niewidoczny
        return self.locator().first.is_visible()

    def find(self, selector: str, strategy: str = Locator.SELECTOR_CSS) -> "Element":
        return Element(
            self,
            selector,
            strategy,
            timeout_ms=self.timeout_ms,
            interval_ms=self.interval_ms,
        )

    def wait_until(self, callback: Callable[[], Any]) -> Optional[Any]:
        deadline = time.monotonic() + self.timeout_ms / 1000
        attempt = 0

        while True:
            attempt += 1
            try:
                result = callback()
            except PlaywrightError as e:
                logger.debug(f"[Element] {self!r} próba {attempt} nieudana: {e}")
                result = None

            if result:
                return result

            if time.monotonic() >= deadline:
                logger.warning(
                    f"[Element] {self!r} — warunek niespełniony po {self.timeout_ms} ms "
                    f"({attempt} prób)"
                )
                return None

            self.page.wait_for_timeout(self.interval_ms)

    # ── Helpers ───────────────────────────────────────────────────────────────

    def click(self):
        self.locator().first.click()

    def fill(self, value: str):
        el = self.locator().first
        el.clear()
        el.fill(value)

    def get_text(self) -> str | None:
        try:
            return (self.locator().first.inner_text(timeout=self.timeout_ms) or "").strip()
        except PlaywrightError:
            return None
