"""
Strategie lokatorów — jak interpretować selektor przy szukaniu elementu.
Wartości zgodne z nazwami strategii WebDrivera, tłumaczone na silniki selektorów Playwright.
"""
import json


class Locator:
    SELECTOR_CSS        = "css selector"
    SELECTOR_XPATH      = "xpath"
    SELECTOR_ID         = "id"
    SELECTOR_NAME       = "name"
    SELECTOR_CLASS_NAME = "class name"
    SELECTOR_TAG_NAME   = "tag name"
    SELECTOR_LINK_TEXT  = "link text"

    @classmethod
    def to_playwright(cls, selector: str, strategy: str = SELECTOR_CSS) -> str:
        """
        Zwraca selektor w formacie Playwright ('silnik=wartość').
        Nieznana strategia przechodzi bez zmian jako nazwa silnika.
        """
        if strategy == cls.SELECTOR_CSS:
            return f"css={selector}"
        elif strategy == cls.SELECTOR_XPATH:
            return f"xpath={selector}"
        elif strategy == cls.SELECTOR_ID:
            return f"id={selector}"
        elif strategy == cls.SELECTOR_NAME:
            return f'css=[name={json.dumps(selector)}]'
        elif strategy == cls.SELECTOR_CLASS_NAME:
            return f"css=.{selector}"
        elif strategy == cls.SELECTOR_TAG_NAME:
            return f"css={selector}"
        elif strategy == cls.SELECTOR_LINK_TEXT:
            return f'role=link[name={json.dumps(selector)} s]'
        return f"{strategy}={selector}"
