"""
Ustawienia biblioteki bloków — czytane ze zmiennych środowiskowych (.env).
Czasy podajemy w milisekundach, tak jak Playwright.
"""
import os

from dotenv import load_dotenv

load_dotenv()

# Jak długo Element.wait_until odpytuje warunek zanim się podda
WAIT_TIMEOUT_MS: int = int(os.getenv("BLOCKS_WAIT_TIMEOUT_MS", "10000"))

# Przerwa między kolejnymi próbami
WAIT_INTERVAL_MS: int = int(os.getenv("BLOCKS_WAIT_INTERVAL_MS", "200"))
