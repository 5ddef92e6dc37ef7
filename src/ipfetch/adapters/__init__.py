"""Adapters: pure I/O and third-party parsers (httpx, BeautifulSoup, json)."""
