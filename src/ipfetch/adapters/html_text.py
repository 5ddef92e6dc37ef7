"""HTML body text extraction (BeautifulSoup).

`html.parser` is used on purpose: unlike html5lib/lxml it does not invent a
`<body>` element, so markup without one yields the fallback message.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString

logger = logging.getLogger(__name__)

NO_BODY_MESSAGE = "No body content found"


def extract_body_text(html: str) -> str:
    """Join the text nodes under the first `<body>` with single spaces.

    Comments, doctypes and other declarations are not text. Returns
    `NO_BODY_MESSAGE` when there is no `<body>` or the markup is rejected.
    """

    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.debug(f"HTML parser rejected markup: {exc}")
        return NO_BODY_MESSAGE

    body = soup.find("body")
    if body is None:
        return NO_BODY_MESSAGE

    texts = [
        str(node)
        for node in body.descendants
        if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
    ]
    return " ".join(texts)
