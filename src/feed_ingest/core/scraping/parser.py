"""HTML parsing helpers for listing pages.
"""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup


def extract_link_texts(html: str, selector: str = "td a") -> List[str]:
    """Return the text of every anchor matched by the CSS `selector`.

    - Keeps page order.
    - No deduplication and no validation: the listing is taken as is.
    - Anchors with empty text are skipped.
    """
    soup = BeautifulSoup(html, "html.parser")
    results: List[str] = []

    for a in soup.select(selector):
        text = (a.get_text() or "").strip()
        if text:
            results.append(text)

    return results
