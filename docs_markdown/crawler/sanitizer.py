"""
DOM sanitizer hiding documentation-theme chrome before extraction.
"""

from typing import Sequence

from ..utils.constants import CHROME_SELECTORS, SANITIZED_MARKER
from ..utils.log import get_logger


# Runs in the page; hides and marks the first match of each selector
HIDE_ELEMENTS_SCRIPT = """
({ selectors, marker }) => {
    let hidden = 0;
    for (const selector of selectors) {
        let element = null;
        try {
            element = document.querySelector(selector);
        } catch (e) {
            continue;
        }
        if (element) {
            element.style.display = "none";
            element.setAttribute(marker, "");
            hidden += 1;
        }
    }
    return hidden;
}
"""


class DomSanitizer:
    """
    Hides known non-content elements (navigation, search, footers).

    Elements are hidden rather than removed so the page structure stays
    intact for the content extractor. A selector that no longer matches the
    site's theme is simply skipped.
    """

    def __init__(self, selectors: Sequence[str] = CHROME_SELECTORS):
        """
        Initialize the sanitizer.

        Args:
            selectors: CSS selectors of the elements to hide
        """
        self.selectors = list(selectors)
        self.logger = get_logger("sanitizer")

    async def sanitize(self, page) -> int:
        """
        Hide chrome elements in the live page.

        Args:
            page: Rendered page exposing evaluate()

        Returns:
            Number of elements hidden
        """
        try:
            hidden = await page.evaluate(
                HIDE_ELEMENTS_SCRIPT,
                {"selectors": self.selectors, "marker": SANITIZED_MARKER}
            )
        except Exception as e:
            self.logger.warning(f"Could not hide page chrome: {e}")
            return 0

        self.logger.debug(f"Hidden {hidden}/{len(self.selectors)} chrome elements")
        return int(hidden or 0)
