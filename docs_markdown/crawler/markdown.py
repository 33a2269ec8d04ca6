"""
HTML to Markdown conversion built on markdownify.
"""

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

from ..utils.constants import SANITIZED_MARKER
from ..utils.log import get_logger


# Direct parents of an <img> inside a heading or table cell that keep the
# image as a reference instead of its alt text
INLINE_IMAGE_PARENTS = [
    'td', 'th', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6',
    'p', 'a', 'span', 'strong', 'em', 'b', 'i', 'figure', 'picture', 'div',
]


def code_language(code) -> str:
    """
    Get the language of a <code> element from its 'language-*' class.

    Args:
        code: <code> tag

    Returns:
        Language name, or '' if the element has no language class
    """
    for class_name in code.get('class') or []:
        if class_name.startswith('language-'):
            return class_name[len('language-'):]
    return ''


class DocsMarkdownConverter(MarkdownConverter):
    """
    markdownify converter with documentation-friendly code blocks.

    A <pre> holding a <code> element becomes a fenced block tagged with the
    code's language, its text emitted verbatim.
    """

    def convert_pre(self, el, text, *args, **kwargs):
        code = el.find('code')
        if code is None:
            return super().convert_pre(el, text, *args, **kwargs)

        return f"\n```{code_language(code)}\n{code.get_text()}\n```\n\n"

    def convert_img(self, el, text, *args, **kwargs):
        # Lazy-loaded images carry their URL in data-src only
        if not el.get('src') and el.get('data-src'):
            el['src'] = el['data-src']
        return super().convert_img(el, text, *args, **kwargs)


class HtmlToMarkdown:
    """Converts a sanitized content container to a Markdown body."""

    def __init__(self, **options):
        """
        Initialize the converter.

        Args:
            **options: Extra markdownify options
        """
        options.setdefault('heading_style', ATX)
        options.setdefault('keep_inline_images_in', list(INLINE_IMAGE_PARENTS))
        self.options = options
        self.logger = get_logger("markdown")

    def convert(self, content_html: str) -> str:
        """
        Convert HTML to Markdown.

        Elements the sanitizer hid are dropped first. Content the site hides
        itself (inactive tabs, collapsed panels) is kept.

        Args:
            content_html: Inner HTML of the content container

        Returns:
            Markdown body text
        """
        soup = BeautifulSoup(content_html, 'html.parser')

        for element in soup.find_all(attrs={SANITIZED_MARKER: True}):
            element.extract()

        markdown = DocsMarkdownConverter(**self.options).convert_soup(soup)
        return markdown.strip()
