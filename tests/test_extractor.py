"""Unit tests for title, content and image candidate extraction."""

from docs_markdown.crawler.extractor import AssetExtractor, first_srcset_url, parse_html
from tests.helpers import page_html

PAGE_URL = "https://docs.example.com/main/guides/setup"


def extract_images(body: str):
    extractor = AssetExtractor()
    return extractor.extract_images(parse_html(page_html(body)), PAGE_URL)


class TestImageResolution:
    """Tests for the src / data-src / srcset fallback chain."""

    def test_src_wins(self):
        """Test that src is preferred over data-src and srcset."""
        candidates = extract_images(
            '<img src="https://cdn.example.com/a.png" data-src="/b.png" srcset="/c.png 1x">'
        )
        assert candidates[0].resolved_url == "https://cdn.example.com/a.png"

    def test_relative_src_resolved_against_page(self):
        """Test that relative sources are made absolute."""
        candidates = extract_images('<img src="/assets/a.png?v=1">')
        assert candidates[0].resolved_url == "https://docs.example.com/assets/a.png?v=1"
        assert candidates[0].original_src == "/assets/a.png?v=1"

    def test_data_src_used_for_lazy_images(self):
        """Test data-src fallback when src is missing."""
        candidates = extract_images('<img data-src="https://cdn.example.com/lazy.png">')
        assert candidates[0].resolved_url == "https://cdn.example.com/lazy.png"
        assert candidates[0].data_src == "https://cdn.example.com/lazy.png"

    def test_data_uri_placeholder_counts_as_missing(self):
        """Test that an inline placeholder src falls through to data-src."""
        candidates = extract_images(
            '<img src="data:image/gif;base64,R0lGOD" data-src="https://cdn.example.com/real.png">'
        )
        assert candidates[0].resolved_url == "https://cdn.example.com/real.png"

    def test_first_srcset_entry(self):
        """Test srcset fallback takes the first URL token."""
        candidates = extract_images(
            '<img srcset="https://cdn.example.com/small.png 1x, https://cdn.example.com/big.png 2x">'
        )
        assert candidates[0].resolved_url == "https://cdn.example.com/small.png"

    def test_no_source_yields_no_url(self):
        """Test that an image without any source is kept but unresolved."""
        candidates = extract_images('<img alt="nothing here">')
        assert len(candidates) == 1
        assert candidates[0].resolved_url is None

    def test_order_and_default_alt(self):
        """Test document order, indices and the default alt text."""
        candidates = extract_images(
            '<img src="/one.png" alt="First"><p><img src="/two.png"></p><img>'
        )
        assert [c.index for c in candidates] == [0, 1, 2]
        assert candidates[0].alt_text == "First"
        assert candidates[1].alt_text == "image-2"
        assert candidates[2].alt_text == "image-3"


class TestFirstSrcsetUrl:
    """Tests for srcset parsing."""

    def test_single_entry_without_descriptor(self):
        """Test a srcset holding only a URL."""
        assert first_srcset_url("/a.png") == "/a.png"

    def test_empty(self):
        """Test an empty srcset."""
        assert first_srcset_url("") == ""
        assert first_srcset_url("  ") == ""


class TestTitleExtraction:
    """Tests for page and site titles."""

    def test_first_h1(self):
        """Test that the first heading is the page title."""
        soup = parse_html(page_html("<h1>  Setup </h1><h1>Other</h1>"))
        assert AssetExtractor().extract_title(soup) == "Setup"

    def test_untitled_page(self):
        """Test the fallback page title."""
        soup = parse_html(page_html("<p>No heading</p>"))
        assert AssetExtractor().extract_title(soup) == "Untitled Page"

    def test_site_title_from_document_title(self):
        """Test that the site name precedes the first '|'."""
        soup = parse_html(page_html("", title="Othentic Docs | Introduction"))
        assert AssetExtractor().extract_site_title(soup) == "Othentic Docs"

    def test_site_title_from_header(self):
        """Test the header fallback when the document title is unusable."""
        html = (
            "<html><head><title>undefined</title></head>"
            "<body><header><h1>Site Name</h1></header></body></html>"
        )
        assert AssetExtractor().extract_site_title(parse_html(html)) == "Site Name"

    def test_site_title_default(self):
        """Test the default when nothing names the site."""
        soup = parse_html("<html><body><p>x</p></body></html>")
        assert AssetExtractor().extract_site_title(soup) == "GitBook-Documentation"


class TestContentContainer:
    """Tests for the main content container fallback."""

    def test_prefers_main(self):
        """Test that <main> is used when present."""
        soup = parse_html(page_html(
            '<nav>Menu</nav><main><p>Body</p></main><div class="main-content">Other</div>'
        ))
        content = AssetExtractor().extract_content_html(soup)
        assert "Body" in content
        assert "Menu" not in content
        assert "Other" not in content

    def test_falls_back_to_main_content_class(self):
        """Test the .main-content fallback when <main> is absent."""
        soup = parse_html(page_html(
            '<nav>Menu</nav><div class="main-content"><p>Body</p></div>'
        ))
        content = AssetExtractor().extract_content_html(soup)
        assert "Body" in content
        assert "Menu" not in content

    def test_falls_back_to_body(self):
        """Test the whole-body fallback."""
        soup = parse_html(page_html('<nav>Menu</nav><p>Body</p>'))
        content = AssetExtractor().extract_content_html(soup)
        assert "Body" in content
        assert "Menu" in content
