"""
Shared constants for the documentation exporter.

Contains common configuration values used across multiple modules.
"""

# Documentation site crawled when no --url is given
DEFAULT_DOCS_URL = "https://docs.othentic.xyz/main"

# Sitemap file expected under the documentation root
SITEMAP_FILENAME = "sitemap-pages.xml"

# Root directory for all generated Markdown trees
DEFAULT_OUTPUT_ROOT = "./markdown"

# Default user agent string for all HTTP requests
# Used by both the browser renderer and image downloader
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36"
)

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30

# Default page load timeout in milliseconds (for Playwright)
DEFAULT_PAGE_TIMEOUT = 30000

# Playwright wait condition for every navigation
DEFAULT_WAIT_UNTIL = "networkidle"

# Viewport used while extracting content
DEFAULT_VIEWPORT = {"width": 1280, "height": 800}

# Chunk size for streaming image downloads to disk
DOWNLOAD_CHUNK_SIZE = 64 * 1024

# Image extensions kept as-is; anything else is saved as .png
ALLOWED_IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp")
DEFAULT_IMAGE_EXTENSION = ".png"

# Subdirectory (per category) holding downloaded images
IMAGES_DIRNAME = "images"

# Page chrome hidden before extraction (GitBook theme)
CHROME_SELECTORS = (
    # App bar
    "div.appBarClassName",
    # In-page scroll helper
    ".scroll-nojump",
    # Side navigation
    "aside.relative.group.flex.flex-col.basis-full.bg-light",
    # Search trigger
    "div.flex.md\\:w-56.grow-0.shrink-0.justify-self-end",
    # "Next page" block
    "div.flex.flex-col.md\\:flex-row.mt-6.gap-2.max-w-3xl.mx-auto.page-api-block\\:ml-0",
    # "Last updated" footer
    "div.flex.flex-row.items-center.mt-6.max-w-3xl.mx-auto.page-api-block\\:ml-0",
)

# Attribute set on every element the sanitizer hides
SANITIZED_MARKER = "data-docs-markdown-hidden"

# Content containers tried in order before falling back to <body>
CONTENT_SELECTORS = ("main", ".main-content")

# Fallback titles
UNTITLED_PAGE = "Untitled Page"
DEFAULT_SITE_TITLE = "GitBook-Documentation"
ERROR_PAGE_TITLE = "Error Extracting Content"

# Category used when a URL is too short to carry one
UNKNOWN_CATEGORY = "unknown"
