"""
Docs Markdown - export a documentation site to local Markdown files.

This package renders every page listed in a site's sitemap, converts its main
content to Markdown, and saves its images next to the Markdown files.
"""

__version__ = "1.0.0"
__author__ = "Docs Markdown Team"
