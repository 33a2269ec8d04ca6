"""
Path and URL utilities for the documentation exporter.

Provides output path planning (categories, Markdown filenames, site folder
names), local image naming, and directory management.
"""

import os
import posixpath
import re
from urllib.parse import urlparse

from .constants import (
    ALLOWED_IMAGE_EXTENSIONS,
    DEFAULT_IMAGE_EXTENSION,
    IMAGES_DIRNAME,
    UNKNOWN_CATEGORY,
)
from .log import get_logger


logger = get_logger("paths")


def strip_query(url: str) -> str:
    """
    Remove the query string from a URL.

    Args:
        url: URL, possibly carrying '?key=value' parameters

    Returns:
        Everything before the first '?'
    """
    return url.split('?', 1)[0]


def url_basename(url: str) -> str:
    """
    Get the final path segment of a URL (query string excluded).

    Args:
        url: URL to inspect

    Returns:
        Last '/'-delimited segment, possibly empty
    """
    return strip_query(url).split('/')[-1]


def extension_for(remote_url: str) -> str:
    """
    Pick the local file extension for a downloaded image.

    The extension of the URL's final path segment is lowercased and kept when
    it is one of the whitelisted image types; anything else (including no
    extension at all) becomes '.png'.

    Args:
        remote_url: Image URL

    Returns:
        Extension including the leading dot
    """
    try:
        path = urlparse(remote_url).path
    except ValueError:
        path = remote_url
    filename = path.split('/')[-1]
    extension = posixpath.splitext(filename)[1]
    extension = strip_query(extension).lower()

    if extension in ALLOWED_IMAGE_EXTENSIONS:
        return extension
    return DEFAULT_IMAGE_EXTENSION


def local_filename_for(page_sequence_number: int, image_index: int, extension: str) -> str:
    """
    Build the local filename of a page's image.

    Args:
        page_sequence_number: 1-based sequence number of the page in the crawl
        image_index: 0-based position of the image in the page's DOM order
        extension: Extension including the leading dot

    Returns:
        Filename like 'image_3_1.png'
    """
    return f"image_{page_sequence_number}_{image_index + 1}{extension}"


def markdown_image_path(filename: str) -> str:
    """Path of an image as referenced from a sibling Markdown file."""
    return f"./{IMAGES_DIRNAME}/{filename}"


def sanitize_folder_name(name: str) -> str:
    """
    Turn a site title into a folder name.

    Args:
        name: Site title (e.g. 'Othentic | Docs')

    Returns:
        Lowercase, hyphen-separated folder name
    """
    name = re.sub(r'[^a-z0-9\s-]', '', name, flags=re.IGNORECASE)
    name = re.sub(r'\s+', '-', name)
    name = re.sub(r'-+', '-', name)
    return name.lower().strip()


def categorize_url(url: str) -> str:
    """
    Derive a page's category from its URL.

    The category is the fifth '/'-delimited part of the URL, which for
    'https://host/root/<category>/page' is the first segment below the
    documentation root.

    Args:
        url: Page URL

    Returns:
        Category name, or 'unknown' if the URL is too short
    """
    parts = url.split('/')
    if len(parts) < 5:
        logger.warning(f"URL structure is incorrect: {url}")
        return UNKNOWN_CATEGORY
    return parts[4] or UNKNOWN_CATEGORY


def filename_from_url(url: str) -> str:
    """
    Get a clean Markdown base filename from a page URL.

    Args:
        url: Page URL

    Returns:
        Filename without extension ('index' for an empty path)
    """
    parsed = urlparse(url)
    parts = [part for part in parsed.path.split('/') if part]

    if not parts:
        return "index"

    return re.sub(r'[^a-z0-9]', '_', parts[-1], flags=re.IGNORECASE).lower()


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path whose parent directory should exist
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)
