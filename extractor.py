"""
extractor.py - Extract categories, descriptions and author for a Commons file

Categories come from the wikitext source, since the parse tree doesn't
cover [[links]]. Description and author come from the {{Information}}
template in the parse tree.
"""

from dataclasses import dataclass, field
from typing import Optional

import requests

from categories import extract_categories
from commons import fetch_revision
from errors import FetchError, ParameterNotFoundError
from parsetree import Element, parse_tree, text_content
from templates import decode_multilingual, find_parameter, find_template


@dataclass(frozen=True)
class MediaData:
    categories: list = field(default_factory=list)
    descriptions: dict = field(default_factory=dict)
    author: Optional[str] = None


def extract_media_data(source: str, tree: Element) -> MediaData:
    """
    Extract metadata from a page's wikitext and its parse tree root.

    A missing {{Information}} template, description or author leaves that
    field empty. Malformed templates and parameters without values raise.
    """
    categories = extract_categories(source)

    template = find_template(tree, 'information')
    if template is None:
        return MediaData(categories=categories)

    try:
        descriptions = decode_multilingual(find_parameter(template, 'description'))
    except ParameterNotFoundError:
        descriptions = {}

    try:
        author = text_content(find_parameter(template, 'author')).strip()
    except ParameterNotFoundError:
        author = None

    return MediaData(categories=categories, descriptions=descriptions, author=author)


def extract_from_revision(source: str, parsetree: str) -> MediaData:
    """Same as extract_media_data(), starting from the parse tree XML."""
    return extract_media_data(source, parse_tree(parsetree))


class MediaDataExtractor:
    """
    Fetch additional media data that isn't stored with the media itself.

    This covers category lists and multilingual descriptions, which may
    change as the file page gets edited.

    Warning: fetch() does synchronous network I/O.
    """

    def __init__(self, filename: str, session: requests.Session = None):
        """filename should include the 'File:' prefix."""
        self.filename = filename
        self.session = session
        self.data = MediaData()
        self.fetched = False

    @property
    def categories(self) -> list[str]:
        return self.data.categories

    @property
    def descriptions(self) -> dict[str, str]:
        return self.data.descriptions

    @property
    def author(self) -> Optional[str]:
        return self.data.author

    def fetch(self) -> MediaData:
        if self.fetched:
            raise RuntimeError("Tried to call MediaDataExtractor.fetch() again.")

        revision = fetch_revision(self.filename, session=self.session)
        if 'error' in revision:
            raise FetchError(f"Could not fetch {self.filename}: {revision['error']}")

        self.data = extract_from_revision(revision['source'], revision['parsetree'])
        self.fetched = True
        return self.data

    def fill(self, media):
        """
        Copy the fetched metadata onto a media object.

        The media object may hold stale or cached data; categories and
        descriptions are replaced, author only when one was found.
        """
        if not self.fetched:
            raise RuntimeError("Tried to call MediaDataExtractor.fill() before fetch().")

        media.categories = list(self.data.categories)
        media.descriptions = dict(self.data.descriptions)
        if self.data.author is not None:
            media.author = self.data.author
