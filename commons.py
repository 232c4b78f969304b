"""
commons.py - Fetch file page revisions from Wikimedia Commons

Uses the MediaWiki API to retrieve the wikitext source of a file page
together with its preprocessor parse tree (XML), which is what the
metadata extraction works on.
"""

import os
import requests
from urllib.parse import quote

HEADERS = {
    'User-Agent': os.environ.get(
        'COMMONS_USER_AGENT',
        'CommonsMediaDataExtractor/1.0 (https://commons.wikimedia.org/wiki/Commons:API)',
    )
}

API_URL = os.environ.get('COMMONS_API_URL', 'https://commons.wikimedia.org/w/api.php')

TIMEOUT = 30


def fetch_revision(filename: str, session: requests.Session = None) -> dict:
    """
    Fetch the latest revision of a file page with its parse tree.

    Args:
        filename: page title, including the "File:" prefix
        session: optional requests session to reuse

    Returns:
        {
            'title': str,
            'source': str (wikitext),
            'parsetree': str (XML),
        }
        plus an 'error' key, with empty source and parsetree, if the
        request failed or the page has no content.
    """
    params = {
        'action': 'query',
        'prop': 'revisions',
        'titles': filename,
        'rvprop': 'content',
        'rvlimit': 1,
        'rvgeneratexml': 1,
        'format': 'json',
    }
    http = session or requests

    try:
        response = http.get(API_URL, params=params, headers=HEADERS, timeout=TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        return _empty_revision(filename, str(e))

    if 'error' in data:
        return _empty_revision(filename, data['error'].get('info', 'API error'))

    pages = data.get('query', {}).get('pages', {})
    for page_id, page in pages.items():
        if int(page_id) < 0 or 'missing' in page:
            return _empty_revision(page.get('title', filename), 'Page not found')

        revisions = page.get('revisions', [])
        if not revisions:
            return _empty_revision(page.get('title', filename), 'Page has no revisions')

        return _parse_revision(page.get('title', filename), revisions[0])

    return _empty_revision(filename, 'Page not found')


def category_url(category: str) -> str:
    """Build a Commons category URL."""
    return f'https://commons.wikimedia.org/wiki/Category:{quote(category.replace(" ", "_"))}'


def _parse_revision(title: str, revision: dict) -> dict:
    """Pull source and parse tree out of a revision entry."""
    # Content sits in the main slot when the request asks for slots
    content = revision.get('slots', {}).get('main', revision)
    source = content.get('*', content.get('content'))
    parsetree = revision.get('parsetree', content.get('parsetree'))

    if source is None or parsetree is None:
        return _empty_revision(title, 'Revision has no content or parse tree')

    return {'title': title, 'source': source, 'parsetree': parsetree}


def _empty_revision(title: str, error: str) -> dict:
    return {'title': title, 'source': '', 'parsetree': '', 'error': error}
