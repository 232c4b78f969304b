"""
categories.py - Pull category links out of wikitext source

Only links written in the page itself are returned, not categories added
by templates, since those are the ones a user can edit.
"""

import re

CATEGORY_LINK = re.compile(r'\[\[\s*Category\s*:([^\]]*)\s*\]\]', re.IGNORECASE)


def extract_categories(source: str) -> list[str]:
    """
    Return category names in the order they appear in `source`.

    Duplicates are kept and names are not validated, so a sort key stays
    attached: '[[Category:Cats|Felix]]' gives 'Cats|Felix'.
    """
    return [match.group(1).strip() for match in CATEGORY_LINK.finditer(source)]
