"""
Pytest fixtures for media metadata tests.
"""

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest


INFORMATION_SOURCE = """== {{int:filedesc}} ==
{{Information
|description={{en|1=A tabby cat sleeping}}
{{de|Eine schlafende Katze}}
|date=2012-06-01
|source={{own}}
|author=[[User:Example|Example]]
}}

[[Category:Cats]]
[[ category : Sleeping animals ]]
"""

INFORMATION_PARSETREE = (
    '<root><h level="2" i="1">== <template><title>int:filedesc</title></template> ==</h>\n'
    '<template><title>Information\n</title>'
    '<part><name>description</name>=<value>'
    '<template><title>en</title><part><name>1</name>=<value>A tabby cat sleeping</value></part></template>\n'
    '<template><title>de</title><part><name index="1"/><value>Eine schlafende Katze</value></part></template>\n'
    '</value></part>'
    '<part><name>date</name>=<value>2012-06-01\n</value></part>'
    '<part><name>source</name>=<value><template><title>own</title></template>\n</value></part>'
    '<part><name>author</name>=<value>[[User:Example|Example]]\n</value></part>'
    '</template>\n\n[[Category:Cats]]\n[[ category : Sleeping animals ]]\n</root>'
)


@pytest.fixture
def information_source():
    """Wikitext of a typical file page."""
    return INFORMATION_SOURCE


@pytest.fixture
def information_parsetree():
    """Parse tree XML matching information_source."""
    return INFORMATION_PARSETREE


@pytest.fixture
def mock_revision_response():
    """Sample API response for a revision query with rvgeneratexml."""
    return {
        'batchcomplete': '',
        'query': {
            'pages': {
                '12345': {
                    'pageid': 12345,
                    'ns': 6,
                    'title': 'File:Sleeping cat.jpg',
                    'revisions': [{
                        'contentformat': 'text/x-wiki',
                        'contentmodel': 'wikitext',
                        'parsetree': INFORMATION_PARSETREE,
                        '*': INFORMATION_SOURCE,
                    }],
                }
            }
        },
    }
