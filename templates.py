"""
templates.py - Locate templates and parameters in a preprocessor parse tree

A template call like {{Information|description={{en|1=A cat}}|author=Me}}
shows up in the parse tree as:

    <template>
      <title>Information</title>
      <part><name>description</name>=<value>
        <template><title>en</title><part><name>1</name>=<value>A cat</value></part></template>
      </value></part>
      <part><name>author</name>=<value>Me</value></part>
    </template>

Positional parameters have an empty name carrying the position instead:
<part><name index="1"/><value>A cat</value></part>
"""

from typing import Callable, Union

from errors import MalformedTemplate, MissingValueError, ParameterNotFoundError
from parsetree import Element, Text, capitalize, text_content

# Templates with titles shorter than this are taken to be language wrappers
# ({{en|...}}, {{de|...}}). A short content template is misread as one.
LANGUAGE_TITLE_LENGTH = 3

DEFAULT_LANGUAGE = 'default'

Selector = Union[str, int, Callable[[Element], bool]]


def template_title(template: Element) -> str:
    """Return the trimmed title of a template node."""
    title = template.child('title')
    if title is None:
        raise MalformedTemplate("Template has no title element.")
    return text_content(title).strip()


def find_template(node: Element, title: str) -> Element | None:
    """
    Find the first template directly under `node` whose title matches.

    Titles compare after uppercasing their first letter, so 'information'
    finds {{Information}}. Returns None when there is no such template.
    """
    wanted = capitalize(title)
    for template in node.elements('template'):
        if capitalize(template_title(template)) == wanted:
            return template
    return None


def find_parameter(template: Element, selector: Selector) -> Element:
    """
    Find a template parameter and return its value element.

    Args:
        template: a template node
        selector: parameter name, 1-based position, or a predicate called
            with each part's name element

    Raises:
        ParameterNotFoundError: no part matches
        MissingValueError: a part matches but has no value after its name
    """
    if callable(selector):
        match = selector
    elif isinstance(selector, int):
        match = _index_matcher(selector)
    else:
        match = _name_matcher(selector)

    for part in template.elements('part'):
        children = part.children
        for i, child in enumerate(children):
            if not (isinstance(child, Element) and child.name == 'name'):
                continue
            if match(child):
                for sibling in children[i + 1:]:
                    if isinstance(sibling, Element) and sibling.name == 'value':
                        return sibling
                raise MissingValueError("No value node found for matched template parameter.")
    raise ParameterNotFoundError(f"No matching template parameter node found for {selector!r}.")


def _name_matcher(name: str) -> Callable[[Element], bool]:
    wanted = capitalize(name)
    return lambda node: capitalize(text_content(node).strip()) == wanted


def _index_matcher(index: int) -> Callable[[Element], bool]:
    wanted = str(index)

    def match(node: Element) -> bool:
        if text_content(node).strip() == wanted:
            return True
        return node.attributes.get('index', '').strip() == wanted

    return match


def decode_multilingual(value: Element) -> dict[str, str]:
    """
    Split a parameter value into per-language texts.

    Texts are wrapped in things like {{en|foo}} or {{en|1=foo bar}}. Text
    outside those wrappers goes under the 'default' key if there is any.
    Only direct children of `value` are looked at. A language wrapper
    without text ({{en}}) raises ParameterNotFoundError.
    """
    texts = {}
    untagged = []

    for node in value.children:
        if isinstance(node, Text):
            untagged.append(node.content)
        elif node.name == 'template':
            lang = template_title(node)
            if len(lang) >= LANGUAGE_TITLE_LENGTH:
                continue
            text = find_parameter(node, 1)
            texts[lang] = text_content(text).strip()

    default = ''.join(untagged)
    if default.strip():
        texts[DEFAULT_LANGUAGE] = default
    return texts
