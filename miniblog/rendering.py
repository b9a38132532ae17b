"""
Markdown rendering for post bodies.

Post bodies are untrusted user input. Raw HTML in the source is escaped
rather than passed through, and the rendered element tree is filtered
against an allow-list of tags, attributes and URL schemes before it is
serialized.
"""
import html
import re
from urllib.parse import urlparse

import markdown
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import AMP_SUBSTITUTE

from .conf import blog_settings

# Removed along with everything inside them.
DROPPED_TAGS = {"script", "style", "iframe", "object", "embed", "template"}

ALLOWED_ATTRIBUTES = {
    "a": {"href", "title"},
    "img": {"src", "alt", "title"},
}

URL_ATTRIBUTES = {"href", "src"}

# A character reference left over after one round of unescaping.
RE_ENTITY = re.compile(r"&#?\w+;")


def _append_text(parent, index, text):
    """Attach text to whatever precedes position `index` in `parent`."""
    if not text:
        return
    if index == 0:
        parent.text = (parent.text or "") + text
    else:
        previous = parent[index - 1]
        previous.tail = (previous.tail or "") + text


class SanitizeTreeprocessor(Treeprocessor):
    """Strip disallowed elements, attributes and URLs from the tree."""

    def __init__(self, md, allowed_tags, allowed_schemes):
        super().__init__(md)
        self.allowed_tags = set(allowed_tags)
        self.allowed_schemes = {scheme.lower() for scheme in allowed_schemes}

    def run(self, root):
        self._sanitize(root)

    def _sanitize(self, parent):
        index = 0
        while index < len(parent):
            element = parent[index]
            if element.tag in DROPPED_TAGS:
                parent.remove(element)
                _append_text(parent, index, element.tail)
                continue
            if element.tag not in self.allowed_tags:
                self._unwrap(parent, index, element)
                continue
            self._clean_attributes(element)
            self._sanitize(element)
            index += 1

    def _unwrap(self, parent, index, element):
        # Children take the element's place; its text and tail are kept.
        children = list(element)
        parent.remove(element)
        _append_text(parent, index, element.text)
        for offset, child in enumerate(children):
            parent.insert(index + offset, child)
        _append_text(parent, index + len(children), element.tail)

    def _clean_attributes(self, element):
        allowed = ALLOWED_ATTRIBUTES.get(element.tag, set())
        for name in list(element.attrib):
            if name not in allowed:
                del element.attrib[name]
            elif name in URL_ATTRIBUTES and not self.is_safe_url(element.attrib[name]):
                del element.attrib[name]

    def is_safe_url(self, value):
        """
        Relative URLs pass; absolute ones need an allowed scheme.

        The value is checked the way a browser reads it, with character
        references decoded, so `&#106;avascript:` counts as `javascript:`.
        """
        decoded = html.unescape(value.replace(AMP_SUBSTITUTE, "&"))
        if RE_ENTITY.search(decoded):
            return False
        compact = "".join(ch for ch in decoded if ch.isprintable() and not ch.isspace())
        scheme = urlparse(compact).scheme.lower()
        return not scheme or scheme in self.allowed_schemes


class SanitizeExtension(Extension):
    """Python-Markdown extension that escapes raw HTML and applies the allow-list."""

    def __init__(self, **kwargs):
        self.config = {
            "allowed_tags": [[], "Tags allowed in the rendered output"],
            "allowed_schemes": [[], "URL schemes allowed in href/src"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md):
        md.preprocessors.deregister("html_block", strict=False)
        md.inlinePatterns.deregister("html", strict=False)
        md.treeprocessors.register(
            SanitizeTreeprocessor(
                md,
                self.getConfig("allowed_tags"),
                self.getConfig("allowed_schemes"),
            ),
            "miniblog_sanitize",
            5,
        )


def render_markdown(text):
    """
    Render Markdown source to sanitized HTML.

    The same input always produces the same output, so the result can be
    stored alongside the source and recomputed whenever it changes.
    """
    if not text:
        return ""
    renderer = markdown.Markdown(
        extensions=[
            *blog_settings.MARKDOWN_EXTENSIONS,
            SanitizeExtension(
                allowed_tags=blog_settings.MARKDOWN_ALLOWED_TAGS,
                allowed_schemes=blog_settings.MARKDOWN_ALLOWED_SCHEMES,
            ),
        ],
        output_format="html",
    )
    return renderer.convert(text)
