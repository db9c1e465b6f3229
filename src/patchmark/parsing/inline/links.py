"""Inline substitution of images and links.

Runs over the markup produced by the infix compiler, images first so that
``![alt](...)`` is consumed before the link pattern could claim its
brackets. Each pattern replaces only its own match.

Forms:
    ![alt](url "title")    image, direct
    ![alt][name]           image, reference ("![alt]" and "![alt][]" bind to "")
    [text](url "title")    link, direct
    [text][name]           link, reference ("[text][]" binds to "")
    [text]                 link, reference bound to "text"

Reference forms are resolved against the reference dictionary at the time
of the call. Unknown names leave ``href``/``src`` and ``title`` empty; the
``data-reference`` attribute is always written so a later definition can
patch the element in place.

Brackets in img attribute values are written as character references, so
the link pass never matches inside a tag compile_images emitted.

"""

from __future__ import annotations

import re
from html import escape, unescape

from patchmark.nodes import DATA_REFERENCE, ReferenceData, ReferenceDictionary

_IMAGE_DIRECT = re.compile(r'!\[([^\]]*)\]\(([^)\s"]*)(?:\s+"([^"]*)")?\s*\)')
_IMAGE_REFERENCE = re.compile(r"!\[([^\]]*)\](?:\[([^\]]*)\])?")
_LINK = re.compile(
    r"\[(?P<text>[^\]]*)\]"
    r'(?:\((?P<url>[^)\s"]*)(?:\s+"(?P<title>[^"]*)")?\s*\)'
    r"|\[(?P<ref>[^\]]*)\])?"
)

# Emitted img tags must hold no brackets, or the link pass would rewrite
# text inside their attributes
_BRACKETS = str.maketrans({"[": "&#91;", "]": "&#93;"})


def _quote(value: str) -> str:
    """Escape a raw value for use inside a double-quoted attribute."""
    return escape(value, quote=True)


def _attr(captured: str) -> str:
    """Re-escape a value captured from markup for attribute use."""
    return _quote(unescape(captured))


def _image_attr(value: str) -> str:
    """Quote a raw value for an img attribute, with brackets as character references."""
    return _quote(value).translate(_BRACKETS)


def _lookup(references: ReferenceDictionary, name: str) -> ReferenceData:
    return references.get(name) or ReferenceData()


def compile_images(markup: str, references: ReferenceDictionary) -> str:
    """Replace image syntax with img tags.

    Args:
        markup: Infix-compiled block markup
        references: Reference dictionary, read only

    Returns:
        Markup with every image form replaced.
    """

    def direct(match: re.Match[str]) -> str:
        alt, url, title = match.group(1), match.group(2), match.group(3) or ""
        return (
            f'<img src="{_image_attr(unescape(url))}" alt="{_image_attr(unescape(alt))}" '
            f'title="{_image_attr(unescape(title))}">'
        )

    def by_reference(match: re.Match[str]) -> str:
        alt = match.group(1)
        name = unescape(match.group(2) or "")
        target = _lookup(references, name)
        return (
            f'<img src="{_image_attr(target.link)}" alt="{_image_attr(unescape(alt))}" '
            f'title="{_image_attr(target.title)}" {DATA_REFERENCE}="{_image_attr(name)}">'
        )

    markup = _IMAGE_DIRECT.sub(direct, markup)
    return _IMAGE_REFERENCE.sub(by_reference, markup)


def compile_links(markup: str, references: ReferenceDictionary) -> str:
    """Replace link syntax with anchor tags.

    Args:
        markup: Block markup, after compile_images
        references: Reference dictionary, read only

    Returns:
        Markup with every link form replaced. Link text keeps any inline
        tags it already contains.
    """

    def replace(match: re.Match[str]) -> str:
        text = match.group("text")
        if match.group("url") is not None:
            url = match.group("url")
            title = match.group("title") or ""
            return f'<a href="{_attr(url)}" title="{_attr(title)}">{text}</a>'

        ref = match.group("ref")
        name = unescape(text if ref is None else ref)
        target = _lookup(references, name)
        return (
            f'<a href="{_quote(target.link)}" title="{_quote(target.title)}" '
            f'{DATA_REFERENCE}="{_quote(name)}">{text}</a>'
        )

    return _LINK.sub(replace, markup)


__all__ = ["compile_images", "compile_links"]
