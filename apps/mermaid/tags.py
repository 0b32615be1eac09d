"""The ``{% mermaid %}`` block tag and the ``{% mermaid_script %}`` loader.

Usage::

    {% load mermaid %}
    {% mermaid %}
    graph TD; A-->B;
    {% endmermaid %}

renders ``<div class="mermaid">graph TD; A-->B;</div>`` (whitespace inside the
block is kept as written). Diagrams are drawn client-side by mermaid.js, which
``{% mermaid_script %}`` loads once per page.
"""
from __future__ import annotations

import logging

from django import template
from django.utils.html import format_html, json_script
from django.utils.safestring import SafeString, mark_safe

from . import conf
from .blocks import BlockNode, parse_nodelist, register_block, split_markup

log = logging.getLogger("mermaid.tags")

TAG_NAME = "mermaid"
SCRIPT_TAG_NAME = "mermaid_script"
CONFIG_ELEMENT_ID = "mermaid-config"

OPEN_MARKUP = '<div class="mermaid">'
CLOSE_MARKUP = "</div>"

_BOOTSTRAP = mark_safe(
    "<script>mermaid.initialize("
    f'JSON.parse(document.getElementById("{CONFIG_ELEMENT_ID}").textContent)'
    ");</script>"
)


class MermaidBlock:
    """Wrap the rendered block body in the container mermaid.js looks for."""

    def parse_block(self, parser, token) -> BlockNode:
        tag_name, markup = split_markup(token)
        nodelist = parse_nodelist(parser, tag_name)
        return BlockNode(self, tag_name, markup, nodelist)

    def render_block(self, context, content: str) -> SafeString:
        # Read and discarded: the site config has no effect on the block markup.
        conf.site_value()
        log.debug("rendering mermaid block (%d chars)", len(content))
        return mark_safe(f"{OPEN_MARKUP}{content}{CLOSE_MARKUP}")


def mermaid_script() -> str:
    """Script tags loading mermaid.js and initialising it from ``settings.MERMAID``."""
    cfg = conf.get_config()
    if not cfg.enabled:
        return ""
    return format_html(
        '<script src="{}"></script>{}{}',
        cfg.src,
        json_script(conf.initialize_options(cfg), CONFIG_ELEMENT_ID),
        _BOOTSTRAP,
    )


def register_tags(library: template.Library) -> template.Library:
    """Register ``{% mermaid %}`` and ``{% mermaid_script %}`` on ``library``."""
    register_block(library, TAG_NAME, MermaidBlock())
    library.simple_tag(mermaid_script, name=SCRIPT_TAG_NAME)
    return library
