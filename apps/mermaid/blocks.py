"""Generic block-tag plumbing for the Django template language.

A block tag is split in two:

- a *handler*, any object implementing :class:`BlockTag`, which owns the
  tag-specific behaviour (what to keep from the opening token, how to wrap the
  rendered body);
- :class:`BlockNode`, the single ``Node`` subclass, which holds the parsed body
  and delegates to the handler at render time.

``register_block`` wires a handler into a ``template.Library``.
"""
from __future__ import annotations

import logging
from typing import Protocol

from django import template
from django.template.base import NodeList, Parser, Token

log = logging.getLogger("mermaid.tags")


class BlockTag(Protocol):
    def parse_block(self, parser: Parser, token: Token) -> "BlockNode":
        ...

    def render_block(self, context: template.Context, content: str) -> str:
        ...


def split_markup(token: Token) -> tuple[str, str]:
    """Return ``(tag_name, markup)`` for an opening token.

    ``markup`` is the raw text following the tag name, stripped; empty when
    the tag has no arguments.
    """
    bits = token.contents.split(None, 1)
    markup = bits[1].strip() if len(bits) > 1 else ""
    return bits[0], markup


def parse_nodelist(parser: Parser, tag_name: str) -> NodeList:
    # TemplateSyntaxError for a missing end tag comes from parser.parse().
    nodelist = parser.parse((f"end{tag_name}",))
    parser.delete_first_token()
    return nodelist


class BlockNode(template.Node):
    def __init__(self, handler: BlockTag, tag_name: str, markup: str, nodelist: NodeList):
        self.handler = handler
        self.tag_name = tag_name
        self.markup = markup
        self.nodelist = nodelist

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}: {self.tag_name}>"

    def render(self, context):
        content = self.nodelist.render(context)
        return self.handler.render_block(context, content)


def register_block(library: template.Library, name: str, handler: BlockTag) -> None:
    """Install ``handler`` on ``library`` under ``name``.

    Django libraries map tag names to compile functions; registering an
    existing name replaces the previous entry.
    """
    if name in library.tags:
        log.warning("block tag %r already registered on %r, replacing it", name, library)

    def compile_block(parser, token):
        return handler.parse_block(parser, token)

    compile_block.__name__ = f"do_{name}"
    library.tag(name, compile_block)
