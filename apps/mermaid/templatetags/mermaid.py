"""``{% load mermaid %}`` entry point."""
from django import template

from apps.mermaid.tags import register_tags

register = register_tags(template.Library())
