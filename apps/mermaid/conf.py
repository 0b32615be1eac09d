"""Site-level configuration for the mermaid tags (``settings.MERMAID``)."""
from __future__ import annotations

import logging
from typing import Any, Dict, Literal, Mapping, Optional

from django.conf import settings
from pydantic import BaseModel, ValidationError

log = logging.getLogger("mermaid.conf")

DEFAULT_SRC = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"

MermaidTheme = Literal["default", "neutral", "dark", "forest", "base"]


class MermaidConfigError(ValueError):
    """``settings.MERMAID`` cannot be turned into a :class:`MermaidSettings`."""


class MermaidSettings(BaseModel):
    enabled: bool = True
    src: str = DEFAULT_SRC
    theme: MermaidTheme = "default"
    start_on_load: bool = True
    # forwarded verbatim to mermaid.initialize()
    options: Dict[str, Any] = {}


def site_value() -> Optional[Any]:
    """Raw ``settings.MERMAID`` or ``None``. Never raises, never validates.

    Standalone template engines may run without configured settings.
    """
    if not settings.configured:
        return None
    return getattr(settings, "MERMAID", None)


def get_config() -> MermaidSettings:
    raw = site_value()
    if raw is None:
        log.debug("settings.MERMAID absent, using defaults")
        return MermaidSettings()
    if not isinstance(raw, Mapping):
        raise MermaidConfigError(
            f"settings.MERMAID must be a mapping, got {type(raw).__name__}"
        )
    try:
        return MermaidSettings.model_validate(dict(raw))  # Pydantic v2
    except ValidationError as exc:
        raise MermaidConfigError(f"settings.MERMAID is invalid: {exc}") from exc


def initialize_options(cfg: MermaidSettings) -> Dict[str, Any]:
    """Payload handed to ``mermaid.initialize`` on the client."""
    payload: Dict[str, Any] = {
        "startOnLoad": cfg.start_on_load,
        "theme": cfg.theme,
    }
    payload.update(cfg.options)
    return payload
