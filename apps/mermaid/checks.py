from __future__ import annotations

from django.conf import settings
from django.core.checks import Error, Warning, register

from .conf import MermaidConfigError, get_config


@register()
def check_mermaid_settings(app_configs, **kwargs):
    try:
        cfg = get_config()
    except MermaidConfigError as exc:
        return [Error(
            f"MERMAID: {exc}",
            hint="settings.MERMAID doit être un dict: enabled, src, theme, start_on_load, options.",
            id="mermaid.E001",
        )]

    warnings = []
    src = cfg.src.strip()
    if cfg.enabled and not settings.DEBUG:
        if not (src.startswith("https://") or (src.startswith("/") and not src.startswith("//"))):
            warnings.append(Warning(
                f"MERMAID: src non sécurisé {src!r}",
                hint="Utilise une URL https:// ou un chemin relatif au site (/static/...).",
                id="mermaid.W001",
            ))
    return warnings
