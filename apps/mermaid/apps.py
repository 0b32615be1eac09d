from __future__ import annotations

import logging

from django.apps import AppConfig

log = logging.getLogger("mermaid.apps")


class MermaidAppConfig(AppConfig):
    name = "apps.mermaid"
    label = "mermaid"
    verbose_name = "Mermaid diagrams"

    def ready(self) -> None:
        # Enregistrer les system checks
        from . import checks  # noqa: F401
        log.info("Mermaid tags loaded")
