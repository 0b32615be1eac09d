# apps/docs/views.py
from __future__ import annotations

import logging

from django.views.generic import TemplateView

log = logging.getLogger("docs.views")

SAMPLE_DIAGRAMS = [
    {
        "title": "Flowchart",
        "source": "graph TD; A-->B; A-->C; B-->D; C-->D;",
    },
    {
        "title": "Sequence",
        "source": "sequenceDiagram\n    Browser->>Django: GET /docs/diagrams/\n    Django-->>Browser: HTML + mermaid blocks",
    },
]


class DiagramsView(TemplateView):
    """
    Page de démonstration des blocs {% mermaid %}.

    Les sources viennent du contexte : le tag les entoure d'un
    <div class="mermaid"> et mermaid.js fait le rendu côté client.
    """
    template_name = "docs/diagrams.html"

    def get_context_data(self, **kwargs):
        ctx = super().get_context_data(**kwargs)
        ctx["diagrams"] = SAMPLE_DIAGRAMS
        log.debug("docs.diagrams rendered with %d samples", len(SAMPLE_DIAGRAMS))
        return ctx
