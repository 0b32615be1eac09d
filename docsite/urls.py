"""
URL configuration for the docsite project.

    /docs/  -> apps.docs.urls
    /       -> redirect to the diagrams page
"""
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path("", RedirectView.as_view(pattern_name="docs:diagrams", permanent=False), name="home"),
    path("docs/", include("apps.docs.urls", namespace="docs")),
]
