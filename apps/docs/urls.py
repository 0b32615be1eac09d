from django.urls import path

from .views import DiagramsView

app_name = "docs"

urlpatterns = [
    path("diagrams/", DiagramsView.as_view(), name="diagrams"),
]
