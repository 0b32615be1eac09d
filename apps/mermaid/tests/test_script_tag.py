from __future__ import annotations

from django.template import Context, Template
from django.test import SimpleTestCase, override_settings

from apps.mermaid.conf import MermaidConfigError


def _render() -> str:
    return Template("{% load mermaid %}{% mermaid_script %}").render(Context())


class MermaidScriptTagTests(SimpleTestCase):
    @override_settings(MERMAID={"src": "/static/vendor/mermaid.min.js", "theme": "dark"})
    def test_loads_script_and_initializes(self) -> None:
        html = _render()
        self.assertTrue(html.startswith('<script src="/static/vendor/mermaid.min.js"></script>'))
        self.assertIn('<script id="mermaid-config" type="application/json">', html)
        self.assertIn('"theme": "dark"', html)
        self.assertIn('"startOnLoad": true', html)
        self.assertIn("mermaid.initialize(", html)

    @override_settings(MERMAID={"enabled": False})
    def test_disabled_renders_nothing(self) -> None:
        self.assertEqual(_render(), "")

    @override_settings(MERMAID={"options": {"securityLevel": "strict"}})
    def test_extra_options_forwarded(self) -> None:
        self.assertIn('"securityLevel": "strict"', _render())

    @override_settings(MERMAID={"src": 'x.js"><script>alert(1)</script>'})
    def test_src_is_escaped(self) -> None:
        html = _render()
        self.assertNotIn("<script>alert(1)", html)
        self.assertIn("&quot;&gt;&lt;script&gt;", html)

    @override_settings(MERMAID={"theme": "neon"})
    def test_invalid_config_propagates(self) -> None:
        with self.assertRaises(MermaidConfigError):
            _render()
