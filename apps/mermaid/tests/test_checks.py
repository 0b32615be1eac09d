from __future__ import annotations

from django.test import SimpleTestCase, override_settings

from apps.mermaid.checks import check_mermaid_settings


class MermaidChecksTests(SimpleTestCase):
    @override_settings(DEBUG=False, MERMAID={"src": "https://cdn.example.com/mermaid.js"})
    def test_valid_settings_pass(self) -> None:
        self.assertEqual(check_mermaid_settings(None), [])

    @override_settings(MERMAID="dark")
    def test_invalid_settings_error(self) -> None:
        messages = check_mermaid_settings(None)
        self.assertEqual([m.id for m in messages], ["mermaid.E001"])

    @override_settings(DEBUG=False, MERMAID={"src": "http://cdn.example.com/mermaid.js"})
    def test_insecure_src_warns_outside_debug(self) -> None:
        messages = check_mermaid_settings(None)
        self.assertEqual([m.id for m in messages], ["mermaid.W001"])

    @override_settings(DEBUG=False, MERMAID={"src": "//cdn.example.com/mermaid.js"})
    def test_protocol_relative_src_warns(self) -> None:
        self.assertEqual([m.id for m in check_mermaid_settings(None)], ["mermaid.W001"])

    @override_settings(DEBUG=True, MERMAID={"src": "http://localhost:9000/mermaid.js"})
    def test_insecure_src_tolerated_in_debug(self) -> None:
        self.assertEqual(check_mermaid_settings(None), [])

    @override_settings(DEBUG=False, MERMAID={"src": "/static/vendor/mermaid.min.js"})
    def test_site_relative_src_ok(self) -> None:
        self.assertEqual(check_mermaid_settings(None), [])

    @override_settings(DEBUG=False, MERMAID={"enabled": False, "src": "http://x/mermaid.js"})
    def test_disabled_skips_src_check(self) -> None:
        self.assertEqual(check_mermaid_settings(None), [])
