import unittest

from portdash.models import AppSettings, Service
from portdash.utils.urls import (
    build_url,
    can_add_service,
    can_open,
    can_save_service,
    effective_host,
    effective_scheme,
    parse_port,
    preview_label,
)


def make_service(port=8080, host=None, use_https=None):
    return Service(name="svc", port=port, customHost=host, customUseHTTPS=use_https)


class TestEffectiveScheme(unittest.TestCase):
    def test_override_wins_over_default(self):
        for default in (True, False):
            settings = AppSettings(host="h", useHTTPS=default)
            self.assertEqual(effective_scheme(make_service(use_https=True), settings), "https")
            self.assertEqual(effective_scheme(make_service(use_https=False), settings), "http")

    def test_absent_override_uses_default(self):
        self.assertEqual(
            effective_scheme(make_service(), AppSettings(host="h", useHTTPS=True)), "https"
        )
        self.assertEqual(
            effective_scheme(make_service(), AppSettings(host="h", useHTTPS=False)), "http"
        )


class TestEffectiveHost(unittest.TestCase):
    def test_custom_host_wins(self):
        settings = AppSettings(host="10.0.0.5", useHTTPS=False)
        self.assertEqual(effective_host(make_service(host="nas.local"), settings), "nas.local")

    def test_missing_or_empty_custom_host_uses_default(self):
        settings = AppSettings(host="10.0.0.5", useHTTPS=False)
        self.assertEqual(effective_host(make_service(), settings), "10.0.0.5")
        self.assertEqual(effective_host(make_service(host=""), settings), "10.0.0.5")

    def test_empty_default_host_is_returned_verbatim(self):
        settings = AppSettings(host="", useHTTPS=False)
        self.assertEqual(effective_host(make_service(), settings), "")


class TestBuildURL(unittest.TestCase):
    def setUp(self):
        self.settings = AppSettings(host="10.0.0.5", useHTTPS=False)

    def test_default_host_and_scheme(self):
        self.assertEqual(build_url(make_service(port=8080), self.settings), "http://10.0.0.5:8080")

    def test_https_override(self):
        service = make_service(port=8443, use_https=True)
        self.assertEqual(build_url(service, self.settings), "https://10.0.0.5:8443")

    def test_custom_host(self):
        service = make_service(port=5000, host="nas.local")
        self.assertEqual(build_url(service, self.settings), "http://nas.local:5000")

    def test_empty_host_still_builds(self):
        settings = AppSettings(host="", useHTTPS=False)
        url = build_url(make_service(port=8080), settings)
        self.assertEqual(url, "http://:8080")
        self.assertFalse(can_open(url))

    def test_deterministic(self):
        service = make_service(port=9000, host="pi.lan", use_https=True)
        self.assertEqual(build_url(service, self.settings), build_url(service, self.settings))

    def test_defaults_of_new_settings(self):
        settings = AppSettings()
        self.assertEqual(build_url(make_service(port=80), settings), "http://192.168.1.100:80")


class TestPreviewLabel(unittest.TestCase):
    def setUp(self):
        self.settings = AppSettings(host="10.0.0.5", useHTTPS=False)

    def test_full_form(self):
        label = preview_label("Plex", "32400", "", False, self.settings)
        self.assertEqual(label, "Plex — http://10.0.0.5:32400")

    def test_fallback_name_and_custom_host(self):
        label = preview_label("", "9090", "nas.local", True, self.settings)
        self.assertEqual(label, "Service :9090 — https://nas.local:9090")

    def test_unparsable_port_is_zero_and_omitted(self):
        label = preview_label("", "80a", None, False, self.settings)
        self.assertEqual(label, "Service :0 — http://10.0.0.5")

    def test_empty_port_omitted(self):
        label = preview_label("Router", "", None, None, self.settings)
        self.assertEqual(label, "Router — http://10.0.0.5")

    def test_unset_scheme_follows_default(self):
        settings = AppSettings(host="h", useHTTPS=True)
        self.assertEqual(preview_label("A", 1, None, None, settings), "A — https://h:1")


class TestFormRules(unittest.TestCase):
    def test_parse_port(self):
        self.assertEqual(parse_port("8080"), 8080)
        self.assertEqual(parse_port(" 443 "), 443)
        self.assertEqual(parse_port(22), 22)
        self.assertIsNone(parse_port(None))
        self.assertIsNone(parse_port(""))
        self.assertIsNone(parse_port("http"))
        self.assertIsNone(parse_port(True))
        self.assertEqual(parse_port("-1"), -1)

    def test_parse_port_rejects_non_plain_digits(self):
        for text in ("1_000", "+80", "\u0668\u0660", "8 0", "0x50"):
            with self.subTest(text=text):
                self.assertIsNone(parse_port(text))
        self.assertFalse(can_save_service("1_000"))

    def test_can_add_needs_port_and_some_host(self):
        settings = AppSettings(host="10.0.0.5", useHTTPS=False)
        self.assertTrue(can_add_service("80", "", settings))
        self.assertFalse(can_add_service("", "", settings))

        no_default = AppSettings(host="  ", useHTTPS=False)
        self.assertFalse(can_add_service("80", "", no_default))
        self.assertTrue(can_add_service("80", "nas.local", no_default))

    def test_can_save_only_needs_port(self):
        self.assertTrue(can_save_service("70000"))
        self.assertFalse(can_save_service("x"))

    def test_can_open(self):
        self.assertTrue(can_open("http://10.0.0.5:8080"))
        self.assertTrue(can_open("https://nas.local:5001"))
        self.assertFalse(can_open("http://:8080"))
        self.assertFalse(can_open("nas.local:8080"))


if __name__ == "__main__":
    unittest.main()
