import io
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from portdash.__main__ import list_services, open_service, seed_categories


class TestCli(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.db_url = "sqlite:///" + os.path.join(self.tmpdir, "portdash.db")

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def _add(self, *args, **kwargs):
        from portdash.__main__ import _open_session
        from portdash.store import create_service, set_host

        with _open_session(self.db_url) as session:
            set_host(session, "10.0.0.5")
            create_service(session, *args, **kwargs)

    def test_list_empty(self):
        out = io.StringIO()
        with redirect_stdout(out):
            self.assertEqual(list_services(self.db_url), 0)
        self.assertIn("No services", out.getvalue())

    def test_list_prints_urls(self):
        self._add("Plex", 32400, category="Media")
        out = io.StringIO()
        with redirect_stdout(out):
            list_services(self.db_url)
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "Media")
        self.assertIn("http://10.0.0.5:32400", lines[1])

    def test_open_hands_url_to_browser(self):
        self._add("NAS", 5001, custom_host="nas.local", custom_use_https=True)
        with patch("portdash.__main__.webbrowser.open") as browser:
            self.assertEqual(open_service(self.db_url, "nas"), 0)
        browser.assert_called_once_with("https://nas.local:5001")

    def test_open_unknown_service(self):
        with patch("portdash.__main__.webbrowser.open") as browser:
            self.assertEqual(open_service(self.db_url, "missing"), 1)
        browser.assert_not_called()

    def test_open_without_host(self):
        from portdash.__main__ import _open_session
        from portdash.store import create_service, set_host

        with _open_session(self.db_url) as session:
            set_host(session, "")
            create_service(session, "Bare", 8080)

        with patch("portdash.__main__.webbrowser.open") as browser:
            self.assertEqual(open_service(self.db_url, "Bare"), 1)
        browser.assert_not_called()

    def test_seed_categories(self):
        out = io.StringIO()
        with redirect_stdout(out):
            seed_categories(self.db_url)
            seed_categories(self.db_url)
        self.assertEqual(out.getvalue().splitlines(), ["Added 13 categories", "Added 0 categories"])


if __name__ == "__main__":
    unittest.main()
