import unittest

from sqlmodel import select

from portdash.models import AppSettings
from portdash.store import get_or_create_settings, set_host, set_use_https

from .support import DatabaseTestCase


class TestSettingsStore(DatabaseTestCase):
    def test_created_with_defaults_on_first_access(self):
        settings = get_or_create_settings(self.session)
        self.assertEqual(settings.host, "192.168.1.100")
        self.assertFalse(settings.useHTTPS)

    def test_single_instance(self):
        first = get_or_create_settings(self.session)
        second = get_or_create_settings(self.session)
        self.assertEqual(first.id, second.id)
        self.assertEqual(len(self.session.exec(select(AppSettings)).all()), 1)

    def test_single_instance_across_sessions(self):
        from sqlmodel import Session

        get_or_create_settings(self.session)
        with Session(self.engine) as other:
            get_or_create_settings(other)
        self.assertEqual(len(self.session.exec(select(AppSettings)).all()), 1)

    def test_writes_through(self):
        set_host(self.session, "10.0.0.5")
        set_use_https(self.session, True)
        self.session.expire_all()

        settings = get_or_create_settings(self.session)
        self.assertEqual(settings.host, "10.0.0.5")
        self.assertTrue(settings.useHTTPS)

    def test_empty_host_accepted(self):
        settings = set_host(self.session, "")
        self.assertEqual(settings.host, "")


if __name__ == "__main__":
    unittest.main()
