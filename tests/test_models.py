import unittest

from portdash.models import Service, ServiceCategory

from .support import DatabaseTestCase


class TestTimestamps(DatabaseTestCase):
    def test_created_at_is_timezone_aware(self):
        self.assertIsNotNone(Service(name="a", port=1).createdAt.tzinfo)
        self.assertIsNotNone(ServiceCategory(name="Home").createdAt.tzinfo)

    def test_new_rows_insert(self):
        self.session.add(Service(name="a", port=1))
        self.session.add(ServiceCategory(name="Home"))
        self.session.commit()


if __name__ == "__main__":
    unittest.main()
