"""Shared fixtures for store tests."""

import unittest

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from portdash import models  # noqa: F401


class DatabaseTestCase(unittest.TestCase):
    """Gives each test a fresh in-memory database and session."""

    def setUp(self):
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        SQLModel.metadata.create_all(self.engine)
        self.session = Session(self.engine)

    def tearDown(self):
        self.session.close()
        self.engine.dispose()
