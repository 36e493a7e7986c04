"""Commit helper shared by the stores."""

from contextlib import contextmanager

from sqlmodel import Session


@contextmanager
def committing(session: Session):
    """Commit the changes made in the block, or roll all of them back."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
