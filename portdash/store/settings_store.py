"""Settings store - the single AppSettings row."""

import logging
import threading

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from ..models.app_settings import AppSettings
from .transaction import committing

logger = logging.getLogger(__name__)

_settings_lock = threading.Lock()


def get_or_create_settings(session: Session) -> AppSettings:
    """Return the settings row, creating it with defaults on first access."""
    with _settings_lock:
        settings = session.exec(select(AppSettings)).first()
        if settings:
            return settings

        settings = AppSettings()
        session.add(settings)
        try:
            session.commit()
        except IntegrityError:
            # Row was created through another session in the meantime
            session.rollback()
            return session.exec(select(AppSettings)).one()
        except Exception:
            session.rollback()
            raise

        session.refresh(settings)
        logger.info("Created default settings (host=%s)", settings.host)
        return settings


def set_host(session: Session, host: str) -> AppSettings:
    """Update the default host. Any string is accepted, including empty."""
    settings = get_or_create_settings(session)
    with committing(session):
        settings.host = host
        session.add(settings)
    session.refresh(settings)
    logger.info("Default host set to %r", host)
    return settings


def set_use_https(session: Session, use_https: bool) -> AppSettings:
    """Update the default scheme."""
    settings = get_or_create_settings(session)
    with committing(session):
        settings.useHTTPS = bool(use_https)
        session.add(settings)
    session.refresh(settings)
    logger.info("Default HTTPS set to %s", settings.useHTTPS)
    return settings
