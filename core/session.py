# core/session.py
from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Iterator

from core.models import Identity
from core.repository import Session, SessionProvider
from utils.logger import get_logger

log = get_logger()


@contextmanager
def open_session(provider: SessionProvider, identity: Identity, context: Any = None) -> Iterator[Session]:
    """Open a session and log it out on every exit path.

    Errors from ``provider.open`` propagate untouched; there is nothing to
    release in that case.
    """
    session = provider.open(identity, context)
    log.debug(f"session_open user={identity.user_login_id}")
    try:
        yield session
    finally:
        if session.is_live():
            session.logout()
            log.debug(f"session_logout user={identity.user_login_id}")
