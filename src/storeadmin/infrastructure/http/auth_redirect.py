"""Sign-in redirect on authentication failures.

A 401/403 anywhere schedules a redirect to the sign-in route after a
short delay, so the error can be shown first.  When the current route
already is the sign-in route nothing is scheduled, which prevents a
redirect loop.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

from storeadmin.domain.service.error_messages import is_auth_error

logger = logging.getLogger(__name__)

SIGNIN_PATH = "/signin"
REDIRECT_DELAY = 1.0


class Navigator(ABC):

    @property
    @abstractmethod
    def current_path(self) -> str:
        """The route the user is on."""

    @abstractmethod
    def redirect(self, path: str) -> None:
        """Move the user to *path*."""


class AuthRedirectGuard:

    def __init__(
        self,
        navigator: Navigator,
        signin_path: str = SIGNIN_PATH,
        delay: float | None = REDIRECT_DELAY,
    ) -> None:
        self._navigator = navigator
        self._signin_path = signin_path
        self._delay = delay
        self.pending: asyncio.TimerHandle | None = None

    def __call__(self, error: BaseException) -> bool:
        """Handle *error*; returns True when a redirect was scheduled."""
        if not is_auth_error(error):
            return False
        if self._signin_path in self._navigator.current_path:
            return False

        logger.warning("Authentication failed, redirecting to %s", self._signin_path)
        if self._delay is None:
            self._navigator.redirect(self._signin_path)
            return True

        loop = asyncio.get_running_loop()
        self.pending = loop.call_later(
            self._delay, self._navigator.redirect, self._signin_path
        )
        return True
