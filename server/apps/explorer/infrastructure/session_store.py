"""Cookie-backed session store.

Reads come from the request, writes go to the response. Every write is
mirrored into the request's cookie jar so later reads in the same
request see the new value.
"""

import logging
from collections.abc import Callable
from typing import Any, final

from django.conf import settings
from django.http import HttpRequest, HttpResponseBase

logger = logging.getLogger(__name__)

TokenProvider = Callable[[], str | None]


def get_cookie_domain() -> str | None:
    """Get the domain cookies are scoped to.

    Returns:
        Domain from settings, None for host-only cookies.
    """
    return getattr(settings, 'EXPLORER_COOKIE_DOMAIN', None) or None


def get_token_key_name() -> str:
    """Get the cookie name holding the session token.

    Returns:
        Cookie name from settings or ``token``.
    """
    return getattr(settings, 'EXPLORER_TOKEN_KEY_NAME', 'token')


@final
class CookieSessionStore:
    """Get, set and remove cookies with a uniform domain scope."""

    def __init__(self, request: HttpRequest, domain: str | None = None) -> None:
        """Initialize the store for one request.

        Args:
            request: Incoming request carrying the cookies.
            domain: Cookie domain. Read from settings if None.
        """
        self._request = request
        self._domain = domain if domain is not None else get_cookie_domain()

    def get(self, key: str) -> str | None:
        """Get a cookie value.

        Args:
            key: Cookie name.

        Returns:
            Cookie value, None if not set.
        """
        return self._request.COOKIES.get(key)

    def set(
        self,
        response: HttpResponseBase,
        key: str,
        value: str,
        **options: Any,
    ) -> None:
        """Set a cookie on the response.

        Args:
            response: Response that carries the Set-Cookie header.
            key: Cookie name.
            value: Cookie value.
            options: Extra ``set_cookie`` options. May override the domain.
        """
        response.set_cookie(key, value, **{'domain': self._domain, **options})
        self._request.COOKIES[key] = value
        logger.debug('Cookie set: %s', key)

    def remove(
        self,
        response: HttpResponseBase,
        key: str,
        **options: Any,
    ) -> None:
        """Remove a cookie.

        Args:
            response: Response that carries the expiring Set-Cookie header.
            key: Cookie name.
            options: Extra ``delete_cookie`` options. May override the domain.
        """
        response.delete_cookie(key, **{'domain': self._domain, **options})
        self._request.COOKIES.pop(key, None)
        logger.debug('Cookie removed: %s', key)

    def token_provider(self, key: str | None = None) -> TokenProvider:
        """Get a callable that reads the current token on every call.

        Args:
            key: Cookie name. Defaults to the configured token key.

        Returns:
            Zero-argument callable returning the token or None.
        """
        token_key = key or get_token_key_name()
        return lambda: self.get(token_key)
