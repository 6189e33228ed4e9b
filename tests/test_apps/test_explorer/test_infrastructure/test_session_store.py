"""Tests for the cookie-backed session store."""

from django.http import HttpResponse

from server.apps.explorer.infrastructure.session_store import (
    CookieSessionStore,
    get_cookie_domain,
    get_token_key_name,
)


class TestSessionStoreConfig:
    """Tests for session store configuration."""

    def test_cookie_domain_default(self, settings):
        """Test host-only cookies when no domain is configured."""
        settings.EXPLORER_COOKIE_DOMAIN = ''

        assert get_cookie_domain() is None

    def test_cookie_domain_from_settings(self, settings):
        """Test configured cookie domain."""
        settings.EXPLORER_COOKIE_DOMAIN = '.example.com'

        assert get_cookie_domain() == '.example.com'

    def test_token_key_default(self, settings):
        """Test default token cookie name."""
        if hasattr(settings, 'EXPLORER_TOKEN_KEY_NAME'):
            delattr(settings, 'EXPLORER_TOKEN_KEY_NAME')

        assert get_token_key_name() == 'token'


class TestCookieSessionStore:
    """Tests for CookieSessionStore."""

    def test_get(self, rf):
        """Test reading a cookie from the request."""
        rf.cookies['token'] = 'abc'
        request = rf.get('/')

        store = CookieSessionStore(request)

        assert store.get('token') == 'abc'
        assert store.get('missing') is None

    def test_set_applies_domain(self, rf):
        """Test that writes carry the configured domain."""
        request = rf.get('/')
        response = HttpResponse()
        store = CookieSessionStore(request, domain='.example.com')

        store.set(response, 'token', 'new', max_age=60)

        morsel = response.cookies['token']
        assert morsel.value == 'new'
        assert morsel['domain'] == '.example.com'
        assert morsel['max-age'] == 60
        assert store.get('token') == 'new'

    def test_options_override_domain(self, rf):
        """Test per-call options win over the default domain."""
        response = HttpResponse()
        store = CookieSessionStore(rf.get('/'), domain='.example.com')

        store.set(response, 'theme', 'dark', domain='pan.example.com')

        assert response.cookies['theme']['domain'] == 'pan.example.com'

    def test_remove(self, rf):
        """Test removing a cookie expires it on the response."""
        rf.cookies['token'] = 'abc'
        request = rf.get('/')
        response = HttpResponse()
        store = CookieSessionStore(request, domain='.example.com')

        store.remove(response, 'token')

        morsel = response.cookies['token']
        assert morsel.value == ''
        assert morsel['max-age'] == 0
        assert morsel['domain'] == '.example.com'
        assert store.get('token') is None

    def test_token_provider_tracks_rotation(self, rf):
        """Test the provider reads the token on every call."""
        rf.cookies['token'] = 'first'
        store = CookieSessionStore(rf.get('/'))
        provider = store.token_provider()

        assert provider() == 'first'

        store.set(HttpResponse(), 'token', 'second')

        assert provider() == 'second'
