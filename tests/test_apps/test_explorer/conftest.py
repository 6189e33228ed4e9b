"""Shared fixtures for explorer app tests."""

import pytest

from server.apps.explorer.infrastructure.navigation import ClientInstructions
from server.apps.explorer.logic.link_builder import LinkBuilder
from server.apps.explorer.records import FileRecord

ORIGIN = 'https://pan.example.com'


@pytest.fixture
def make_record():
    """Factory for file records with sensible defaults.

    Returns:
        Callable accepting FileRecord field overrides.
    """
    def factory(**overrides):
        fields = {
            'user_file_id': 42,
            'file_id': 7,
            'file_name': 'report',
            'extend_name': 'pdf',
            'is_dir': False,
            'file_path': '/docs/',
            'file_addr': 'upload/2024/report.pdf',
            'share_file_path': '/shared/',
            'delete_flag': 0,
        }
        fields.update(overrides)
        return FileRecord(**fields)

    return factory


@pytest.fixture
def token_holder():
    """Mutable holder for the current session token.

    Returns:
        Dict with a ``token`` key.
    """
    return {'token': 'tok-1'}


@pytest.fixture
def links(token_holder):
    """Create link builder reading the token from token_holder.

    Args:
        token_holder: Token holder fixture.

    Returns:
        LinkBuilder instance.
    """
    return LinkBuilder(
        token_provider=lambda: token_holder['token'],
        base_context='/api',
        origin=ORIGIN,
    )


@pytest.fixture
def instructions():
    """Create an empty client instruction channel.

    Returns:
        ClientInstructions instance.
    """
    return ClientInstructions(current_path='/file')
