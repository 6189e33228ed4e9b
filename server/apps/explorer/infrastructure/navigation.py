"""Navigation targets and the client instruction channel.

The browser owns the router and the preview widgets. The server side
records what the client should do next as a list of instructions and
returns them in the response.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final, Protocol, final

from django.urls import reverse
from django.utils.http import urlencode

# Instruction kinds understood by the front end
PUSH: Final = 'push'
OPEN: Final = 'open'
PREVIEW: Final = 'preview'
COPY: Final = 'copy'


@final
@dataclass(frozen=True, slots=True)
class Location:
    """Navigation target: a route plus query parameters.

    A ``route_name`` of None means the current route.
    """

    query: Mapping[str, Any] = field(default_factory=dict)
    route_name: str | None = None

    def query_string(self) -> str:
        """Encode the query, rendering None values as empty strings."""
        return urlencode(
            {key: '' if value is None else value for key, value in self.query.items()},
        )

    def to_href(self, current_path: str = '') -> str:
        """Resolve the location into an href.

        Args:
            current_path: Path used when the location targets the current
                route.

        Returns:
            Path and query string.
        """
        path = reverse(self.route_name) if self.route_name else current_path
        query_string = self.query_string()
        if not query_string:
            return path
        return f'{path}?{query_string}'

    def as_dict(self) -> dict[str, Any]:
        """Serialize for the client router."""
        return {'name': self.route_name, 'query': dict(self.query)}


class Navigator(Protocol):
    """Client-side router."""

    def push(self, location: Location) -> None:
        """Transition to ``location`` in place."""

    def open(self, location: Location) -> None:
        """Open ``location`` in a new window."""


class PreviewWidgets(Protocol):
    """In-app preview widgets (image, video, code, markdown, audio)."""

    def show(self, widget: str, payload: Mapping[str, Any]) -> None:
        """Render ``payload`` with the named widget."""


@final
class ClientInstructions:
    """Collects instructions for the browser.

    Implements the navigator, preview widget and clipboard interfaces so
    the dispatcher and share helpers can talk to the client through a
    single response.
    """

    def __init__(self, current_path: str = '') -> None:
        """Initialize an empty instruction list.

        Args:
            current_path: Path of the page the click came from.
        """
        self._current_path = current_path
        self._instructions: list[dict[str, Any]] = []

    def push(self, location: Location) -> None:
        """Record an in-place route transition."""
        self._instructions.append({
            'type': PUSH,
            'location': location.as_dict(),
            'href': location.to_href(self._current_path),
        })

    def open(self, location: Location) -> None:
        """Record opening a new window."""
        self._instructions.append({
            'type': OPEN,
            'href': location.to_href(self._current_path),
            'target': '_blank',
        })

    def show(self, widget: str, payload: Mapping[str, Any]) -> None:
        """Record showing a preview widget."""
        self._instructions.append({
            'type': PREVIEW,
            'widget': widget,
            'payload': dict(payload),
        })

    def copy(self, text: str) -> None:
        """Record writing text to the clipboard."""
        self._instructions.append({'type': COPY, 'text': text})

    def as_list(self) -> list[dict[str, Any]]:
        """Get recorded instructions in order."""
        return list(self._instructions)

    def __len__(self) -> int:
        """Number of recorded instructions."""
        return len(self._instructions)
