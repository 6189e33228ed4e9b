"""Token-bearing file-transfer links and editor handoff targets.

The token provider is called on every link, never cached, so links
follow token rotation.
"""

import enum
import logging
from typing import Any, Final, final

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import HttpRequest
from django.utils.http import urlencode

from server.apps.explorer.actions import EditorOperation
from server.apps.explorer.infrastructure.navigation import Location
from server.apps.explorer.infrastructure.session_store import (
    CookieSessionStore,
    TokenProvider,
)
from server.apps.explorer.records import FileRecord

logger = logging.getLogger(__name__)

_PREVIEW_ENDPOINT: Final = '/filetransfer/preview'
_DOWNLOAD_ENDPOINT: Final = '/filetransfer/downloadfile'


class LinkKind(enum.StrEnum):
    """Kind of file-transfer link."""

    THUMBNAIL = 'thumbnail'
    FULL_VIEW = 'fullView'
    DOWNLOAD = 'download'


def get_base_context() -> str:
    """Get the backend context path.

    Returns:
        Context path from settings, without a trailing slash.
    """
    return getattr(settings, 'EXPLORER_BASE_CONTEXT', '').rstrip('/')


def get_editor_route() -> str:
    """Get the route name of the document editor page.

    Returns:
        Route name from settings or ``explorer:onlyoffice``.
    """
    return getattr(settings, 'EXPLORER_EDITOR_ROUTE', 'explorer:onlyoffice')


def _blank_if_none(value: Any) -> Any:
    return '' if value is None else value


@final
class LinkBuilder:
    """Builds authenticated links for one origin and backend context."""

    def __init__(
        self,
        token_provider: TokenProvider,
        base_context: str | None = None,
        origin: str = '',
    ) -> None:
        """Initialize the builder.

        Args:
            token_provider: Callable returning the current session token.
            base_context: Backend context path. Read from settings if None.
            origin: Scheme and host, e.g. ``https://pan.example.com``.
        """
        self._token_provider = token_provider
        self._base_context = (
            get_base_context() if base_context is None else base_context.rstrip('/')
        )
        self._origin = origin.rstrip('/')

    @classmethod
    def from_request(cls, request: HttpRequest) -> 'LinkBuilder':
        """Build a link builder bound to the request's origin and cookies.

        Args:
            request: Current request.

        Returns:
            LinkBuilder reading the token from the request cookies.
        """
        store = CookieSessionStore(request)
        return cls(
            token_provider=store.token_provider(),
            origin=f'{request.scheme}://{request.get_host()}',
        )

    @property
    def absolute_base(self) -> str:
        """Scheme, host and backend context path."""
        return f'{self._origin}{self._base_context}'

    def link(self, record: FileRecord, kind: LinkKind) -> str:
        """Build a file-transfer link.

        Thumbnail and full-view links share the preview endpoint and differ
        only in ``isMin``. Download links carry no ``isMin``.

        Args:
            record: File to link to.
            kind: Link kind.

        Returns:
            Link relative to the origin.
        """
        query: dict[str, Any] = {'userFileId': _blank_if_none(record.user_file_id)}
        if kind is LinkKind.DOWNLOAD:
            endpoint = _DOWNLOAD_ENDPOINT
        else:
            endpoint = _PREVIEW_ENDPOINT
            query['isMin'] = 'true' if kind is LinkKind.THUMBNAIL else 'false'

        query['shareBatchNum'] = _blank_if_none(record.share_batch_num)
        query['extractionCode'] = _blank_if_none(record.extraction_code)
        query['token'] = _blank_if_none(self._token_provider())

        return f'{self._base_context}{endpoint}?{urlencode(query)}'

    def thumbnail(self, record: FileRecord) -> str:
        """Build the thumbnail link."""
        return self.link(record, LinkKind.THUMBNAIL)

    def full_view(self, record: FileRecord) -> str:
        """Build the full-size preview link."""
        return self.link(record, LinkKind.FULL_VIEW)

    def download(self, record: FileRecord) -> str:
        """Build the download link."""
        return self.link(record, LinkKind.DOWNLOAD)

    def editor_target(
        self,
        record: FileRecord,
        operation: EditorOperation,
    ) -> Location:
        """Build the handoff target for the document editing service.

        Args:
            record: Document to open, or the document to create for ``add``.
            operation: Create, view or edit.

        Returns:
            Location on the editor route.

        Raises:
            ValidationError: If the record lacks what the operation needs.
        """
        if operation is EditorOperation.ADD:
            if not record.file_name or not record.extend_name:
                raise ValidationError(
                    'New documents need a file name and an extension',
                )
            query: dict[str, Any] = {
                'fileAddr': self.absolute_base,
                'fileName': record.file_name,
                'filePath': record.file_path,
                'extendName': record.extend_name,
                'ot': operation.value,
            }
        else:
            if record.user_file_id in (None, ''):
                raise ValidationError(
                    f'Cannot {operation.value} a document without userFileId',
                )
            query = {
                'fileAddr': f'{self._origin}{self.full_view(record)}',
                'fileName': f'{record.file_name}.{record.extend_name}',
                'filePath': record.file_addr,
                'fileId': record.file_id,
                'userFileId': record.user_file_id,
                'extendName': record.extend_name,
                'ot': operation.value,
            }

        logger.info(
            'Editor handoff (%s): %s',
            operation.value,
            query['fileName'],
        )
        return Location(query=query, route_name=get_editor_route())
