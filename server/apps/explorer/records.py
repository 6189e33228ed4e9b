"""File records and navigation context read by the explorer.

Both are immutable snapshots. Records are built from backend API payloads
(camelCase keys) and the context from the current route's query.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final, final

# fileType query values for the logical views
FILE_TYPE_ALL: Final = 0
FILE_TYPE_IMAGE: Final = 1
FILE_TYPE_VIDEO: Final = 3
FILE_TYPE_RECYCLE_BIN: Final = 6
FILE_TYPE_MY_SHARES: Final = 8

# Route that lists somebody else's shared batch
SHARE_ROUTE_NAME: Final = 'share'

# API key -> attribute name for the fields the explorer interprets
_API_FIELDS: Final = {
    'userFileId': 'user_file_id',
    'fileId': 'file_id',
    'fileName': 'file_name',
    'extendName': 'extend_name',
    'isDir': 'is_dir',
    'filePath': 'file_path',
    'fileAddr': 'file_addr',
    'shareFilePath': 'share_file_path',
    'shareBatchNum': 'share_batch_num',
    'extractionCode': 'extraction_code',
    'deleteFlag': 'delete_flag',
    'highlightFields': 'highlight_fields',
}

# Attributes the explorer treats as text
_TEXT_FIELDS: Final = (
    'file_name',
    'extend_name',
    'file_path',
    'file_addr',
    'share_file_path',
    'share_batch_num',
    'extraction_code',
    'highlight_fields',
)


@final
@dataclass(frozen=True, slots=True)
class FileRecord:
    """A file or folder as returned by the backend listing API.

    Keys the explorer does not interpret (size, upload time, ...) are
    kept in ``extra`` so they survive the trip back into widget payloads.
    """

    user_file_id: str | int | None = None
    file_id: str | int | None = None
    file_name: str = ''
    extend_name: str | None = None
    is_dir: bool = False
    file_path: str = ''
    file_addr: str = ''
    share_file_path: str = ''
    share_batch_num: str | None = None
    extraction_code: str | None = None
    delete_flag: int | None = None
    highlight_fields: str | None = None
    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> 'FileRecord':
        """Build a record from an API payload.

        Args:
            payload: Mapping with camelCase keys from the backend.

        Returns:
            FileRecord with unknown keys preserved in ``extra``.
        """
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in payload.items():
            attribute = _API_FIELDS.get(key)
            if attribute is None:
                extra[key] = value
            else:
                known[attribute] = value

        # API sends 0/1
        known['is_dir'] = bool(known.get('is_dir'))
        for attribute in _TEXT_FIELDS:
            value = known.get(attribute)
            if value is not None and not isinstance(value, str):
                known[attribute] = str(value)
        for attribute in ('file_name', 'file_path', 'file_addr', 'share_file_path'):
            if known.get(attribute) is None:
                known.pop(attribute, None)

        return cls(**known, extra=extra)

    def to_api(self) -> dict[str, Any]:
        """Serialize back into the backend's camelCase shape.

        Returns:
            Dictionary with passthrough keys and the interpreted fields.
        """
        payload = dict(self.extra)
        for key, attribute in _API_FIELDS.items():
            payload[key] = getattr(self, attribute)
        payload['isDir'] = int(self.is_dir)
        return payload

    @property
    def extension(self) -> str:
        """Lowercase extension, empty when the record has none."""
        return (self.extend_name or '').lower()

    @property
    def is_recycled(self) -> bool:
        """Check if the record sits in the recycle bin."""
        return self.delete_flag is not None and self.delete_flag != 0


@final
@dataclass(frozen=True, slots=True)
class NavigationContext:
    """Snapshot of the view a click happened in.

    ``file_type`` is None when the route carries no usable fileType, which
    matches none of the specific views.
    """

    file_type: int | None = None
    route_name: str | None = None

    @classmethod
    def from_query(
        cls,
        query: Mapping[str, Any],
        route_name: str | None = None,
    ) -> 'NavigationContext':
        """Build a context from route query parameters.

        Args:
            query: Query mapping holding ``fileType``.
            route_name: Name of the current route.

        Returns:
            NavigationContext for the route.
        """
        return cls(
            file_type=_parse_file_type(query.get('fileType')),
            route_name=route_name,
        )

    @property
    def is_share_route(self) -> bool:
        """Check if the view lists somebody else's share."""
        return (self.route_name or '').lower() == SHARE_ROUTE_NAME


def _parse_file_type(raw_value: Any) -> int | None:
    if raw_value is None or isinstance(raw_value, bool):
        return None
    if isinstance(raw_value, int):
        return raw_value
    if isinstance(raw_value, float):
        return int(raw_value) if raw_value.is_integer() else None
    try:
        return int(str(raw_value).strip() or 0)
    except ValueError:
        return None
