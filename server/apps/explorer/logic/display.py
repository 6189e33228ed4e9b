"""Display helpers for file listings."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Final

from django.conf import settings
from django.templatetags.static import static

from server.apps.explorer.logic.link_builder import LinkBuilder
from server.apps.explorer.records import (
    FILE_TYPE_RECYCLE_BIN,
    FileRecord,
    NavigationContext,
)

_UNIT: Final = 1024

# (upper bound, divisor, decimals, label)
_SIZE_STEPS: Final = (
    (_UNIT ** 2, _UNIT, 0, 'KB'),
    (_UNIT ** 3, _UNIT ** 2, 1, 'MB'),
    (_UNIT ** 4, _UNIT ** 3, 2, 'GB'),
)
_LARGEST_STEP: Final = (_UNIT ** 4, 3, 'TB')

# Listing shows a live thumbnail for these instead of a type icon
_THUMBNAIL_EXTENSIONS: Final = frozenset(('jpg', 'png', 'jpeg', 'gif', 'mp4'))

_DIR_ICON_KEY: Final = 'dir'


def _to_fixed(value: float, decimals: int) -> str:
    # Exact ties round away from zero, like Number.prototype.toFixed
    quantum = Decimal(1).scaleb(-decimals)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_size(size: float | None) -> str:
    """Format a byte count for the file list.

    Sizes below 1 MiB are shown in whole KB, so anything under 512 bytes
    reads ``0KB``.

    Args:
        size: Size in bytes, None when unknown.

    Returns:
        Size with unit, ``_`` when unknown.
    """
    if size is None:
        return '_'
    if size == 0:
        return '0KB'

    for upper_bound, divisor, decimals, label in _SIZE_STEPS:
        if size < upper_bound:
            return f'{_to_fixed(size / divisor, decimals)}{label}'

    divisor, decimals, label = _LARGEST_STEP
    return f'{_to_fixed(size / divisor, decimals)}{label}'


def complete_file_name(record: FileRecord, highlight: bool = False) -> str:
    """Join file name and extension.

    Args:
        record: File or folder.
        highlight: Use the search-highlighted name when available.

    Returns:
        Display name, e.g. ``report.pdf``.
    """
    if highlight and record.highlight_fields:
        name = record.highlight_fields
    else:
        name = record.file_name

    if not record.is_dir and record.extend_name:
        return f'{name}.{record.extend_name}'
    return name


def get_file_icons() -> dict[str, str]:
    """Get the extension to icon mapping.

    Returns:
        Static paths keyed by lowercase extension (and ``dir``).
    """
    return dict(getattr(settings, 'EXPLORER_FILE_ICONS', {}))


def get_unknown_icon() -> str:
    """Get the icon for unrecognized files.

    Returns:
        Static path from settings.
    """
    return getattr(settings, 'EXPLORER_UNKNOWN_ICON', 'explorer/icons/unknown.svg')


def file_icon(
    record: FileRecord,
    context: NavigationContext,
    links: LinkBuilder,
) -> str:
    """Pick the image shown next to a record in the listing.

    Args:
        record: File or folder.
        context: Current view.
        links: Link builder for thumbnails.

    Returns:
        Thumbnail link or static icon URL.
    """
    icons = get_file_icons()
    if record.is_dir:
        return static(icons.get(_DIR_ICON_KEY, get_unknown_icon()))

    extension = record.extension
    # Recycled files cannot be previewed, not even as thumbnails
    if (
        context.file_type != FILE_TYPE_RECYCLE_BIN
        and extension in _THUMBNAIL_EXTENSIONS
    ):
        return links.thumbnail(record)

    if extension in icons:
        return static(icons[extension])
    return static(get_unknown_icon())
