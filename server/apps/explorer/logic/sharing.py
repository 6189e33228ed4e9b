"""Share links, share expiry and copying share text to the clipboard."""

import logging
from datetime import date, datetime, time
from typing import Final, Protocol

from django.contrib import messages
from django.http import HttpRequest
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from server.apps.explorer.exceptions import ClipboardCopyError

logger = logging.getLogger(__name__)

_SHARE_PATH: Final = '/share/'

_COPY_INSTRUCTIONS: Final = (
    'Open the link in a browser and enter the extraction code to view the files'
)


class ClipboardWriter(Protocol):
    """Anything that can put text on the user's clipboard."""

    def copy(self, text: str) -> None:
        """Write ``text``, raising ClipboardCopyError on failure."""


def build_share_link(origin: str, share_batch_num: str) -> str:
    """Build the public link for a shared batch.

    The batch number is used as-is, it is already URL-safe.

    Args:
        origin: Scheme and host, e.g. ``https://pan.example.com``.
        share_batch_num: Share batch identifier.

    Returns:
        Full share link.
    """
    return f'{origin.rstrip("/")}{_SHARE_PATH}{share_batch_num}'


def _as_aware_datetime(value: datetime | date | str) -> datetime:
    if isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed is None:
            parsed_date = parse_date(value)
            if parsed_date is None:
                raise ValueError(f'Invalid share expiry: {value!r}')
            parsed = datetime.combine(parsed_date, time.min)
        value = parsed
    elif not isinstance(value, datetime):
        value = datetime.combine(value, time.min)

    if timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


def is_share_expired(
    expiry: datetime | date | str,
    now: datetime | None = None,
) -> bool:
    """Check if a share has expired.

    Args:
        expiry: Expiry timestamp, as a datetime, date or string.
        now: Reference time. Defaults to the current time.

    Returns:
        True if the expiry is at or before ``now``.

    Raises:
        ValueError: If ``expiry`` is a string that cannot be parsed.
    """
    reference = timezone.now() if now is None else _as_aware_datetime(now)
    return _as_aware_datetime(expiry) <= reference


def share_link_text(
    origin: str,
    share_batch_num: str,
    extraction_code: str | None,
) -> str:
    """Build the text copied when sharing a batch.

    Args:
        origin: Scheme and host.
        share_batch_num: Share batch identifier.
        extraction_code: Code protecting the batch, None for public shares.

    Returns:
        Two lines for public shares, three with the extraction code.
    """
    lines = [f'Share link: {build_share_link(origin, share_batch_num)}']
    if extraction_code is not None:
        lines.append(f'Extraction code: {extraction_code}')
    lines.append(_COPY_INSTRUCTIONS)
    return '\n'.join(lines)


def copy_share_link(
    request: HttpRequest,
    clipboard: ClipboardWriter,
    share_batch_num: str,
    extraction_code: str | None = None,
    *,
    success_message: str | None = 'Copied',
) -> bool:
    """Copy the share text to the clipboard and tell the user how it went.

    Failures are always reported. Pass ``success_message=None`` when the
    clipboard only queues the text and the client reports the outcome.

    Args:
        request: Current request, used for the origin and user messages.
        clipboard: Clipboard to write to.
        share_batch_num: Share batch identifier.
        extraction_code: Code protecting the batch.
        success_message: Message shown after a successful write.

    Returns:
        True if the clipboard accepted the text, False otherwise.
    """
    origin = f'{request.scheme}://{request.get_host()}'
    text = share_link_text(origin, share_batch_num, extraction_code)

    try:
        clipboard.copy(text)
    except ClipboardCopyError as error:
        logger.warning(
            'Failed to copy share link %s: %s',
            share_batch_num,
            error,
        )
        messages.error(request, 'Copy failed, please copy the link manually')
        return False

    if success_message:
        messages.success(request, success_message)
    return True
