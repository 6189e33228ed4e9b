"""Execute file actions against the navigation and preview collaborators."""

import logging
from typing import Any

from server.apps.explorer.actions import (
    EnterFolder,
    FileAction,
    Noop,
    ViewAudio,
    ViewCode,
    ViewDocumentOnline,
    ViewImage,
    ViewMarkdown,
    ViewVideo,
)
from server.apps.explorer.infrastructure.navigation import (
    Location,
    Navigator,
    PreviewWidgets,
)
from server.apps.explorer.logic.link_builder import LinkBuilder
from server.apps.explorer.records import FileRecord

logger = logging.getLogger(__name__)


def decorate(record: FileRecord, links: LinkBuilder) -> dict[str, Any]:
    """Serialize a media record with its view and download links.

    Args:
        record: Image or video record.
        links: Link builder for the current session.

    Returns:
        Record payload with ``fileAddr`` and ``downloadLink`` set.
    """
    return {
        **record.to_api(),
        'fileAddr': links.full_view(record),
        'downloadLink': links.download(record),
    }


def dispatch(
    action: FileAction,
    links: LinkBuilder,
    navigator: Navigator,
    previews: PreviewWidgets,
) -> bool:
    """Carry out a resolved file action.

    Args:
        action: Action returned by the classifier.
        links: Link builder for the current session.
        navigator: Client router.
        previews: Client preview widgets.

    Returns:
        False if the action was a no-op, True otherwise.
    """
    if isinstance(action, EnterFolder):
        navigator.push(Location(query=action.query()))
    elif isinstance(action, ViewImage):
        previews.show('image', {
            'imgList': [decorate(item, links) for item in action.file_list],
            'defaultIndex': action.index,
        })
    elif isinstance(action, ViewVideo):
        previews.show('video', {
            'videoList': [decorate(item, links) for item in action.file_list],
            'defaultIndex': action.index,
        })
    elif isinstance(action, ViewDocumentOnline):
        navigator.open(links.editor_target(action.record, action.mode))
    elif isinstance(action, ViewCode):
        previews.show('code', {'fileInfo': action.record.to_api()})
    elif isinstance(action, ViewMarkdown):
        previews.show('markdown', {'fileInfo': action.record.to_api()})
    elif isinstance(action, ViewAudio):
        previews.show('audio', {'audioObj': action.record.to_api()})
    elif isinstance(action, Noop):
        logger.debug('Click ignored: %s', action.reason)
        return False
    else:
        raise TypeError(f'Unknown file action: {action!r}')

    return True
