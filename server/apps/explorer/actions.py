"""File actions produced by the classifier.

Each action is a small frozen dataclass. ``FileAction`` is the union of
all of them.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, final

from server.apps.explorer.records import FileRecord


class EditorOperation(enum.StrEnum):
    """Operation passed to the document editing service as ``ot``."""

    ADD = 'add'
    DETAIL = 'detail'
    EDIT = 'edit'


class NoopReason(enum.StrEnum):
    """Why a click resolved to nothing."""

    RECYCLED = 'recycled'
    RECYCLED_FOLDER = 'recycled_folder'
    UNSUPPORTED = 'unsupported'


@final
@dataclass(frozen=True, slots=True)
class EnterFolder:
    """Navigate into a folder on the current route."""

    target_path: str
    extra_params: Mapping[str, Any] = field(default_factory=dict)

    def query(self) -> dict[str, Any]:
        """Query parameters for the navigation target.

        Returns:
            ``filePath`` followed by the extra parameters.
        """
        return {'filePath': self.target_path, **self.extra_params}


@final
@dataclass(frozen=True, slots=True)
class ViewImage:
    """Open the image viewer on ``file_list[index]``."""

    index: int
    file_list: tuple[FileRecord, ...]


@final
@dataclass(frozen=True, slots=True)
class ViewVideo:
    """Open the video player on ``file_list[index]``."""

    index: int
    file_list: tuple[FileRecord, ...]


@final
@dataclass(frozen=True, slots=True)
class ViewDocumentOnline:
    """Hand the document over to the editing service."""

    mode: EditorOperation
    record: FileRecord


@final
@dataclass(frozen=True, slots=True)
class ViewCode:
    """Open the code previewer."""

    record: FileRecord


@final
@dataclass(frozen=True, slots=True)
class ViewMarkdown:
    """Open the markdown previewer."""

    record: FileRecord


@final
@dataclass(frozen=True, slots=True)
class ViewAudio:
    """Open the audio player."""

    record: FileRecord


@final
@dataclass(frozen=True, slots=True)
class Noop:
    """The click is blocked or not supported."""

    reason: NoopReason = NoopReason.UNSUPPORTED


FileAction = (
    EnterFolder
    | ViewImage
    | ViewVideo
    | ViewDocumentOnline
    | ViewCode
    | ViewMarkdown
    | ViewAudio
    | Noop
)

# Tag names exposed to the front end
ACTION_TAGS: dict[type, str] = {
    EnterFolder: 'enterFolder',
    ViewImage: 'viewImage',
    ViewVideo: 'viewVideo',
    ViewDocumentOnline: 'viewDocumentOnline',
    ViewCode: 'viewCode',
    ViewMarkdown: 'viewMarkdown',
    ViewAudio: 'viewAudio',
    Noop: 'noop',
}


def action_tag(action: FileAction) -> str:
    """Get the front-end tag for an action.

    Args:
        action: Resolved file action.

    Returns:
        camelCase tag such as ``viewImage``.
    """
    return ACTION_TAGS[type(action)]
