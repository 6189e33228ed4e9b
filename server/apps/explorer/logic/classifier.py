"""Classify a clicked file or folder into a file action.

Files are matched against an ordered table of (predicate, constructor)
pairs. The first matching row wins, so the row order is part of the
behaviour.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Final, final

from django.conf import settings

from server.apps.explorer.actions import (
    EditorOperation,
    EnterFolder,
    FileAction,
    Noop,
    NoopReason,
    ViewAudio,
    ViewCode,
    ViewDocumentOnline,
    ViewImage,
    ViewMarkdown,
    ViewVideo,
)
from server.apps.explorer.records import (
    FILE_TYPE_ALL,
    FILE_TYPE_IMAGE,
    FILE_TYPE_MY_SHARES,
    FILE_TYPE_RECYCLE_BIN,
    FILE_TYPE_VIDEO,
    FileRecord,
    NavigationContext,
)

logger = logging.getLogger(__name__)

_IMAGE_EXTENSIONS: Final = frozenset(('png', 'jpg', 'jpeg', 'gif', 'svg'))
_PDF_EXTENSION: Final = 'pdf'
_MARKDOWN_EXTENSIONS: Final = frozenset(('markdown', 'md'))
_VIDEO_EXTENSIONS: Final = frozenset(('mp4',))
_AUDIO_EXTENSIONS: Final = frozenset(('mp3',))

# Code modes are keyed by `yml` only
_CODE_ALIASES: Final = {'yaml': 'yml'}

_DEFAULT_OFFICE_FILE_TYPES: Final = ('ppt', 'pptx', 'doc', 'docx', 'xls', 'xlsx')


@final
@dataclass(frozen=True, slots=True)
class ExtensionCategories:
    """Configurable extension sets used by the classifier."""

    office: frozenset[str]
    code: frozenset[str]

    @classmethod
    def build(
        cls,
        office: Iterable[str],
        code: Iterable[str],
    ) -> 'ExtensionCategories':
        """Build categories with normalized (lowercase) extensions.

        Args:
            office: Extensions the editing service can open.
            code: Extensions the code previewer can open.

        Returns:
            ExtensionCategories instance.
        """
        return cls(
            office=frozenset(ext.strip().lower() for ext in office if ext.strip()),
            code=frozenset(ext.strip().lower() for ext in code if ext.strip()),
        )

    def is_document(self, extension: str) -> bool:
        """Check if the editing service should open the extension."""
        return extension == _PDF_EXTENSION or extension in self.office

    def is_code(self, extension: str) -> bool:
        """Check if the code previewer should open the extension."""
        return _CODE_ALIASES.get(extension, extension) in self.code


def get_office_file_types() -> tuple[str, ...]:
    """Get extensions handled by the document editing service.

    Returns:
        Extensions from settings or the default office set.
    """
    return tuple(
        getattr(settings, 'EXPLORER_OFFICE_FILE_TYPES', _DEFAULT_OFFICE_FILE_TYPES),
    )


def get_code_file_modes() -> dict[str, str]:
    """Get the suffix to code-mode mapping.

    Returns:
        Mapping from settings, empty if not configured.
    """
    return dict(getattr(settings, 'EXPLORER_CODE_FILE_MODES', {}))


def get_extension_categories() -> ExtensionCategories:
    """Build extension categories from current settings.

    Returns:
        ExtensionCategories read at call time.
    """
    return ExtensionCategories.build(
        office=get_office_file_types(),
        code=get_code_file_modes(),
    )


@final
@dataclass(frozen=True, slots=True)
class _Click:
    record: FileRecord
    context: NavigationContext
    siblings: tuple[FileRecord, ...]
    index: int


def _view_image(click: _Click) -> FileAction:
    # The images view previews the whole page, other views the file alone
    if click.context.file_type == FILE_TYPE_IMAGE:
        return ViewImage(index=click.index, file_list=click.siblings)
    return ViewImage(index=0, file_list=(click.record,))


def _view_video(click: _Click) -> FileAction:
    if click.context.file_type == FILE_TYPE_VIDEO:
        return ViewVideo(index=click.index, file_list=click.siblings)
    return ViewVideo(index=0, file_list=(click.record,))


def _view_document(click: _Click) -> FileAction:
    return ViewDocumentOnline(mode=EditorOperation.DETAIL, record=click.record)


def _view_code(click: _Click) -> FileAction:
    return ViewCode(record=click.record)


def _view_markdown(click: _Click) -> FileAction:
    return ViewMarkdown(record=click.record)


def _view_audio(click: _Click) -> FileAction:
    return ViewAudio(record=click.record)


def _is_image(extension: str, categories: ExtensionCategories) -> bool:
    return extension in _IMAGE_EXTENSIONS


def _is_document(extension: str, categories: ExtensionCategories) -> bool:
    return categories.is_document(extension)


def _is_code(extension: str, categories: ExtensionCategories) -> bool:
    return categories.is_code(extension)


def _is_markdown(extension: str, categories: ExtensionCategories) -> bool:
    return extension in _MARKDOWN_EXTENSIONS


def _is_video(extension: str, categories: ExtensionCategories) -> bool:
    return extension in _VIDEO_EXTENSIONS


def _is_audio(extension: str, categories: ExtensionCategories) -> bool:
    return extension in _AUDIO_EXTENSIONS


_Predicate = Callable[[str, ExtensionCategories], bool]
_Constructor = Callable[[_Click], FileAction]

_FILE_RULES: Final[tuple[tuple[_Predicate, _Constructor], ...]] = (
    (_is_image, _view_image),
    (_is_document, _view_document),
    (_is_code, _view_code),
    (_is_markdown, _view_markdown),
    (_is_video, _view_video),
    (_is_audio, _view_audio),
)


def _classify_folder(
    record: FileRecord,
    context: NavigationContext,
) -> FileAction:
    shared_target = f'{record.share_file_path}{record.file_name}/'

    if context.is_share_route:
        return EnterFolder(target_path=shared_target)

    if context.file_type == FILE_TYPE_MY_SHARES:
        return EnterFolder(
            target_path=shared_target,
            extra_params={
                'fileType': FILE_TYPE_MY_SHARES,
                'shareBatchNum': record.share_batch_num,
            },
        )

    if context.file_type != FILE_TYPE_RECYCLE_BIN:
        return EnterFolder(
            target_path=f'{record.file_path}{record.file_name}/',
            extra_params={'fileType': FILE_TYPE_ALL},
        )

    return Noop(reason=NoopReason.RECYCLED_FOLDER)


def classify(
    record: FileRecord,
    context: NavigationContext,
    siblings: Iterable[FileRecord] = (),
    index: int = 0,
    *,
    categories: ExtensionCategories | None = None,
) -> FileAction:
    """Decide what a click on a file or folder does.

    Args:
        record: Clicked file or folder.
        context: View the click happened in.
        siblings: Records listed alongside the clicked one.
        index: Position of the clicked record in ``siblings``.
        categories: Extension sets to use. Read from settings if None.

    Returns:
        The resolved file action. Never raises for unknown input.
    """
    if record.is_recycled:
        return Noop(reason=NoopReason.RECYCLED)

    if record.is_dir:
        return _classify_folder(record, context)

    if categories is None:
        categories = get_extension_categories()

    click = _Click(
        record=record,
        context=context,
        siblings=tuple(siblings),
        index=index,
    )
    extension = record.extension
    for matches, construct in _FILE_RULES:
        if matches(extension, categories):
            return construct(click)

    logger.debug(
        'No preview for extension %r (file: %s)',
        extension,
        record.file_name,
    )
    return Noop(reason=NoopReason.UNSUPPORTED)
