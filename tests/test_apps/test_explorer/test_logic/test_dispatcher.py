"""Tests for executing file actions."""

import pytest

from server.apps.explorer.actions import (
    EditorOperation,
    EnterFolder,
    Noop,
    ViewAudio,
    ViewCode,
    ViewDocumentOnline,
    ViewImage,
    ViewMarkdown,
    ViewVideo,
)
from server.apps.explorer.logic.classifier import classify
from server.apps.explorer.logic.dispatcher import decorate, dispatch
from server.apps.explorer.records import FileRecord, NavigationContext


def _run(action, links, instructions):
    handled = dispatch(action, links, instructions, instructions)
    return handled, instructions.as_list()


class TestDecorate:
    """Tests for media list decoration."""

    def test_adds_view_and_download_links(self, links):
        """Test that decoration keeps passthrough keys and adds links."""
        record = FileRecord.from_api({
            'userFileId': 3,
            'fileName': 'cat',
            'extendName': 'png',
            'isDir': 0,
            'fileSize': 1024,
        })

        item = decorate(record, links)

        assert item['fileSize'] == 1024
        assert item['fileName'] == 'cat'
        assert item['fileAddr'] == links.full_view(record)
        assert item['downloadLink'] == links.download(record)


class TestDispatch:
    """Tests for dispatching each action."""

    def test_enter_folder_pushes_query(self, links, instructions):
        """Test folder entry becomes an in-place route push."""
        action = EnterFolder(target_path='/a/b/', extra_params={'fileType': 0})

        handled, recorded = _run(action, links, instructions)

        assert handled is True
        assert recorded == [{
            'type': 'push',
            'location': {
                'name': None,
                'query': {'filePath': '/a/b/', 'fileType': 0},
            },
            'href': '/file?filePath=%2Fa%2Fb%2F&fileType=0',
        }]

    def test_view_image_payload(self, links, instructions, make_record):
        """Test image viewer receives decorated list and index."""
        siblings = tuple(
            make_record(user_file_id=index, extend_name='png')
            for index in range(5)
        )

        handled, recorded = _run(
            ViewImage(index=2, file_list=siblings),
            links,
            instructions,
        )

        assert handled is True
        assert recorded[0]['type'] == 'preview'
        assert recorded[0]['widget'] == 'image'
        payload = recorded[0]['payload']
        assert payload['defaultIndex'] == 2
        assert len(payload['imgList']) == 5
        assert [item['userFileId'] for item in payload['imgList']] == [0, 1, 2, 3, 4]
        assert all('downloadLink' in item for item in payload['imgList'])

    def test_view_video_payload(self, links, instructions, make_record):
        """Test video player receives decorated list and index."""
        record = make_record(extend_name='mp4')

        _, recorded = _run(
            ViewVideo(index=0, file_list=(record,)),
            links,
            instructions,
        )

        assert recorded[0]['widget'] == 'video'
        assert recorded[0]['payload']['defaultIndex'] == 0
        assert recorded[0]['payload']['videoList'][0]['fileAddr'] == (
            links.full_view(record)
        )

    def test_document_opens_editor_window(self, links, instructions, make_record):
        """Test documents are handed to the editor in a new window."""
        action = ViewDocumentOnline(
            mode=EditorOperation.DETAIL,
            record=make_record(),
        )

        _, recorded = _run(action, links, instructions)

        assert recorded[0]['type'] == 'open'
        assert recorded[0]['target'] == '_blank'
        assert recorded[0]['href'].startswith('/explorer/editor/?')
        assert 'ot=detail' in recorded[0]['href']

    @pytest.mark.parametrize(('action_class', 'widget', 'key'), [
        (ViewCode, 'code', 'fileInfo'),
        (ViewMarkdown, 'markdown', 'fileInfo'),
        (ViewAudio, 'audio', 'audioObj'),
    ])
    def test_single_record_widgets(
        self,
        links,
        instructions,
        make_record,
        action_class,
        widget,
        key,
    ):
        """Test code, markdown and audio payloads."""
        record = make_record()

        _, recorded = _run(action_class(record=record), links, instructions)

        assert recorded == [{
            'type': 'preview',
            'widget': widget,
            'payload': {key: record.to_api()},
        }]

    def test_noop_does_nothing(self, links, instructions):
        """Test a blocked click records no instruction."""
        handled, recorded = _run(Noop(), links, instructions)

        assert handled is False
        assert recorded == []

    def test_unknown_action_raises(self, links, instructions):
        """Test that non-actions are rejected."""
        with pytest.raises(TypeError, match='Unknown file action'):
            dispatch(object(), links, instructions, instructions)


class TestClickScenario:
    """End-to-end classification and dispatch."""

    def test_image_in_images_view(self, links, instructions, make_record):
        """Test PNG click at index 2 of a 5-item images page."""
        siblings = [
            make_record(user_file_id=index, extend_name='png')
            for index in range(5)
        ]
        record = make_record(is_dir=False, extend_name='PNG', delete_flag=0)
        context = NavigationContext(file_type=1)

        action = classify(record, context, siblings, index=2)
        _, recorded = _run(action, links, instructions)

        assert action == ViewImage(index=2, file_list=tuple(siblings))
        assert recorded[0]['payload']['defaultIndex'] == 2
        assert len(recorded[0]['payload']['imgList']) == 5

    def test_folder_in_netdisk(self, links, instructions, make_record):
        """Test folder click in the netdisk uses filePath."""
        record = make_record(
            is_dir=True,
            file_name='b',
            file_path='/a/',
            share_file_path='/a/',
            delete_flag=0,
        )

        action = classify(record, NavigationContext(file_type=0))
        _, recorded = _run(action, links, instructions)

        assert action.target_path == '/a/b/'
        assert recorded[0]['location']['query'] == {
            'filePath': '/a/b/',
            'fileType': 0,
        }
