"""Tests for listing display helpers."""

import pytest
from django.conf import settings as django_settings
from django.contrib.staticfiles import finders

from server.apps.explorer.logic.display import (
    complete_file_name,
    file_icon,
    format_size,
)
from server.apps.explorer.records import NavigationContext


class TestFormatSize:
    """Tests for format_size."""

    def test_zero(self):
        """Test empty files."""
        assert format_size(0) == '0KB'

    def test_unknown(self):
        """Test missing size."""
        assert format_size(None) == '_'

    def test_small_files_round_to_whole_kb(self):
        """Test that sizes below half a KB read 0KB."""
        assert format_size(500) == '0KB'

    @pytest.mark.parametrize(('size', 'expected'), [
        (512, '1KB'),
        (1024, '1KB'),
        (1536, '2KB'),
        (1024 * 1000, '1000KB'),
        (2_000_000, '1.9MB'),
        (1024 ** 2, '1.0MB'),
        (5 * 1024 ** 3, '5.00GB'),
        (1024 ** 4, '1.000TB'),
        (3 * 1024 ** 4 + 1024 ** 3 // 2, '3.000TB'),
    ])
    def test_units(self, size, expected):
        """Test every unit branch."""
        assert format_size(size) == expected

    def test_ties_round_up(self):
        """Test that exact halves round away from zero."""
        assert format_size(1024 ** 2 * 5 // 4) == '1.3MB'
        assert format_size(2560) == '3KB'


class TestCompleteFileName:
    """Tests for complete_file_name."""

    def test_file_with_extension(self, make_record):
        """Test file name joined with extension."""
        assert complete_file_name(make_record()) == 'report.pdf'

    def test_file_without_extension(self, make_record):
        """Test file with no extension."""
        assert complete_file_name(make_record(extend_name='')) == 'report'

    def test_folder_ignores_extension(self, make_record):
        """Test that folders never get an extension."""
        record = make_record(is_dir=True, file_name='v1', extend_name='0')

        assert complete_file_name(record) == 'v1'

    def test_highlight(self, make_record):
        """Test search highlight replaces the name when requested."""
        record = make_record(highlight_fields='<em>rep</em>ort')

        assert complete_file_name(record, highlight=True) == '<em>rep</em>ort.pdf'
        assert complete_file_name(record) == 'report.pdf'

    def test_highlight_falls_back_to_name(self, make_record):
        """Test highlight request without highlight data."""
        assert complete_file_name(make_record(), highlight=True) == 'report.pdf'


class TestFileIcon:
    """Tests for file_icon."""

    def test_folder_icon(self, links, make_record):
        """Test folders get the folder icon."""
        record = make_record(is_dir=True)

        icon = file_icon(record, NavigationContext(file_type=0), links)

        assert icon == '/static/explorer/icons/dir.svg'

    @pytest.mark.parametrize('extension', ['jpg', 'PNG', 'gif', 'mp4'])
    def test_media_gets_thumbnail(self, links, make_record, extension):
        """Test images and videos show a live thumbnail."""
        record = make_record(extend_name=extension)

        icon = file_icon(record, NavigationContext(file_type=0), links)

        assert icon == links.thumbnail(record)

    def test_recycle_bin_media_gets_icon(self, links, make_record):
        """Test that recycled media show the type icon instead."""
        record = make_record(extend_name='mp4')

        icon = file_icon(record, NavigationContext(file_type=6), links)

        assert icon == '/static/explorer/icons/unknown.svg'

    def test_known_extension_icon(self, links, make_record):
        """Test mapped extension."""
        record = make_record(extend_name='DOCX')

        icon = file_icon(record, NavigationContext(file_type=0), links)

        assert icon == '/static/explorer/icons/word.svg'

    def test_unknown_extension_icon(self, links, make_record, settings):
        """Test fallback icon."""
        settings.EXPLORER_UNKNOWN_ICON = 'icons/other.png'
        record = make_record(extend_name='xyz')

        icon = file_icon(record, NavigationContext(file_type=0), links)

        assert icon == '/static/icons/other.png'

    @pytest.mark.parametrize('icon', sorted({
        *django_settings.EXPLORER_FILE_ICONS.values(),
        django_settings.EXPLORER_UNKNOWN_ICON,
    }))
    def test_configured_icons_are_shipped(self, icon):
        """Test every configured icon resolves to a static file."""
        assert finders.find(icon) is not None
