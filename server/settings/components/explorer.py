"""File explorer settings."""

from decouple import Csv

from server.settings.components import config

# Backend context path prepended to every file-transfer link
EXPLORER_BASE_CONTEXT = config('EXPLORER_BASE_CONTEXT', default='/api')

# Cookie holding the session token, and the domain cookies are scoped to
EXPLORER_TOKEN_KEY_NAME = config('EXPLORER_TOKEN_KEY_NAME', default='token')
EXPLORER_COOKIE_DOMAIN = config('EXPLORER_COOKIE_DOMAIN', default=None)

# Document editing service (OnlyOffice)
EXPLORER_EDITOR_ROUTE = 'explorer:onlyoffice'
EXPLORER_EDITOR_URL = config('EXPLORER_EDITOR_URL', default='')

EXPLORER_OFFICE_FILE_TYPES = config(
    'EXPLORER_OFFICE_FILE_TYPES',
    cast=Csv(),
    default='ppt,pptx,doc,docx,xls,xlsx',
)

# Suffix -> code editor mode for the code previewer
EXPLORER_CODE_FILE_MODES = {
    'c': 'text/x-csrc',
    'cpp': 'text/x-c++src',
    'cs': 'text/x-csharp',
    'css': 'text/css',
    'go': 'text/x-go',
    'h': 'text/x-csrc',
    'html': 'text/html',
    'java': 'text/x-java',
    'js': 'text/javascript',
    'json': 'application/json',
    'jsp': 'application/x-jsp',
    'less': 'text/x-less',
    'lua': 'text/x-lua',
    'php': 'text/x-php',
    'properties': 'text/x-properties',
    'py': 'text/x-python',
    'sass': 'text/x-sass',
    'scss': 'text/x-scss',
    'sh': 'text/x-sh',
    'sql': 'text/x-sql',
    'ts': 'text/typescript',
    'txt': 'text/plain',
    'vue': 'text/x-vue',
    'xml': 'application/xml',
    'yml': 'text/x-yaml',
}

# Extension -> static icon path, plus the fallbacks
EXPLORER_FILE_ICONS = {
    'dir': 'explorer/icons/dir.svg',
    'avi': 'explorer/icons/avi.svg',
    'css': 'explorer/icons/css.svg',
    'csv': 'explorer/icons/csv.svg',
    'doc': 'explorer/icons/word.svg',
    'docx': 'explorer/icons/word.svg',
    'exe': 'explorer/icons/exe.svg',
    'html': 'explorer/icons/html.svg',
    'js': 'explorer/icons/js.svg',
    'json': 'explorer/icons/json.svg',
    'md': 'explorer/icons/markdown.svg',
    'mp3': 'explorer/icons/mp3.svg',
    'pdf': 'explorer/icons/pdf.svg',
    'ppt': 'explorer/icons/ppt.svg',
    'pptx': 'explorer/icons/ppt.svg',
    'rar': 'explorer/icons/rar.svg',
    'svg': 'explorer/icons/svg.svg',
    'txt': 'explorer/icons/txt.svg',
    'xls': 'explorer/icons/excel.svg',
    'xlsx': 'explorer/icons/excel.svg',
    'zip': 'explorer/icons/zip.svg',
}
EXPLORER_UNKNOWN_ICON = 'explorer/icons/unknown.svg'
