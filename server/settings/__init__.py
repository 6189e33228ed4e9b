"""Django settings for the explorer project.

Settings are split into components and assembled with
``django-split-settings``. Environment specific overrides live in
``environments/{DJANGO_ENV}.py`` and are optional.
"""

from os import environ

from split_settings.tools import include, optional

environ.setdefault('DJANGO_ENV', 'development')
_ENV = environ['DJANGO_ENV']

_base_settings = (
    'components/common.py',
    'components/logging.py',
    'components/explorer.py',
    # Optionally override some settings:
    optional('environments/{0}.py'.format(_ENV)),
)

include(*_base_settings)
