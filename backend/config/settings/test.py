"""
Test settings for the video-production tracker.
"""

import copy

from .base import *

DEBUG = False

SECRET_KEY = 'test-secret-key'

ALLOWED_HOSTS = ['testserver', 'localhost']

# =============================================================================
# DATABASE - Test (SQLite in memory)
# =============================================================================
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

RECORD_STORE_BACKEND = config('RECORD_STORE_BACKEND', default='django')

# =============================================================================
# LOGGING - Test (no log file)
# =============================================================================
LOGGING = copy.deepcopy(LOGGING)
LOGGING['handlers']['file'] = {'class': 'logging.NullHandler'}
# Let pytest's caplog see application records
for _logger in ('application', 'infrastructure', 'presentation'):
    LOGGING['loggers'][_logger]['propagate'] = True
    LOGGING['loggers'][_logger]['handlers'] = []
