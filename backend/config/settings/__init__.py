"""
Settings module initialization.
Automatically selects settings based on DJANGO_ENV environment variable.

Nothing is selected when DJANGO_SETTINGS_MODULE names one of the
submodules directly (e.g. config.settings.test).
"""

import os

env = os.environ.get('DJANGO_ENV', 'dev')

if os.environ.get('DJANGO_SETTINGS_MODULE', __name__) != __name__:
    pass
elif env == 'prod':
    from .prod import *
elif env == 'test':
    from .test import *
else:
    from .dev import *
