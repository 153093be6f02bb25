"""
Settings used by the test suite: in-memory SQLite and fixed admin credentials.
"""
import os

os.environ.setdefault('SECRET_KEY', 'test-secret-key-not-for-production')
os.environ.setdefault('DEBUG', 'true')
os.environ['DB_ENGINE'] = 'sqlite'
os.environ['ADMIN_LOGIN'] = 'admin'
os.environ['ADMIN_PASSWORD'] = 'S3cret-pass'

from config.settings import *  # noqa: E402,F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

ALLOWED_HOSTS = ['testserver', 'localhost', '127.0.0.1']

LOGGING['loggers']['productmanager']['level'] = 'DEBUG'  # noqa: F405
# caplog listens on the root logger
LOGGING['loggers']['productmanager']['propagate'] = True  # noqa: F405
