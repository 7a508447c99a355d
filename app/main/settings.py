# ------------------------------------------------------------------------------------------------ #
# Copyright (c) 2025 Carmenda. All rights reserved.                                                #
# This program is distributed under the terms of the GNU General Public License: GPL-3.0-or-later  #
# ------------------------------------------------------------------------------------------------ #

"""Settings for the Django project."""

from pathlib import Path

import environ
from django.core.management.utils import get_random_secret_key

env = environ.FileAwareEnv(
    # Set casting, default values for env's
    DEBUG=(bool, False),
    LOG_LEVEL=(str, 'INFO'),
    ANONYMIZER_PREFIX=(str, 'anon_'),
    ANONYMIZER_DOMAIN=(str, 'anonymized.local'),
    ANONYMIZER_AUDIT_LOG=(bool, True),
)

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Take environment variables from .env file
environ.Env.read_env(BASE_DIR / '.env')

DEBUG = env('DEBUG')
SECRET_KEY = env('SECRET_KEY', default=get_random_secret_key())


ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=['localhost', '127.0.0.1', 'testserver'])
CSRF_TRUSTED_ORIGINS = env.list('CSRF_TRUSTED_ORIGINS', default=['http://127.0.0.1'])


INSTALLED_APPS = [
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    'rest_framework',
    'drf_spectacular',
    'corsheaders',
    'accounts',
    'anonymizer',
    'api',
    'main',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]


# CORS settings, preflight requests are answered before authentication
CORS_ALLOWED_ORIGINS = env.list(
    'CORS_ALLOWED_ORIGINS',
    default=[
        'http://localhost',
        'http://127.0.0.1',
    ],
)

CORS_ALLOW_METHODS = (
    'DELETE',
    'GET',
    'OPTIONS',
)

CORS_PREFLIGHT_MAX_AGE = 3600


ROOT_URLCONF = 'main.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

ASGI_APPLICATION = 'main.asgi.application'


# Database
# https://docs.djangoproject.com/en/5.1/ref/settings/#databases

DATABASES = {
    'default': env.db('DATABASE_URL', default=f'sqlite:///{BASE_DIR / "db.sqlite3"}'),
}
DATABASES['default']['CONN_MAX_AGE'] = 600  # Keep connections alive for 10 minutes
DATABASES['default']['CONN_HEALTH_CHECKS'] = True


# Django REST framework
# https://www.django-rest-framework.org

REST_FRAMEWORK = {
    'DEFAULT_AUTHENTICATION_CLASSES': (
        'rest_framework.authentication.SessionAuthentication',
        'rest_framework.authentication.BasicAuthentication',
    ),
    'DEFAULT_PERMISSION_CLASSES': ('api.permissions.HasAnonymizerAccess',),
    'DEFAULT_RENDERER_CLASSES': ('rest_framework.renderers.JSONRenderer',),
}

if DEBUG:
    REST_FRAMEWORK['DEFAULT_SCHEMA_CLASS'] = 'drf_spectacular.openapi.AutoSchema'

    SPECTACULAR_SETTINGS = {
        'TITLE': 'Anonymizer API',
        'DESCRIPTION': 'API for GDPR-compliant user data anonymization',
        'VERSION': '1.0.0',
        'SERVE_INCLUDE_SCHEMA': False,
        'TAGS': [
            {'name': 'API', 'description': 'base endpoints and documentation'},
            {'name': 'Anonymization', 'description': 'dry-run analysis and anonymization of a user'},
            {'name': 'Handlers', 'description': 'configured anonymization handlers'},
        ],
    }


# Anonymizer
# Handlers run in this order, every entry is validated at startup

ANONYMIZER_HANDLERS = env.list('ANONYMIZER_HANDLERS', default=['accounts.handlers.AccountAnonymizationHandler'])
ANONYMIZER_SUBJECT_LOOKUP = env('ANONYMIZER_SUBJECT_LOOKUP', default='accounts.lookup.find_user_by_uuid')
ANONYMIZER_PREFIX = env('ANONYMIZER_PREFIX')
ANONYMIZER_DOMAIN = env('ANONYMIZER_DOMAIN')
ANONYMIZER_REQUIRED_GROUP = env('ANONYMIZER_REQUIRED_GROUP', default=None)

# Audit file of every anonymization run, next to the console output of LOGGING
ANONYMIZER_AUDIT_LOG = env('ANONYMIZER_AUDIT_LOG')
ANONYMIZER_LOG_DIR = env('ANONYMIZER_LOG_DIR', default=str(BASE_DIR / 'data' / 'logs'))


# Password validation
# https://docs.djangoproject.com/en/5.1/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator'},
    {'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator'},
    {'NAME': 'django.contrib.auth.password_validation.CommonPasswordValidator'},
    {'NAME': 'django.contrib.auth.password_validation.NumericPasswordValidator'},
]


# Internationalization
# https://docs.djangoproject.com/en/5.1/topics/i18n/

LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Europe/Amsterdam'
USE_I18N = True
USE_TZ = True


# Static files
STATIC_URL = '/static/'
STATIC_ROOT = BASE_DIR / 'static'


# Default primary key field type
# https://docs.djangoproject.com/en/5.1/ref/settings/#default-auto-field

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'


# Load additional log settings
LOG_LEVEL = env('LOG_LEVEL')

# Import logging settings if settings_log.py is available
settings_log_path = Path(__file__).parent / 'settings_log.py'
if settings_log_path.exists():
    from .settings_log import LOGGING  # noqa: F401
