import logging
import os
from datetime import timedelta

from django.utils.translation import gettext_lazy as _
from dotenv import load_dotenv

load_dotenv()

PROJECT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


ROOT_DIR = os.path.dirname(PROJECT_DIR)

APPS_DIR = os.path.join(PROJECT_DIR, 'hireboard')

BASE_DIR = os.path.join(PROJECT_DIR, 'config')

DEBUG = eval(os.environ.get('DEBUG', 'False'))

DJANGO_APPS = (
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
)

THIRD_PARTY_APPS = (
    'corsheaders',
    'rest_framework',
    'django_q',
    'django_filters',
    'cuser',
)

PROJECT_APPS = (
    'hireboard.common',
    'hireboard.users',
    'hireboard.recruitment',
    'hireboard.portal',
)

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + PROJECT_APPS


MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.locale.LocaleMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',

    'cuser.middleware.CuserMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [os.path.join(APPS_DIR, 'templates')],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
                'django.template.context_processors.i18n'
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.UserAttributeSimilarityValidator',
    },
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
    },
]

# Internationalization
# https://docs.djangoproject.com/en/4.2/topics/i18n/

TIME_ZONE = os.environ.get('TIME_ZONE', 'Asia/Tehran')

USE_I18N = True

USE_TZ = True


# Static Files Configuration
DEFAULT_STATIC_ROOT = os.path.join(ROOT_DIR, 'static/')
STATIC_ROOT = os.environ.get('STATIC_ROOT', DEFAULT_STATIC_ROOT)
STATIC_URL = '/static/'

DEFAULT_MEDIA_ROOT = os.path.join(ROOT_DIR, 'media/')
MEDIA_ROOT = os.environ.get('MEDIA_ROOT', DEFAULT_MEDIA_ROOT)
MEDIA_URL = '/media/'
# /Static Files Configuration

AUTH_USER_MODEL = 'users.User'

LANGUAGES = (
    ('en', _('English')),
    ('fa', _('Persian')),
)

LANGUAGE_CODE = 'en'

LOCALE_PATHS = (
    os.path.join(BASE_DIR, 'locale'),
)


# https://docs.djangoproject.com/en/4.2/ref/settings/#data-upload-max-memory-size
DATA_UPLOAD_MAX_MEMORY_SIZE = 10*1024*1024  # 10 MB

MAX_FILE_SIZE = int(os.environ.get('MAX_FILE_SIZE', 7))

ACCEPTED_FILE_FORMATS = {
    'documents': ['doc', 'docx', 'odt', 'pdf', 'xls', 'xlsx', 'ods', 'txt', 'rtf'],
    'images': ['gif', 'jpeg', 'jpg', 'png']
}

# Rest Framework Config
DRF_RENDERER_CLASSES = ['rest_framework.renderers.JSONRenderer']
DRF_AUTH_CLASSES = [
    'rest_framework_simplejwt.authentication.JWTAuthentication',
    'rest_framework.authentication.SessionAuthentication'
]

DRF_BROWSABLE_API = eval(os.environ.get('DRF_BROWSABLE_API', 'False'))

if DRF_BROWSABLE_API:
    DRF_RENDERER_CLASSES.append('rest_framework.renderers.BrowsableAPIRenderer')
# End Rest Framework Config

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': (
        'rest_framework.permissions.IsAuthenticated',
    ),
    'DEFAULT_AUTHENTICATION_CLASSES': DRF_AUTH_CLASSES,
    'DEFAULT_PAGINATION_CLASS': 'hireboard.core.pagination.LimitZeroNoResultsPagination',
    'PAGE_SIZE': 20,
    'DEFAULT_FILTER_BACKENDS': (
        'django_filters.rest_framework.DjangoFilterBackend',
    ),
    'DEFAULT_RENDERER_CLASSES': DRF_RENDERER_CLASSES
}

Q_CLUSTER_SYNC = eval(os.getenv('Q_CLUSTER_SYNC', 'False'))

# for qcluster configuration
# https://django-q2.readthedocs.io/en/master/configure.html
Q_CLUSTER = {
    'name': 'hireboard',
    'workers': int(os.environ.get('Q_CLUSTER_WORKERS', 2)),
    'recycle': 500,
    'timeout': int(os.environ.get('Q_CLUSTER_TIMEOUT', 60*5)),
    # retry value should be larger than timeout value
    'retry': int(os.environ.get('Q_CLUSTER_RETRY', 60*5 + 1)),
    'compress': True,
    'save_limit': 250,
    'queue_limit': 500,
    'label': 'Django Q',
    'orm': 'default',
    'sync': Q_CLUSTER_SYNC,
}

SECRET_KEY = os.environ.get('SECRET_KEY', 'Wq8ZtKp2fN7vYhB4cL1xRm6sJd3aGe9u')

ENVIRONMENT = os.environ.get('ENVIRONMENT', 'development')

ALLOWED_HOSTS = os.environ.get('ALLOWED_HOSTS', '*').split(',')

if os.environ.get('DATABASE_NAME'):
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': os.environ.get('DATABASE_NAME'),
            'USER': os.environ.get('DATABASE_USER', None),
            'PASSWORD': os.environ.get('DATABASE_PASSWORD', None),
            'HOST': os.environ.get('DATABASE_HOST', 'localhost'),
            'PORT': os.environ.get('DATABASE_PORT', '5432'),
        },
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': os.path.join(PROJECT_DIR, 'db.sqlite3'),
        }
    }

DEFAULT_AUTO_FIELD = 'django.db.models.AutoField'

FRONTEND_URL = os.environ.get('FRONTEND_URL', "http://localhost:3000")

EMAIL_BACKEND = os.environ.get(
    'EMAIL_BACKEND', 'django.core.mail.backends.console.EmailBackend'
)
EMAIL_HOST = os.environ.get('EMAIL_HOST', 'localhost')
EMAIL_HOST_USER = os.environ.get('EMAIL_HOST_USER', '')
EMAIL_HOST_PASSWORD = os.environ.get('EMAIL_HOST_PASSWORD', '')
EMAIL_PORT = os.environ.get('EMAIL_PORT', '25')
EMAIL_USE_TLS = eval(os.environ.get('EMAIL_USE_TLS', 'False'))
DEFAULT_FROM_EMAIL = os.environ.get('DEFAULT_FROM_EMAIL', 'noreply@hireboard.local')

SYSTEM_NAME = os.environ.get('SYSTEM_NAME', "HireBoard")

CORS_ORIGIN_ALLOW_ALL = eval(os.environ.get('CORS_ORIGIN_ALLOW_ALL', 'False'))

CORS_ALLOWED_ORIGINS = [FRONTEND_URL]

# Recruitment configuration
# Calendar used by interview dates typed on the board, `jalali` or `gregorian`
INTERVIEW_DATE_CALENDAR = os.environ.get('INTERVIEW_DATE_CALENDAR', 'jalali')

# Country code used to rewrite a leading `0` of local phone numbers for wa.me links
WHATSAPP_COUNTRY_CODE = os.environ.get('WHATSAPP_COUNTRY_CODE', '98')

INTERVIEW_REMINDER_INTERVAL_MINUTES = int(
    os.environ.get('INTERVIEW_REMINDER_INTERVAL_MINUTES', 60)
)

# Begin Access/Refresh Token Config
ACCESS_TOKEN_LIFETIME = os.environ.get('ACCESS_TOKEN_LIFETIME', '6;hours')
REFRESH_TOKEN_LIFETIME = os.environ.get('REFRESH_TOKEN_LIFETIME', '7;days')


def generate_timedelta(td_string):
    try:
        _duration, _type = td_string.split(';')
        return timedelta(**{_type: int(_duration)})
    except (ValueError, TypeError):
        raise ValueError(f"{td_string} is invalid. use 5;minutes OR 30;days format")


ACCESS_TOKEN_VALUE = generate_timedelta(ACCESS_TOKEN_LIFETIME)
REFRESH_TOKEN_VALUE = generate_timedelta(REFRESH_TOKEN_LIFETIME)
# End Access/Refresh Token Config

# Simple JWT Config
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': ACCESS_TOKEN_VALUE,
    'REFRESH_TOKEN_LIFETIME': REFRESH_TOKEN_VALUE,
    'ROTATE_REFRESH_TOKENS': True,

    'ALGORITHM': 'HS256',
    'SIGNING_KEY': SECRET_KEY,

    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',

    'AUTH_TOKEN_CLASSES': ('rest_framework_simplejwt.tokens.AccessToken',),
    'TOKEN_TYPE_CLAIM': 'token_type',
}
# /Simple JWT Config ends

SHOW_LOGS_ON_CONSOLE = eval(os.environ.get('SHOW_LOGS_ON_CONSOLE', 'False'))

# LOGGING FORMATS AND CONFIGURATIONS
LOG_DIRECTORY = os.path.join(
    PROJECT_DIR if ENVIRONMENT == 'development' else ROOT_DIR,
    'logs'
)
if not os.path.exists(LOG_DIRECTORY):
    os.mkdir(LOG_DIRECTORY)

extend_logging = dict()
extend_handlers = dict()


class RequireConsoleLog(logging.Filter):
    def filter(self, record):
        allowed_site_packages = ('django', 'rest_framework')
        if 'site-packages' in record.pathname:
            return any([x in record.pathname for x in allowed_site_packages])
        return SHOW_LOGS_ON_CONSOLE


for module in PROJECT_APPS:
    extend_logging.update({
        module: {
            'handlers': [module],
            'propagate': False,
        }
    })
    extend_handlers.update({
        module: {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'formatter': 'verbose',
            'filename': os.path.join(
                LOG_DIRECTORY, module.split('.')[1] + '.log'
            ),
            'when': 'midnight',
        }
    })

LOGGING = {
    'version': 1,
    'disable_existing_loggers': True,
    'formatters': {
        'verbose': {
            'format': '\n%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s',
        },
        'simple': {
            'format': '{levelname} {message} -->from [{module}]',
            'style': '{'
        },
    },
    'filters': {
        'require_debug_true': {
            '()': 'django.utils.log.RequireDebugTrue',
        },
        'require_debug_false': {
            '()': 'django.utils.log.RequireDebugFalse',
        },
        'require_console_log': {
            '()': RequireConsoleLog
        }
    },
    'handlers': {
        'default': {
            'level': 'DEBUG',
            'class': 'logging.handlers.TimedRotatingFileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'debug.log'),
            'formatter': 'verbose',
            'when': 'midnight',
        },
        'console': {
            'level': 'DEBUG',
            'filters': ['require_debug_true', 'require_console_log'],
            'class': 'logging.StreamHandler',
            'formatter': 'simple'
        },
        'django': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'django.log'),
            'formatter': 'verbose',
        },
        'database': {
            'level': 'DEBUG',
            'class': 'logging.FileHandler',
            'filename': os.path.join(LOG_DIRECTORY, 'database.log'),
            'formatter': 'verbose',
        },
        **extend_handlers
    },
    'loggers': {
        '': {
            'handlers': ['default', 'console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'django': {
            'handlers': ['django'],
            'propagate': True,
        },
        'django.db.backends': {
            'handlers': ['database'],
            'propagate': False,
        },
        'django_q': {
            'handlers': ['default'],
            'propagate': False,
        },
        **extend_logging
    },
}

TEXT_FIELD_MAX_LENGTH = 600
