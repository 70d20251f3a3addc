import os
import secrets
import tempfile
import platform
from dotenv import load_dotenv

# Load environment variables from .env file(s)
load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))

def ensure_data_directory():
    """Ensure the data directory used for server-side session files exists."""
    data_dir = os.environ.get('ROSTER_DATA_DIR') or os.path.join(basedir, 'data')
    sessions_dir = os.path.join(data_dir, 'flask_sessions')
    os.makedirs(sessions_dir, exist_ok=True)

    # Docker images set permissions in their entrypoint
    if platform.system() != "Windows":
        try:
            os.chmod(data_dir, 0o755)
            os.chmod(sessions_dir, 0o755)
        except (OSError, PermissionError):
            # Mounted volumes may not allow chmod; the directory is still usable
            pass

    return data_dir

data_dir = ensure_data_directory()


def _env_flag(name, default='false'):
    return os.environ.get(name, default).lower() in ['true', 'on', '1']


class Config:
    DATA_DIR = data_dir

    # Security
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        if os.environ.get('FLASK_ENV') == 'development' or _env_flag('FLASK_DEBUG'):
            SECRET_KEY = secrets.token_hex(32)
            print("⚠️  WARNING: Using temporary SECRET_KEY for development. Set SECRET_KEY in .env for production!")
        else:
            # Every Gunicorn worker must sign sessions with the same key.
            raise ValueError("No SECRET_KEY set for Flask application. Please set it in your .env file.")

    # CSRF
    WTF_CSRF_ENABLED = True
    WTF_CSRF_TIME_LIMIT = 3600  # 1 hour
    WTF_CSRF_SSL_STRICT = False

    # Session cookies
    SESSION_COOKIE_SECURE = _env_flag('SESSION_COOKIE_SECURE')
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    SESSION_PERMANENT = False

    # Flask-Session: server-side sessions only carry the directory token.
    # With the 'cachelib' type the factory builds a FileSystemCache in SESSION_DIR.
    SESSION_TYPE = os.environ.get('SESSION_TYPE', 'cachelib')
    SESSION_KEY_PREFIX = 'roster:'
    SESSION_DIR = os.path.join(data_dir, 'flask_sessions')
    SESSION_CACHE_THRESHOLD = 500

    # Department master list: 'static' or a path to a JSON file
    DEPARTMENT_SOURCE = os.environ.get('DEPARTMENT_SOURCE', 'static')
    SEED_EMPLOYEES = _env_flag('SEED_EMPLOYEES', 'true')

    # Idle seconds before a session's directory is evicted
    DIRECTORY_SESSION_TTL = int(os.environ.get('DIRECTORY_SESSION_TTL', 3600))

    # Application settings
    SITE_NAME = os.environ.get('SITE_NAME', 'Roster')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'ERROR').upper()


class TestConfig(Config):
    TESTING = True
    WTF_CSRF_ENABLED = False
    SECRET_KEY = 'test-secret-key'
    SESSION_DIR = os.path.join(tempfile.gettempdir(), 'roster-test-sessions')
    DEPARTMENT_SOURCE = 'static'
    SEED_EMPLOYEES = True
    LOG_LEVEL = 'DEBUG'
