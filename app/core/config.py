import os
from typing import List
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))
load_dotenv(os.path.join(BASE_DIR, '.env'))


def _database_url() -> str:
    url = os.getenv('SQL_DATABASE_URL')
    if url:
        return url
    return 'postgresql://{user}:{password}@{host}:{port}/{name}'.format(
        user=os.getenv('DB_USER', 'postgres'),
        password=os.getenv('DB_PASSWORD', 'postgres'),
        host=os.getenv('DB_HOST', 'localhost'),
        port=os.getenv('DB_PORT', '5432'),
        name=os.getenv('DB_NAME', 'medtrack'),
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(extra='ignore')

    PROJECT_NAME: str = os.getenv('PROJECT_NAME', 'MedTrack API')
    SECRET_KEY: str = os.getenv('SECRET_KEY', 'medtrack-dev-secret')
    API_PREFIX: str = '/api'
    BACKEND_CORS_ORIGINS: List[str] = ['*']
    DATABASE_URL: str = _database_url()
    ACCESS_TOKEN_EXPIRE_SECONDS: int = int(os.getenv('ACCESS_TOKEN_EXPIRE_SECONDS', 60 * 60 * 24 * 7))  # 7 days
    ADMIN_ACCESS_TOKEN_EXPIRE_SECONDS: int = int(os.getenv('ADMIN_ACCESS_TOKEN_EXPIRE_SECONDS', 60 * 60))  # 1 hour
    SECURITY_ALGORITHM: str = 'HS256'
    BCRYPT_ROUNDS: int = int(os.getenv('BCRYPT_ROUNDS', '10'))
    LOGGING_CONFIG_FILE: str = os.path.join(BASE_DIR, 'logging.ini')

    # Fixed admin principal, never stored in the database
    ADMIN_USERNAME: str = os.getenv('ADMIN_USERNAME', '')
    ADMIN_PASSWORD: str = os.getenv('ADMIN_PASSWORD', '')

    # Client bundle served for every non-API path
    FRONTEND_DIST_DIR: str = os.getenv('FRONTEND_DIST_DIR', os.path.join(BASE_DIR, 'frontend', 'dist'))


settings = Settings()
