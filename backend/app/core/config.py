# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional
from pydantic import Field

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/app/core/config.py에 있으므로,
# 3단계 상위로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "blog-auth"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    MONGODB_URI: str = "mongodb://localhost:27017/blog_auth"

    JWT_SECRET_KEY: str = Field(..., description="JWT 토큰 서명에 사용되는 비밀키. 반드시 강력한 랜덤 문자열로 설정하세요.")
    JWT_ALGORITHM: str = "HS256"
    # 기본값은 None: 만료(exp) 클레임 없는 토큰을 발급합니다.
    # 만료가 필요하면 분 단위로 명시적으로 설정하세요.
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None

    # bcrypt 작업 계수 (cost factor)
    BCRYPT_ROUNDS: int = Field(default=6, ge=4, le=31)

    # 비어 있으면 모든 Origin 허용
    CORS_ALLOW_ORIGINS: str = ""

    model_config = SettingsConfigDict(
        # 주니어 개발자님께: env_file에 절대 경로를 지정하면 backend 디렉토리에서 실행해도
        # 프로젝트 루트의 .env 파일을 찾을 수 있습니다.
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
