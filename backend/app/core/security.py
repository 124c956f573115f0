# 보안/인증 유틸리티
# - 비밀번호 해싱/검증 (bcrypt)
# - JWT 액세스 토큰 생성

from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
import jwt

from .config import settings

# 주니어 개발자님께: bcrypt__rounds는 작업 계수입니다.
# 값이 1 커질 때마다 해싱 시간이 2배가 됩니다.
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    # 잘못된 형식의 해시도 예외 대신 False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(user_id: str) -> str:
    """사용자 ID만 담은 액세스 토큰을 발급합니다.

    주니어 개발자님께: 기본 설정에서는 exp(만료) 클레임이 없습니다.
    ACCESS_TOKEN_EXPIRE_MINUTES를 설정했을 때만 만료 시간이 추가됩니다.
    """
    payload = {"id": str(user_id)}
    if settings.ACCESS_TOKEN_EXPIRE_MINUTES is not None:
        now = datetime.now(tz=timezone.utc)
        payload["exp"] = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
