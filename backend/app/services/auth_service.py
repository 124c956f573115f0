# 인증 서비스 레이어
# - 회원가입: 입력 검증 → 비밀번호 해싱 → 사용자명 생성 → 저장 → 토큰 발급
# - 로그인: 이메일로 조회 → 비밀번호 검증 → 토큰 발급

import asyncio
import logging
from fastapi import Depends
from pymongo.errors import DuplicateKeyError

from ..repositories.user_repository import UserRepository, get_user_repository
from ..core.security import get_password_hash, verify_password, create_access_token
from ..core.validators import validate_signup
from ..core.exceptions import (
    AuthServiceError,
    EmailConflictError,
    EmailNotFoundError,
    IncorrectPasswordError,
    InternalServiceError,
)
from ..models.user import User
from ..schemas.user_schema import AuthResponse
from .username_service import allocate_username

logger = logging.getLogger(__name__)

def format_auth_response(user: User) -> AuthResponse:
    info = user.personal_info
    return AuthResponse(
        access_token=create_access_token(str(user.id)),
        profile_img=info.profile_img,
        username=info.username,
        fullname=info.fullname,
    )

class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def signup(self, fullname: str, email: str, password: str) -> AuthResponse:
        validate_signup(fullname, email, password)
        try:
            # 주니어 개발자님께: bcrypt는 CPU를 쓰는 작업이라 스레드로 넘겨
            # 이벤트 루프가 멈추지 않게 합니다.
            hashed = await asyncio.to_thread(get_password_hash, password)
            username = await allocate_username(email, self.repo)
            user = await self.repo.create(fullname, email, hashed, username)
            return format_auth_response(user)
        except DuplicateKeyError:
            logger.info("Signup conflict for email %s", email)
            raise EmailConflictError()
        except Exception:
            logger.exception("Signup error")
            raise InternalServiceError()

    async def signin(self, email: str, password: str) -> AuthResponse:
        try:
            user = await self.repo.get_by_email(email)
            if user is None:
                raise EmailNotFoundError()
            matched = await asyncio.to_thread(verify_password, password, user.personal_info.password)
            if not matched:
                raise IncorrectPasswordError()
            return format_auth_response(user)
        except AuthServiceError:
            raise
        except Exception:
            logger.exception("Signin error")
            raise InternalServiceError()


def get_auth_service(repo: UserRepository = Depends(get_user_repository)) -> AuthService:
    return AuthService(repo)
