# 요청/응답 스키마 정의 (Pydantic 모델)
# 주니어 개발자님께: 여기서는 "문자열인지"만 확인합니다.
# 길이/형식 검증은 core/validators.py가 담당합니다.

from typing import Optional
from pydantic import BaseModel

class SignupRequest(BaseModel):
    fullname: str
    email: str
    password: str

class SigninRequest(BaseModel):
    email: str
    password: str

class AuthResponse(BaseModel):
    access_token: str
    profile_img: Optional[str] = None
    username: str
    fullname: str

class ErrorResponse(BaseModel):
    error: str
