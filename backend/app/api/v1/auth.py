# 인증 라우터
# - 회원가입: POST /signup
# - 로그인: POST /signin
# 실패 응답은 main.py의 예외 핸들러가 {"error": "..."} 형태로 만들어 줍니다.

from fastapi import APIRouter, Depends

from ...schemas.user_schema import SignupRequest, SigninRequest, AuthResponse, ErrorResponse
from ...services.auth_service import AuthService, get_auth_service

router = APIRouter(tags=["auth"])

_error_responses = {403: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

@router.post("/signup", response_model=AuthResponse, responses=_error_responses, summary="회원가입 (입력 검증 + 사용자명 자동 생성)")
async def signup(payload: SignupRequest, service: AuthService = Depends(get_auth_service)):
    return await service.signup(payload.fullname, payload.email, payload.password)

@router.post("/signin", response_model=AuthResponse, responses=_error_responses, summary="로그인 (JWT 액세스 토큰 발급)")
async def signin(payload: SigninRequest, service: AuthService = Depends(get_auth_service)):
    return await service.signin(payload.email, payload.password)
