# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB)
# - 라우터 라우팅 (/signup, /signin)
# - CORS 설정
# - 예외 → {"error": "..."} JSON 응답 변환

import logging
from datetime import datetime, timezone
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from .core.config import settings
from .core.exceptions import AuthServiceError
from .models.user import User
from .api.v1.auth import router as auth_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="블로그 계정 서비스 API",
    description="회원가입/로그인 및 액세스 토큰 발급",
    version=settings.APP_VERSION,
)

# CORS 허용 도메인 세팅 (비어 있으면 전체 허용)
origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=bool(origins),
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(AuthServiceError)
async def auth_service_error_handler(request: Request, exc: AuthServiceError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

# 처리되지 않은 모든 예외
@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Something went wrong."})

# Beanie 초기화 (앱 시작 시 1회)
# 주니어 개발자님께: 연결에 실패해도 서버는 뜹니다.
# 다만 회원가입/로그인은 500 Internal Server Error로 응답하게 됩니다.
@app.on_event("startup")
async def app_init():
    try:
        # 주니어 개발자님께: serverSelectionTimeoutMS는 서버 선택 타임아웃(밀리초)입니다.
        client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=5000)
        await client.admin.command("ping")

        db = client.get_default_database()
        # document_models에 등록하면 Settings.indexes의 unique 인덱스도 함께 생성됩니다.
        await init_beanie(database=db, document_models=[User])
        app.state.mongo_client = client
        logger.info("MongoDB 연결 성공: %s", settings.MONGODB_URI)
    except Exception as e:
        logger.warning("MongoDB 연결 실패: %s", e)
        logger.info("서버는 계속 시작됩니다. MongoDB URI를 확인하세요: %s", settings.MONGODB_URI)

@app.on_event("shutdown")
async def app_shutdown():
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()

# 간단한 헬스체크
@app.get("/")
async def root():
    return {"ok": True, "app": settings.APP_NAME, "time": datetime.now(tz=timezone.utc).isoformat()}

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}

app.include_router(auth_router)


def run():
    # 콘솔 스크립트(blog-auth) 진입점
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
