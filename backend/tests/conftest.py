# 테스트 공통 픽스처 (DB 의존성 없음)
# - app 모듈 import 전에 필수 환경변수 설정
# - MongoDB 대신 메모리 저장소를 의존성 오버라이드로 주입

import os

os.environ.setdefault("JWT_SECRET_KEY", "test_secret_key_for_testing_only")

from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from app.main import app
from app.models.user import PersonalInfo
from app.repositories.user_repository import get_user_repository


class InMemoryUserRepository:
    """UserRepository와 같은 인터페이스. 유니크 충돌 시 실제 DuplicateKeyError를 던짐"""

    def __init__(self):
        self.users = []

    async def get_by_email(self, email):
        return next((u for u in self.users if u.personal_info.email == email), None)

    async def exists_by_username(self, username):
        return any(u.personal_info.username == username for u in self.users)

    async def create(self, fullname, email, hashed_password, username):
        for u in self.users:
            if u.personal_info.email == email or u.personal_info.username == username:
                raise DuplicateKeyError("E11000 duplicate key error collection: users", code=11000)
        user = SimpleNamespace(
            id=ObjectId(),
            personal_info=PersonalInfo(
                fullname=fullname, email=email, password=hashed_password, username=username
            ),
        )
        self.users.append(user)
        return user


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def client(repo):
    # with 블록을 쓰지 않아 startup 이벤트(MongoDB 연결)가 실행되지 않음
    app.dependency_overrides[get_user_repository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
