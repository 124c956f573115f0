# 사용자 저장소 테스트
# - 실제 Beanie User 문서 + UserRepository
# - MongoDB 대신 mongomock_motor (프로세스 내 Motor 대체 클라이언트)

import asyncio

import pytest
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import DuplicateKeyError

from app.models.user import User
from app.repositories.user_repository import UserRepository

def run_with_store(scenario):
    # 테스트마다 빈 DB로 Beanie 초기화 (unique 인덱스 생성 포함)
    async def runner():
        client = AsyncMongoMockClient()
        await init_beanie(database=client["blog_auth_test"], document_models=[User])
        return await scenario(UserRepository())
    return asyncio.run(runner())

def test_user_indexes_declared_unique():
    indexes = {
        tuple(index.document["key"].items()): index.document.get("unique", False)
        for index in User.Settings.indexes
    }
    assert indexes == {
        (("personal_info.email", 1),): True,
        (("personal_info.username", 1),): True,
    }

def test_create_and_lookup_round_trip():
    async def scenario(repo):
        created = await repo.create("Alice Smith", "alice@example.com", "hashed-pw", "alice")
        found = await repo.get_by_email("alice@example.com")
        return created, found, await repo.exists_by_username("alice"), await repo.exists_by_username("bob")

    created, found, alice_exists, bob_exists = run_with_store(scenario)
    assert created.id is not None
    assert found.id == created.id
    assert found.personal_info.fullname == "Alice Smith"
    assert found.personal_info.password == "hashed-pw"
    assert found.personal_info.profile_img.startswith("https://api.dicebear.com/6.x/")
    assert found.account_info.total_posts == 0
    assert alice_exists is True
    assert bob_exists is False

def test_get_by_email_missing_returns_none():
    async def scenario(repo):
        return await repo.get_by_email("nobody@example.com")

    assert run_with_store(scenario) is None

def test_duplicate_email_raises_duplicate_key_error():
    async def scenario(repo):
        await repo.create("Alice Smith", "alice@example.com", "hashed-pw", "alice")
        await repo.create("Alice Again", "alice@example.com", "hashed-pw", "alice2")

    with pytest.raises(DuplicateKeyError):
        run_with_store(scenario)

def test_duplicate_username_raises_duplicate_key_error():
    async def scenario(repo):
        await repo.create("Alice Smith", "alice@example.com", "hashed-pw", "alice")
        await repo.create("Alice Other", "alice@other.org", "hashed-pw", "alice")

    with pytest.raises(DuplicateKeyError):
        run_with_store(scenario)
