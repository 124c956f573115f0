# 사용자명 생성 로직 테스트 (메모리 저장소 사용)
import asyncio
import string

from app.services.username_service import allocate_username, random_suffix

def test_random_suffix_is_alphanumeric():
    suffix = random_suffix()
    assert len(suffix) == 5
    assert set(suffix) <= set(string.ascii_letters + string.digits)

def test_allocate_uses_email_local_part(repo):
    assert asyncio.run(allocate_username("alice@example.com", repo)) == "alice"

def test_allocate_appends_suffix_on_collision(repo):
    asyncio.run(repo.create("Alice Smith", "alice@example.com", "hashed", "alice"))

    first = asyncio.run(allocate_username("alice@other.org", repo))
    second = asyncio.run(allocate_username("alice@other.org", repo))

    for username in (first, second):
        assert username.startswith("alice")
        assert len(username) == len("alice") + 5
    assert first != second

def test_allocate_does_not_recheck_suffixed_name(repo, monkeypatch):
    asyncio.run(repo.create("Alice Smith", "alice@example.com", "hashed", "alice"))
    asyncio.run(repo.create("Alice Two", "alice2@example.com", "hashed", "aliceAAAAA"))
    monkeypatch.setattr("app.services.username_service.random_suffix", lambda: "AAAAA")

    # 접미사를 붙인 이름은 다시 검사하지 않음 → 충돌은 저장 시점에 드러남
    assert asyncio.run(allocate_username("alice@other.org", repo)) == "aliceAAAAA"
