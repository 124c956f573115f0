# 사용자명 생성
# - 이메일의 @ 앞부분을 기본 사용자명으로 사용
# - 이미 사용 중이면 5자리 랜덤 접미사를 붙임

import secrets
import string

from ..repositories.user_repository import UserRepository

SUFFIX_LENGTH = 5
SUFFIX_ALPHABET = string.ascii_letters + string.digits

def random_suffix(length: int = SUFFIX_LENGTH) -> str:
    return "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(length))

async def allocate_username(email: str, repo: UserRepository) -> str:
    """이메일에서 기본 사용자명을 만듭니다.

    주니어 개발자님께: 접미사를 붙인 뒤에는 다시 중복 검사를 하지 않습니다.
    그 이름이 이미 있으면 저장 시 username unique 인덱스에서 DuplicateKeyError가 납니다.
    """
    username = email.split("@")[0]
    if await repo.exists_by_username(username):
        username += random_suffix()
    return username
