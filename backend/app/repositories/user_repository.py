# 사용자 저장소 레이어
# - 데이터 접근(조회/생성)만 담당 (서비스 로직 분리)
# - 유니크 인덱스 충돌 시 pymongo DuplicateKeyError를 그대로 올려보냄

from typing import Optional
from ..models.user import User, PersonalInfo

class UserRepository:
    async def get_by_email(self, email: str) -> Optional[User]:
        return await User.find_one({"personal_info.email": email})

    async def exists_by_username(self, username: str) -> bool:
        user = await User.find_one({"personal_info.username": username})
        return user is not None

    async def create(self, fullname: str, email: str, hashed_password: str, username: str) -> User:
        user = User(
            personal_info=PersonalInfo(
                fullname=fullname,
                email=email,
                password=hashed_password,
                username=username,
            )
        )
        return await user.insert()


def get_user_repository() -> UserRepository:
    return UserRepository()
