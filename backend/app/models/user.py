# User 도메인 모델 (Beanie Document)
# - personal_info: 이름, 이메일, 비밀번호 해시, 사용자명, 소개, 프로필 이미지
# - social_links / account_info: 회원가입에서는 기본값만 저장
# - 이메일과 사용자명은 unique 인덱스

import random
from datetime import datetime, timezone
from typing import Optional
from beanie import Document
from pydantic import BaseModel, Field
from pymongo import ASCENDING, IndexModel

# 프로필 이미지 기본값 (dicebear 아바타)
PROFILE_IMG_COLLECTIONS = ["notionists-neutral", "adventurer-neutral", "fun-emoji"]
PROFILE_IMG_SEEDS = [
    "Garfield", "Tinkerbell", "Annie", "Loki", "Cleo", "Angel", "Bob", "Mia", "Coco",
    "Gracie", "Bear", "Bella", "Abby", "Harley", "Cali", "Leo", "Luna", "Jack", "Felix", "Kiki",
]

def default_profile_img() -> str:
    collection = random.choice(PROFILE_IMG_COLLECTIONS)
    seed = random.choice(PROFILE_IMG_SEEDS)
    return f"https://api.dicebear.com/6.x/{collection}/svg?seed={seed}"


class PersonalInfo(BaseModel):
    fullname: str = Field(min_length=3)
    email: str
    # 평문 비밀번호는 절대 저장하지 않습니다 (bcrypt 해시만)
    password: str = Field(repr=False)
    username: str
    bio: str = Field(default="", max_length=200)
    profile_img: Optional[str] = Field(default_factory=default_profile_img)


class SocialLinks(BaseModel):
    youtube: str = ""
    instagram: str = ""
    facebook: str = ""
    twitter: str = ""
    github: str = ""
    website: str = ""


class AccountInfo(BaseModel):
    total_posts: int = 0
    total_reads: int = 0


class User(Document):
    personal_info: PersonalInfo
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    account_info: AccountInfo = Field(default_factory=AccountInfo)
    google_auth: bool = False
    joined_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    class Settings:
        name = "users"  # 컬렉션명
        # 주니어 개발자님께: 중첩 필드는 Indexed()로 표시할 수 없어서 IndexModel로 직접 지정합니다.
        # 중복 이메일/사용자명 저장 시 DuplicateKeyError가 발생합니다.
        indexes = [
            IndexModel([("personal_info.email", ASCENDING)], unique=True),
            IndexModel([("personal_info.username", ASCENDING)], unique=True),
        ]
