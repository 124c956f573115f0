# 회원가입 입력값 검증
# - fullname: 3자 이상
# - email: local@domain.tld 형태 (.co.uk 같은 다중 접미사 허용)
# - password: 6~20자, 숫자/소문자/대문자 각각 1개 이상
#
# 주니어 개발자님께: 검사는 fullname → email → password 순서이고,
# 처음 실패한 곳에서 SignupValidationError를 던지고 멈춥니다.

import re

from .exceptions import SignupValidationError

FULLNAME_MIN_LENGTH = 3

FULLNAME_ERROR = "Full name must be greater than 3 characters."
EMAIL_ERROR = "Invalid email. Please check your input."
PASSWORD_ERROR = "Password must be 6-20 characters and include numeric, uppercase, and lowercase letters."

# \w+([.-]?\w+)* 와 같은 언어. 분리자가 필수라서 분할 방법이 하나뿐
# re.ASCII: \w, \d 를 영문/숫자/밑줄로 한정
WORDS_PATTERN = re.compile(r"\w+(?:[.-]\w+)*", re.ASCII)
# 도메인 끝 .tld (2~3자)
TLD_PATTERN = re.compile(r"\.\w{2,3}\Z", re.ASCII)
# 줄바꿈 계열 문자(\n \r U+2028 U+2029)를 제외한 문자
_CHAR = r"[^\n\r\u2028\u2029]"
PASSWORD_PATTERN = re.compile(rf"(?={_CHAR}*\d)(?={_CHAR}*[a-z])(?={_CHAR}*[A-Z]){_CHAR}{{6,20}}", re.ASCII)


def text_length(value: str) -> int:
    # UTF-16 코드 유닛 개수 (이모지 등 BMP 밖 문자는 2로 셈)
    return len(value.encode("utf-16-le")) // 2


def validate_fullname(fullname: str) -> None:
    if text_length(fullname) < FULLNAME_MIN_LENGTH:
        raise SignupValidationError("fullname", FULLNAME_ERROR)


def validate_email(email: str) -> None:
    """local@domain.tld 형태인지 확인합니다.

    주니어 개발자님께: 한 번의 정규식으로 도메인과 .tld 반복을 함께 검사하면
    긴 입력에서 분할 방법을 전부 시도하느라 느려집니다.
    그래서 도메인 전체 형태와 마지막 .tld를 따로 검사합니다.
    """
    local, at, domain = email.partition("@")
    if not (at and WORDS_PATTERN.fullmatch(local) and WORDS_PATTERN.fullmatch(domain)
            and TLD_PATTERN.search(domain)):
        raise SignupValidationError("email", EMAIL_ERROR)


def validate_password(password: str) -> None:
    if not PASSWORD_PATTERN.fullmatch(password):
        raise SignupValidationError("password", PASSWORD_ERROR)


def validate_signup(fullname: str, email: str, password: str) -> None:
    """회원가입 필드를 순서대로 검증합니다. 부작용은 없습니다."""
    validate_fullname(fullname)
    validate_email(email)
    validate_password(password)
