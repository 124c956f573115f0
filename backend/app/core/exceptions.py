# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스 레이어는 HTTP를 모릅니다.
# 대신 이 예외들을 던지고, main.py의 예외 핸들러가 {"error": message} 형태의
# JSON 응답으로 바꿔줍니다.

class AuthServiceError(Exception):
    """인증 서비스 관련 기본 예외 클래스

    Attributes:
        message: 클라이언트에게 그대로 노출되는 메시지
        status_code: 응답 HTTP 상태 코드
    """
    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class SignupValidationError(AuthServiceError):
    """회원가입 입력값 검증 실패 시 발생하는 예외

    주니어 개발자님께: fullname → email → password 순서로 검사하고,
    처음 실패한 필드에서 바로 멈춥니다.

    Attributes:
        field_name: 검증 실패한 필드 이름
    """
    status_code = 403

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        super().__init__(message)


class EmailConflictError(AuthServiceError):
    # 이메일(또는 사용자명) 유니크 인덱스 충돌. 상태 코드는 500
    status_code = 500
    default_message = "Email already exists."


class EmailNotFoundError(AuthServiceError):
    status_code = 403
    default_message = "Email not found."


class IncorrectPasswordError(AuthServiceError):
    status_code = 403
    default_message = "Incorrect password."


class InternalServiceError(AuthServiceError):
    """예상하지 못한 장애 (DB 연결 끊김, 해싱 실패 등)

    원인은 로그로만 남기고 클라이언트에는 일반 메시지만 보냅니다.
    """
    status_code = 500
    default_message = "Internal Server Error"
