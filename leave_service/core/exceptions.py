"""
leave service 코어에서 발생하는 예외.

InvalidPayload / NotFound / Conflict는 정상적인 실패 결과로,
HTTP 레이어가 400 / 404 / 409로 호출자에게 돌려준다.
StorageError는 저장소가 인코딩/디코딩/저장에 실패했다는 뜻이며
정상 흐름에서는 절대 나오면 안 되는 내부 오류 (500).
"""


class LeaveServiceError(Exception):
    status_code = 500
    kind = "Error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"error": self.kind, "detail": self.message}


class InvalidPayload(LeaveServiceError):
    status_code = 400
    kind = "InvalidPayload"


class NotFound(LeaveServiceError):
    status_code = 404
    kind = "NotFound"


class Conflict(LeaveServiceError):
    status_code = 409
    kind = "Conflict"


class StorageError(LeaveServiceError):
    kind = "StorageError"
