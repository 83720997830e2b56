from pydantic import BaseModel


class Message(BaseModel):
    """상태 전이 API의 성공 응답"""
    message: str
