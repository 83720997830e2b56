from fastapi import Depends
from sqlalchemy.orm import Session

from leave_service.core.db import get_db
from leave_service.services.context import ServiceContext


# 의존성으로 요청마다 ServiceContext를 만들어 반환
async def get_context(db: Session = Depends(get_db)) -> ServiceContext:
    return ServiceContext(db)
