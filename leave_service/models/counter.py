from sqlalchemy import BigInteger, Column, String

from leave_service.core.db import Base


class Counter(Base):
    """{name: 'entity_id', seq: N} 형태의 durable 카운터"""

    __tablename__ = "counters"

    name = Column(String(50), primary_key=True)
    seq = Column(BigInteger, nullable=False, default=0)
