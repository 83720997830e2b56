from sqlalchemy import BigInteger, Column, LargeBinary

from leave_service.core.db import Base


class EmployeeRecord(Base):
    __tablename__ = "employees"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    payload = Column(LargeBinary, nullable=False)  # pydantic JSON 인코딩


class LeaveTypeRecord(Base):
    __tablename__ = "leave_types"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    payload = Column(LargeBinary, nullable=False)


class LeaveRequestRecord(Base):
    __tablename__ = "leave_requests"

    id = Column(BigInteger, primary_key=True, autoincrement=False)
    payload = Column(LargeBinary, nullable=False)


# 하나의 카운터를 공유하는 테이블들
RECORD_TABLES = (EmployeeRecord, LeaveTypeRecord, LeaveRequestRecord)
