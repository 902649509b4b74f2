from typing import Optional
from sqlalchemy import BigInteger, Column, Integer
from sqlmodel import SQLModel, Field

# BIGINT in MySQL; SQLite only auto-increments INTEGER primary keys
EmployeeId = BigInteger().with_variant(Integer(), "sqlite")


class Employee(SQLModel, table=True):
    """Employee record."""
    __tablename__ = "employees"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(EmployeeId, primary_key=True, autoincrement=True),
    )
    first_name: str = Field(max_length=255)
    last_name: str = Field(max_length=255)
    email_id: str = Field(max_length=255)
