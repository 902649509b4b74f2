"""Wire format for employee records: camelCase JSON in and out."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from .models import Employee


class EmployeeFields(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email_id: str = Field(alias="emailId")


class EmployeePayload(EmployeeFields):
    """Request body for create and update. A client-supplied id is ignored."""
    id: Optional[int] = None

    def to_entity(self) -> Employee:
        return Employee(first_name=self.first_name, last_name=self.last_name, email_id=self.email_id)

    def apply_to(self, employee: Employee) -> Employee:
        """Overwrite the mutable fields of an existing record, keeping its id."""
        employee.first_name = self.first_name
        employee.last_name = self.last_name
        employee.email_id = self.email_id
        return employee


class EmployeeRead(EmployeeFields):
    """Response body for a single employee."""
    id: int

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeRead":
        return cls.model_validate(employee)


class DeleteResult(BaseModel):
    deleted: bool
