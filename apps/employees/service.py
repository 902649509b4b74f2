from typing import List
from framework.logging.logger import get_logger
from framework.exceptions.handler import NotFoundException
from framework.repository.base import IRepository
from .models import Employee
from .schemas import EmployeePayload, DeleteResult

logger = get_logger("employee_service")


class EmployeeService:
    """CRUD operations over employee records."""

    def __init__(self, repository: IRepository[Employee]):
        self.repository = repository

    async def list_employees(self) -> List[Employee]:
        return await self.repository.find_all()

    async def create_employee(self, payload: EmployeePayload) -> Employee:
        employee = await self.repository.save(payload.to_entity())
        logger.info(f"Employee {employee.id} created")
        return employee

    async def get_employee(self, employee_id: int) -> Employee:
        employee = await self.repository.find_by_id(employee_id)
        if employee is None:
            raise NotFoundException(f"Employee not exist with id: {employee_id}")
        return employee

    async def update_employee(self, employee: Employee, payload: EmployeePayload) -> Employee:
        """Overwrite an already-loaded record; callers look it up with get_employee first."""
        employee = await self.repository.save(payload.apply_to(employee))
        logger.info(f"Employee {employee.id} updated")
        return employee

    async def delete_employee(self, employee_id: int) -> DeleteResult:
        await self.get_employee(employee_id)
        await self.repository.delete_by_id(employee_id)
        logger.info(f"Employee {employee_id} deleted")
        return DeleteResult(deleted=True)
