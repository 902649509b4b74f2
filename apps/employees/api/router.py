from typing import List
from fastapi import APIRouter, Depends
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.database.manager import DatabaseManager
from framework.repository.base import IRepository
from ..models import Employee
from ..repository import EmployeeRepository
from ..schemas import EmployeePayload, EmployeeRead, DeleteResult
from ..service import EmployeeService

router = APIRouter()

async def get_db():
    """Get database session."""
    manager = DatabaseManager.get_instance()
    async for session in manager.sql.get_session():
        yield session

def get_employee_repository(
    db: AsyncSession = Depends(get_db)
) -> IRepository[Employee]:
    """Dependency: storage collaborator for employees."""
    return EmployeeRepository(db)

def get_employee_service(
    repository: IRepository[Employee] = Depends(get_employee_repository)
) -> EmployeeService:
    """Dependency: create EmployeeService."""
    return EmployeeService(repository)

async def get_existing_employee(
    id: int,
    service: EmployeeService = Depends(get_employee_service)
) -> Employee:
    """Dependency: load the employee named by the path id, 404 when absent.

    Resolved before the request body is validated, so an unknown id wins over a bad body.
    """
    return await service.get_employee(id)


async def list_employees(
    service: EmployeeService = Depends(get_employee_service)
) -> List[EmployeeRead]:
    """List all employees."""
    employees = await service.list_employees()
    return [EmployeeRead.from_entity(e) for e in employees]

async def create_employee(
    payload: EmployeePayload,
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeRead:
    """Create employee; id is assigned by storage."""
    return EmployeeRead.from_entity(await service.create_employee(payload))

async def get_employee(
    id: int,
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeRead:
    """Get employee by id; 404 when absent."""
    return EmployeeRead.from_entity(await service.get_employee(id))

async def update_employee(
    payload: EmployeePayload,
    employee: Employee = Depends(get_existing_employee),
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeRead:
    """Replace first name, last name and email of an employee; 404 when absent."""
    return EmployeeRead.from_entity(await service.update_employee(employee, payload))

async def delete_employee(
    id: int,
    service: EmployeeService = Depends(get_employee_service)
) -> DeleteResult:
    """Delete employee; 404 when absent."""
    return await service.delete_employee(id)


# (path, methods, endpoint, response model)
EMPLOYEE_ROUTES = (
    ("", ["GET"], list_employees, List[EmployeeRead]),
    ("", ["POST"], create_employee, EmployeeRead),
    ("/{id}", ["GET"], get_employee, EmployeeRead),
    ("/{id}", ["PUT"], update_employee, EmployeeRead),
    ("/{id}", ["DELETE"], delete_employee, DeleteResult),
)

for path, methods, endpoint, response_model in EMPLOYEE_ROUTES:
    router.add_api_route(
        path,
        endpoint,
        methods=methods,
        response_model=response_model,
        responses={404: {"description": "Employee not found"}} if path else None,
    )
