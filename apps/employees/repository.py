"""Employee repository implementation."""

from framework.repository.base import BaseRepository
from .models import Employee


class EmployeeRepository(BaseRepository[Employee]):
    """Employee repository."""

    def __init__(self, session):
        super().__init__(session, Employee)
