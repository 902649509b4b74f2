"""
Model registration for migrations: import every table model Alembic should see here.
alembic/env.py only imports this module.
"""
from apps.employees.models import Employee

__all__ = ["Employee"]
