import logging
from typing import List
from employee_directory.apps.employees.models import Employee
from employee_directory.apps.employees.domain.repositories import EmployeeRepository
from employee_directory.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl

logger = logging.getLogger(__name__)


class EmployeeApplicationService:
    """
    Сервис справочника сотрудников. Все операции передаются в репозиторий без изменений.
    """
    def __init__(self, employee_repository: EmployeeRepository = EmployeeRepositoryImpl()):
        self.employee_repository = employee_repository

    def get_all(self) -> List[Employee]:
        return self.employee_repository.find_all()

    def save(self, employee: Employee) -> Employee:
        logger.debug(f"Saving employee id={employee.pk}")
        return self.employee_repository.save(employee)

    def delete(self, employee_id: int):
        logger.debug(f"Deleting employee id={employee_id}")
        self.employee_repository.delete_by_id(employee_id)
