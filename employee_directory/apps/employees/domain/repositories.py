from abc import ABC, abstractmethod
from typing import List
from employee_directory.apps.employees.models import Employee

class EmployeeRepository(ABC):
    """
    Абстрактный репозиторий сотрудников.
    Определяет контракт, которому должны следовать конкретные реализации.
    """
    @abstractmethod
    def find_all(self) -> List[Employee]:
        pass

    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: int):
        pass
