import logging
from contextlib import contextmanager
from typing import List

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError, InterfaceError, OperationalError

from employee_directory.apps.employees.models import Employee
from employee_directory.apps.employees.domain.exceptions import EmployeeNotFound, StorageUnavailable
from employee_directory.apps.employees.domain.repositories import EmployeeRepository

logger = logging.getLogger(__name__)

DELETE_MISSING_IGNORE = 'ignore'
DELETE_MISSING_RAISE = 'raise'
DELETE_MISSING_CHOICES = (DELETE_MISSING_IGNORE, DELETE_MISSING_RAISE)


@contextmanager
def storage_errors():
    """Re-raises connection failures from the ORM as StorageUnavailable."""
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logger.error(f"Employee storage unavailable: {e}")
        raise StorageUnavailable(str(e)) from e


def check_delete_policy(policy: str) -> str:
    if policy not in DELETE_MISSING_CHOICES:
        raise ImproperlyConfigured(
            f"EMPLOYEE_DIRECTORY['DELETE_MISSING'] must be one of {DELETE_MISSING_CHOICES}, got {policy!r}"
        )
    return policy


class EmployeeRepositoryImpl(EmployeeRepository):
    """
    Конкретная реализация репозитория сотрудников,
    использующая Django ORM.

    ``delete_missing`` decides what deleting an unknown id does; when not
    given it is read from ``settings.EMPLOYEE_DIRECTORY['DELETE_MISSING']``
    on every call.
    """
    def __init__(self, delete_missing: str = None):
        self._delete_missing = delete_missing
        if delete_missing is not None:
            check_delete_policy(delete_missing)

    @property
    def delete_missing(self) -> str:
        policy = self._delete_missing
        if policy is None:
            policy = getattr(settings, 'EMPLOYEE_DIRECTORY', {}).get('DELETE_MISSING', DELETE_MISSING_IGNORE)
        return check_delete_policy(policy)

    def find_all(self) -> List[Employee]:
        with storage_errors():
            return list(Employee.objects.order_by('id'))

    def save(self, employee: Employee) -> Employee:
        with storage_errors():
            created = employee.pk is None
            if not created:
                try:
                    employee.save(force_update=True)
                except DatabaseError as e:
                    # a forced update that matched no row raises a bare DatabaseError
                    if type(e) is not DatabaseError:
                        raise
                    logger.debug(f"Employee {employee.pk} does not exist, inserting as new")
                    employee.pk = None
                    created = True
            if created:
                employee.save(force_insert=True)
        logger.info(f"Employee {employee.pk} {'created' if created else 'updated'}")
        return employee

    def delete_by_id(self, employee_id: int):
        policy = self.delete_missing
        with storage_errors():
            deleted, _ = Employee.objects.filter(pk=employee_id).delete()
        if deleted:
            logger.info(f"Employee {employee_id} deleted")
            return
        if policy == DELETE_MISSING_RAISE:
            raise EmployeeNotFound(employee_id)
        logger.info(f"Employee {employee_id} not found, nothing to delete")
