"""
Errors raised by the employee record store.
"""


class EmployeeDirectoryError(Exception):
    """Base class for employee directory errors."""
    pass


class StorageUnavailable(EmployeeDirectoryError):
    """The database backing the directory cannot be reached."""
    pass


class EmployeeNotFound(EmployeeDirectoryError):
    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(f"Employee {employee_id} not found")
