from django.db import models
from rest_framework import serializers
from employee_directory.apps.employees.models import Employee

class EmployeeSerializer(serializers.ModelSerializer):
    """
    Сериализатор для модели Employee.
    ``id`` may be sent to overwrite an existing record.
    """
    id = serializers.IntegerField(
        required=False, allow_null=True, min_value=1, max_value=models.BigIntegerField.MAX_BIGINT
    )

    class Meta:
        model = Employee
        fields = ['id', 'name', 'role', 'department', 'email']

    def to_employee(self) -> Employee:
        """Unsaved Employee built from validated data."""
        return Employee(**self.validated_data)
