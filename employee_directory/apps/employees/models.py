from django.db import models


class Employee(models.Model):
    """Запись справочника сотрудников"""

    name = models.CharField(max_length=255)
    role = models.CharField(max_length=255, blank=True)
    department = models.CharField(max_length=255, blank=True)
    email = models.EmailField(blank=True)

    class Meta:
        db_table = 'employees'
        verbose_name = 'Employee'
        verbose_name_plural = 'Employees'
        ordering = ['id']

    def __str__(self):
        return self.name
