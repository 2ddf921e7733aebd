from django.contrib import admin
from employee_directory.apps.employees.models import Employee


class HasEmailFilter(admin.SimpleListFilter):
    """Сотрудники с/без email"""
    title = 'Email'
    parameter_name = 'has_email'

    def lookups(self, request, model_admin):
        return (
            ('yes', 'With email'),
            ('no', 'Without email'),
        )

    def queryset(self, request, queryset):
        if self.value() == 'yes':
            return queryset.exclude(email='')
        if self.value() == 'no':
            return queryset.filter(email='')
        return queryset


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'role', 'department', 'email']
    list_filter = ['department', HasEmailFilter]
    search_fields = ['name', 'role', 'department', 'email']
    ordering = ['id']
