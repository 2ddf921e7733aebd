from rest_framework import viewsets, permissions, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import EmployeeSerializer
from employee_directory.apps.employees.application.services import EmployeeApplicationService


class EmployeeViewSet(viewsets.ViewSet):
    """
    ViewSet справочника сотрудников.

    Endpoints:
    - GET /employees - Список сотрудников
    - POST /employees - Создание или перезапись сотрудника
    - DELETE /employees/{id} - Удаление сотрудника
    """
    permission_classes = [permissions.AllowAny]
    serializer_class = EmployeeSerializer
    lookup_value_regex = r'\d+'
    service_class = EmployeeApplicationService

    def get_service(self) -> EmployeeApplicationService:
        return self.service_class()

    @extend_schema(responses=EmployeeSerializer(many=True))
    def list(self, request):
        employees = self.get_service().get_all()
        return Response(EmployeeSerializer(employees, many=True).data)

    @extend_schema(request=EmployeeSerializer, responses=EmployeeSerializer)
    def create(self, request):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        employee = self.get_service().save(serializer.to_employee())
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_200_OK)

    @extend_schema(responses={204: None})
    def destroy(self, request, pk=None):
        self.get_service().delete(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
