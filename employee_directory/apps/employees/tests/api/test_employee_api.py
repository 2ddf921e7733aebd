import pytest
from django.db import OperationalError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from employee_directory.apps.employees.models import Employee
from tests.fixtures.factories import EmployeeFactory

@pytest.mark.django_db
class TestEmployeeViewSetAPI:
    def setup_method(self):
        self.client = APIClient()

    def test_urls(self):
        assert reverse('employee-list') == '/employees'
        assert reverse('employee-detail', args=[3]) == '/employees/3'

    def test_list_empty(self):
        response = self.client.get('/employees')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list(self):
        alice = EmployeeFactory(name='Alice', role='Engineer', department='R&D', email='alice@example.com')
        bob = EmployeeFactory(name='Bob')

        response = self.client.get('/employees')

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item['id'] for item in data] == [alice.id, bob.id]
        assert data[0] == {
            'id': alice.id,
            'name': 'Alice',
            'role': 'Engineer',
            'department': 'R&D',
            'email': 'alice@example.com',
        }

    def test_create(self):
        """POST без id создает сотрудника и возвращает 200 с id"""
        response = self.client.post('/employees', {'name': 'Alice', 'role': 'Engineer'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data['id'] is not None
        assert data['name'] == 'Alice'
        assert Employee.objects.get(pk=data['id']).role == 'Engineer'

    def test_create_with_existing_id_overwrites(self):
        employee = EmployeeFactory(name='Alice')

        response = self.client.post(
            '/employees', {'id': employee.id, 'name': 'Alicia', 'department': 'Sales'}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['id'] == employee.id
        assert Employee.objects.count() == 1
        employee.refresh_from_db()
        assert employee.name == 'Alicia'
        assert employee.department == 'Sales'

    def test_create_without_name(self):
        response = self.client.post('/employees', {'role': 'Engineer'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'name' in response.json()
        assert Employee.objects.count() == 0

    def test_delete(self):
        employee = EmployeeFactory()

        response = self.client.delete(f'/employees/{employee.id}')

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert response.content == b''
        assert not Employee.objects.filter(pk=employee.id).exists()

    def test_delete_missing_ignored(self):
        response = self.client.delete('/employees/999')

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_delete_missing_not_found_when_configured(self, settings):
        settings.EMPLOYEE_DIRECTORY = {'DELETE_MISSING': 'raise'}

        response = self.client.delete('/employees/999')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'detail': 'Employee 999 not found'}

    def test_delete_out_of_range_id(self):
        huge_id = '9' * 30

        response = self.client.delete(f'/employees/{huge_id}')

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_delete_out_of_range_id_not_found_when_configured(self, settings):
        settings.EMPLOYEE_DIRECTORY = {'DELETE_MISSING': 'raise'}

        response = self.client.delete('/employees/' + '9' * 30)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_with_out_of_range_id(self):
        response = self.client.post('/employees', {'id': 10 ** 30, 'name': 'Alice'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'id' in response.json()
        assert Employee.objects.count() == 0

    def test_delete_non_numeric_id(self):
        response = self.client.delete('/employees/abc')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_storage_unavailable(self, mocker):
        mocker.patch.object(Employee.objects, 'order_by', side_effect=OperationalError('connection refused'))

        response = self.client.get('/employees')

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json() == {'detail': 'Employee storage is unavailable.'}

    def test_scenario(self):
        alice = self.client.post('/employees', {'name': 'Alice'}, format='json').json()
        bob = self.client.post('/employees', {'name': 'Bob'}, format='json').json()

        names = [e['name'] for e in self.client.get('/employees').json()]
        assert names == ['Alice', 'Bob']

        assert self.client.delete(f"/employees/{alice['id']}").status_code == status.HTTP_204_NO_CONTENT

        assert self.client.get('/employees').json() == [
            {'id': bob['id'], 'name': 'Bob', 'role': '', 'department': '', 'email': ''}
        ]
