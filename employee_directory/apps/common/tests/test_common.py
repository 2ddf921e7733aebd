import pytest
from django.http import HttpResponse
from django.test import RequestFactory
from rest_framework import status
from rest_framework.test import APIClient
from employee_directory.apps.common.middleware import RequestLogMiddleware, get_client_ip


def test_health():
    response = APIClient().get('/health')

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {'status': 'healthy'}


@pytest.mark.django_db
def test_schema_lists_employee_endpoints():
    response = APIClient().get('/api/schema/', HTTP_ACCEPT='application/vnd.oai.openapi+json')

    assert response.status_code == status.HTTP_200_OK
    assert '/employees' in response.json()['paths']


def test_client_ip_prefers_forwarded_for():
    request = RequestFactory().get('/employees', HTTP_X_FORWARDED_FOR='10.0.0.1, 10.0.0.2', REMOTE_ADDR='127.0.0.1')
    assert get_client_ip(request) == '10.0.0.1'


def test_client_ip_falls_back_to_remote_addr():
    request = RequestFactory().get('/employees', REMOTE_ADDR='192.168.1.5')
    assert get_client_ip(request) == '192.168.1.5'


def test_request_log_middleware(mocker):
    logger = mocker.patch('employee_directory.apps.common.middleware.logger')
    middleware = RequestLogMiddleware(lambda request: HttpResponse(status=204))
    request = RequestFactory().delete('/employees/1', REMOTE_ADDR='127.0.0.1')

    response = middleware(request)

    assert response.status_code == 204
    logger.info.assert_called_once_with("DELETE /employees/1 from 127.0.0.1 -> 204")
