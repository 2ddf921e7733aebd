import logging

logger = logging.getLogger('django.server')


def get_client_ip(request):
    """
    Client IP address, honouring X-Forwarded-For.
    """
    x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
    if x_forwarded_for:
        return x_forwarded_for.split(',')[0].strip()
    return request.META.get('REMOTE_ADDR')


class RequestLogMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        ip = get_client_ip(request)
        response = self.get_response(request)
        logger.info(f"{request.method} {request.path} from {ip} -> {response.status_code}")
        return response
