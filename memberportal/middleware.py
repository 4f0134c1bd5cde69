# Third-party
from django.utils.cache import add_never_cache_headers


class DisableClientSideCachingMiddleware:
    """
    Member data changes whenever an admin edits it, so responses must never
    be served from a browser or proxy cache
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)
        add_never_cache_headers(response)
        return response
