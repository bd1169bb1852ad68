# fizzylogic/middleware.py
import logging

from django.conf import settings
from django.contrib.staticfiles.views import serve as serve_static
from django.http import Http404
from django.views.static import serve as serve_media

logger = logging.getLogger(__name__)

# Read by SECURE_PROXY_SSL_HEADER. Not an HTTP_ key, so clients cannot send it
FORWARDED_PROTO_KEY = 'FORWARDED_PROTO'


class ForwardedHeadersMiddleware:
    """
    Apply X-Forwarded-For and X-Forwarded-Proto set by the reverse proxy.

    Only peers listed in FORWARDED_HEADERS_KNOWN_PROXIES are trusted. From any
    other peer the headers are dropped so the client cannot spoof its address
    or the request scheme.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.known_proxies = set(settings.FORWARDED_HEADERS_KNOWN_PROXIES)

    def __call__(self, request):
        self.apply_forwarded_headers(request)
        return self.get_response(request)

    def apply_forwarded_headers(self, request):
        meta = request.META
        # Only this middleware may set the scheme Django trusts for is_secure()
        meta.pop(FORWARDED_PROTO_KEY, None)
        forwarded_for = meta.get('HTTP_X_FORWARDED_FOR')
        forwarded_proto = meta.get('HTTP_X_FORWARDED_PROTO')

        if not forwarded_for and not forwarded_proto:
            return

        peer = meta.get('REMOTE_ADDR')
        if peer not in self.known_proxies:
            logger.debug(f"Ignoring forwarded headers from untrusted peer: {peer}")
            meta.pop('HTTP_X_FORWARDED_FOR', None)
            meta.pop('HTTP_X_FORWARDED_PROTO', None)
            return

        if forwarded_for:
            client_ip = self.last_value(forwarded_for)
            if client_ip:
                meta['HTTP_X_ORIGINAL_FOR'] = peer
                meta['REMOTE_ADDR'] = client_ip

        if forwarded_proto:
            meta['HTTP_X_ORIGINAL_PROTO'] = forwarded_proto
            scheme = self.last_value(forwarded_proto).lower()
            meta['HTTP_X_FORWARDED_PROTO'] = scheme
            meta[FORWARDED_PROTO_KEY] = scheme

    @staticmethod
    def last_value(header):
        # Forward limit of one: only the entry added by our own proxy counts
        return header.split(',')[-1].strip()


class StaticFilesMiddleware:
    """
    Serve /static/ and /media/ before the request reaches sessions and auth.

    nginx maps both directories directly in production, this keeps the site
    usable when it is reached without the proxy in front.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        self.static_prefix = settings.STATIC_URL
        self.media_prefix = settings.MEDIA_URL

    def __call__(self, request):
        if request.method in ('GET', 'HEAD'):
            response = self.serve(request)
            if response is not None:
                return response
        return self.get_response(request)

    def serve(self, request):
        path = request.path_info
        try:
            if path.startswith(self.static_prefix):
                return serve_static(request, path[len(self.static_prefix):], insecure=True)
            if path.startswith(self.media_prefix):
                return serve_media(request, path[len(self.media_prefix):], document_root=settings.MEDIA_ROOT)
        except Http404:
            return None
        return None
