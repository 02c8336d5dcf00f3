"""
accounts/middleware.py
──────────────────────
Session guard evaluated before every view.

Views never check the session themselves: an anonymous request is stopped
here, before the view (and its queries) run.

  • /api/…        → 401 {"error": "Authentication required."}
  • any other URL → redirect to the login page with ?next=<url>

Exempt: views decorated with @login_exempt and the path prefixes listed in
settings.CAMPUS_LOGIN_EXEMPT_PREFIXES (admin has its own login, static files
are public).
"""

import logging
from functools import wraps

from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from django.http import JsonResponse

logger = logging.getLogger(__name__)

API_PREFIX = '/api/'


def login_exempt(view_fn):
    """Mark a view as reachable without a logged-in user."""
    @wraps(view_fn)
    def wrapper(req, *args, **kwargs):
        return view_fn(req, *args, **kwargs)
    wrapper.login_exempt = True
    return wrapper


class LoginRequiredMiddleware:
    def __init__(self, get_response):
        self.get_response = get_response
        self.exempt_prefixes = tuple(getattr(settings, 'CAMPUS_LOGIN_EXEMPT_PREFIXES', ()))

    def __call__(self, req):
        return self.get_response(req)

    def process_view(self, req, view_fn, view_args, view_kwargs):
        if req.user.is_authenticated:
            return None
        if getattr(view_fn, 'login_exempt', False):
            return None
        if self.exempt_prefixes and req.path.startswith(self.exempt_prefixes):
            return None

        if req.path.startswith(API_PREFIX):
            logger.info(f"Rejected anonymous API request: {req.method} {req.path}")
            return JsonResponse({'error': 'Authentication required.'}, status=401)
        return redirect_to_login(req.get_full_path())
