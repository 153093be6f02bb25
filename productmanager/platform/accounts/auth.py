"""
Single-administrator session login.

The admin credentials come from settings (ADMIN_LOGIN / ADMIN_PASSWORD);
a successful login stores the login name in the session, and the session
cookie is what keeps the admin signed in.
"""
import logging
from functools import wraps
from urllib.parse import urlencode

from django.conf import settings
from django.shortcuts import redirect
from django.urls import reverse
from django.utils.crypto import constant_time_compare

logger = logging.getLogger(__name__)

SESSION_KEY = "admin_user"


def check_admin_credentials(username: str, password: str) -> bool:
    login_ok = constant_time_compare(username or "", settings.ADMIN_LOGIN)
    password_ok = constant_time_compare(password or "", settings.ADMIN_PASSWORD)
    return login_ok and password_ok


def sign_in(request, username: str) -> None:
    # New session key on login so a pre-login session id cannot be reused
    request.session.cycle_key()
    request.session[SESSION_KEY] = username
    logger.info("Admin %s signed in", username)


def sign_out(request) -> None:
    username = request.session.get(SESSION_KEY)
    request.session.flush()
    if username:
        logger.info("Admin %s signed out", username)


def is_admin(request) -> bool:
    return bool(request.session.get(SESSION_KEY))


def admin_required(view_func):
    """Redirect anonymous visitors to the login page, remembering where they were going."""

    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not is_admin(request):
            login_url = reverse("accounts:login")
            return redirect(f"{login_url}?{urlencode({'next': request.get_full_path()})}")
        return view_func(request, *args, **kwargs)

    return _wrapped
