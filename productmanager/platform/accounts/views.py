import logging
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods

from .auth import check_admin_credentials, is_admin, sign_in, sign_out
from .forms import LoginForm

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


def _safe_next_url(request, next_url):
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return None


@require_http_methods(["GET", "POST"])
def login_view(request):
    next_url = request.POST.get("next") or request.GET.get("next")

    if request.method == "GET":
        if is_admin(request):
            return redirect(_safe_next_url(request, next_url) or reverse("products:index"))
        return render(request, "accounts/login.html", {"form": LoginForm(), "next": next_url})

    form = LoginForm(request.POST)
    if form.is_valid():
        username = form.cleaned_data["username"]
        if check_admin_credentials(username, form.cleaned_data["password"]):
            sign_in(request, username)
            return redirect(_safe_next_url(request, next_url) or reverse("products:index"))
        logger.warning("Failed admin login for %s", username)
        form.add_error(None, INVALID_CREDENTIALS_MESSAGE)

    return render(request, "accounts/login.html", {"form": form, "next": next_url})


def logout_view(request):
    sign_out(request)
    return redirect("accounts:login")
