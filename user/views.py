from django.shortcuts import render, redirect, resolve_url
from django.contrib.auth import login, logout
from django.contrib import messages
from django.conf import settings
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods, require_POST
import logging

from .forms import LoginForm

logger = logging.getLogger(__name__)


def get_redirect_target(request):
    target = request.POST.get('next') or request.GET.get('next')
    if target and url_has_allowed_host_and_scheme(
        target, allowed_hosts={request.get_host()}, require_https=request.is_secure()
    ):
        return target
    return resolve_url(settings.LOGIN_REDIRECT_URL)


@require_http_methods(["GET", "POST"])
def user_login(request):
    # Already signed in, go straight to the dashboard
    if request.user.is_authenticated:
        return redirect(get_redirect_target(request))

    if request.method == 'POST':
        form = LoginForm(request, data=request.POST)
        if form.is_valid():
            user = form.get_user()
            login(request, user)
            if not form.cleaned_data.get('remember_me'):
                # Session ends when the browser closes
                request.session.set_expiry(0)
            logger.info(f"User {user.username} signed in from {request.META.get('REMOTE_ADDR')}")
            messages.success(request, f'Welcome back, {user.username}!')
            return redirect(get_redirect_target(request))
        else:
            logger.warning(f"Failed sign in for '{request.POST.get('username', '')}' from {request.META.get('REMOTE_ADDR')}")
            messages.error(request, 'Invalid username or password')
    else:
        form = LoginForm(request)

    return render(request, "login.html", {
        "form": form,
        "next": request.GET.get('next', ''),
    })


@require_POST
def user_logout(request):
    logout(request)
    messages.info(request, 'You have been logged out successfully')
    return redirect(settings.LOGOUT_REDIRECT_URL)
