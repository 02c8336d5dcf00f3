"""
accounts/views.py
─────────────────
Registrar staff sign-in and account upkeep.

  login_view                  – /login/, the only page open to anonymous users
  logout_view                 – /logout/ (POST)
  RegistrarPasswordChangeView – /password-change/
  RegistrarPasswordDoneView   – /password-change/done/

Staff accounts are plain django.contrib.auth users created through the admin;
students never sign in here.
"""

import logging

from django.contrib import messages
from django.contrib.auth import login, logout
from django.contrib.auth.forms import AuthenticationForm
from django.contrib.auth.views import PasswordChangeDoneView, PasswordChangeView
from django.contrib.messages.views import SuccessMessageMixin
from django.shortcuts import redirect, render
from django.urls import reverse_lazy
from django.utils.http import url_has_allowed_host_and_scheme

from core.http import add_form_control_class, require_POST_or_405

from .middleware import login_exempt

logger = logging.getLogger(__name__)


def _safe_next(req):
    next_url = req.POST.get('next') or req.GET.get('next') or ''
    if next_url and url_has_allowed_host_and_scheme(
        next_url, allowed_hosts={req.get_host()}, require_https=req.is_secure()
    ):
        return next_url
    return None


# ── Sign in / out ─────────────────────────────────────────────────────────────

@login_exempt
def login_view(req):
    if req.user.is_authenticated:
        return redirect('dashboard')

    form = AuthenticationForm(req, data=req.POST or None)
    if req.method == 'POST':
        if form.is_valid():
            staff = form.get_user()
            login(req, staff)
            logger.info(f"Registrar staff {staff.username} signed in")
            messages.success(req, f'Signed in as {staff.get_full_name() or staff.username}.')
            return redirect(_safe_next(req) or 'dashboard')

        logger.warning(f"Failed sign-in for {req.POST.get('username', '')!r}")
        messages.error(req, 'Invalid username or password. Please try again.')

    return render(req, 'accounts/login.html', {
        'form': form,
        'next': req.POST.get('next') or req.GET.get('next', ''),
    })


@require_POST_or_405
def logout_view(req):
    username = req.user.get_username()
    logout(req)
    logger.info(f"Registrar staff {username or '(anonymous)'} signed out")
    messages.info(req, 'You have been logged out.')
    return redirect('login')


# ── Password upkeep ───────────────────────────────────────────────────────────

class RegistrarPasswordChangeView(SuccessMessageMixin, PasswordChangeView):
    """Django's password change flow rendered in the registrar layout."""

    template_name = 'accounts/password_change.html'
    success_url = reverse_lazy('password_change_done')
    success_message = 'Your password was updated successfully.'

    def get_form(self, form_class=None):
        return add_form_control_class(super().get_form(form_class))

    def form_valid(self, form):
        logger.info(f"Password changed for {self.request.user.username}")
        return super().form_valid(form)

    def form_invalid(self, form):
        messages.error(self.request, 'Please fix the errors below.')
        return super().form_invalid(form)


class RegistrarPasswordDoneView(PasswordChangeDoneView):
    template_name = 'accounts/password_change_done.html'
