"""
accounts/urls.py
────────────────
Sign-in, sign-out and password upkeep for registrar staff.
Mounted at the site root by campus/urls.py.
"""

from django.urls import path

from . import views

urlpatterns = [
    path('login/',  views.login_view,  name='login'),
    path('logout/', views.logout_view, name='logout'),
    path('password-change/',      views.RegistrarPasswordChangeView.as_view(), name='password_change'),
    path('password-change/done/', views.RegistrarPasswordDoneView.as_view(),   name='password_change_done'),
]
