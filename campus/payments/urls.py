"""
payments/urls.py
────────────────
URL patterns for tuition payments.
Include in the root urls.py with:
    path('', include('payments.urls')),
"""

from django.urls import path

from . import views

urlpatterns = [
    path('all-payments/',                        views.all_payments_view,     name='all_payments'),
    path('students/<str:student_id>/payments/',  views.student_payments_view, name='student_payments'),

    # JSON API
    path('api/get-all-payments', views.get_all_payments_api, name='get_all_payments_api'),
    path('api/payments',         views.payments_api,         name='payments_api'),
]
