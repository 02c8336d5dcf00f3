"""
URL configuration for the campus project.

── Routing ────────────────────────────────────────────────────────────────────
  path('', include('core.urls')),       # landing, dashboard, /uploads/
  path('', include('accounts.urls')),   # login / logout / password change
  path('', include('students.urls')),   # /lists/…, /api/students, /api/upload
  path('', include('payments.urls')),   # /all-payments/, /api/get-all-payments
  path('', include('events.urls')),     # /events/…, /api/events

Every route except the login page sits behind
accounts.middleware.LoginRequiredMiddleware.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),

    path('', include('core.urls')),
    path('', include('accounts.urls')),
    path('', include('students.urls')),
    path('', include('payments.urls')),
    path('', include('events.urls')),
]

handler404 = 'core.views.handler404'
handler500 = 'core.views.handler500'
