"""Root URL configuration."""

from django.urls import include, path

urlpatterns = [
    path('explorer/', include('server.apps.explorer.urls')),
]
