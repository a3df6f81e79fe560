"""
URL configuration for the Portfolio CMS API.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.urls import path

from apps.feeds.views import robots_txt
from .api import api

urlpatterns = [
    path("api/", api.urls),
    path("robots.txt", robots_txt, name="robots"),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
