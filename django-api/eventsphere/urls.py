from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

from accounts.urls import auth_urlpatterns
from events.urls import event_urlpatterns
from eventsphere.context import build_context

APP_CONTEXT = build_context()

urlpatterns = [
    path("admin/", admin.site.urls),
    path(
        "api/",
        include(auth_urlpatterns(APP_CONTEXT) + event_urlpatterns(APP_CONTEXT)),
    ),
    *static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT),
]
