# Third-party
from django.contrib import admin
from django.urls import include, path
from django_prometheus import exports

# First-party/Local
from memberportal.api.views import health_check
from memberportal.oidc import LogoutView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/v1/", include("memberportal.api.urls")),
    path("oidc/logout/", LogoutView.as_view(), name="oidc_logout"),
    path("oidc/", include("mozilla_django_oidc.urls")),
    path("health/", health_check, name="health-check"),
    path("metrics", exports.ExportToDjangoView, name="prometheus-django-metrics"),
]
