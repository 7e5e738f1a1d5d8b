from django.contrib import admin
from django.urls import path
from django.utils.translation import gettext_lazy as _

admin.site.site_header = _("Admin Notices")
admin.site.site_title = _("Admin Notices")

urlpatterns = [
    path("admin/", admin.site.urls),
]
