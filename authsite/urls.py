from django.contrib import admin
from django.urls import path, include

from accounts import views


urlpatterns = [
    path('admin/', admin.site.urls),

    # หน้าแรก (ต้อง login ก่อน)
    path('', views.home_dashboard, name='home_dashboard'),

    # Login / Logout / Register / Profile
    path('accounts/', include('accounts.urls')),
]
