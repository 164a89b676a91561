from django.urls import path
from . import views


urlpatterns = [
    # Login/Logout
    path('login/', views.login_view, name='login'),
    path('logout/', views.logout_view, name='logout'),

    # สมัครสมาชิก
    path('register/', views.register_view, name='register'),

    # Profile
    path('profile/', views.profile_view, name='profile'),
    path('password/', views.password_change_view, name='password_change'),
]
