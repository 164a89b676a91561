from .login_views import login_view, logout_view, register_view
from .profile_views import home_dashboard, profile_view, password_change_view

__all__ = [
    # Auth
    'login_view',
    'logout_view',
    'register_view',

    # Profile
    'home_dashboard',
    'profile_view',
    'password_change_view',
]
