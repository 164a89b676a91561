# ===================================
# ไฟล์: accounts/views/login_views.py
# ===================================

import logging

from django.shortcuts import render, redirect
from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.decorators import login_required
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme

from accounts.forms import RegisterForm

logger = logging.getLogger(__name__)


def _safe_next_url(request):
    """คืน next ที่ปลอดภัย (host เดียวกันเท่านั้น) หรือ None"""
    next_url = request.POST.get('next') or request.GET.get('next')
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return None


# ===================================
# Login
# ===================================
def login_view(request):
    """หน้าเข้าสู่ระบบ"""

    # ถ้า login แล้ว redirect ไปหน้าแรก
    if request.user.is_authenticated:
        return redirect('home_dashboard')

    username = ''

    if request.method == 'POST':
        username = request.POST.get('username', '').strip()
        password = request.POST.get('password', '')

        if not username or not password:
            messages.error(request, 'กรุณากรอกชื่อผู้ใช้และรหัสผ่าน')
        else:
            # ตรวจสอบ
            user = authenticate(request, username=username, password=password)

            if user is not None:
                # Login สำเร็จ
                login(request, user)
                logger.info("User %s logged in", user.username)

                # Redirect ไปหน้าที่ต้องการ (หรือหน้าที่เคยอยู่ก่อน login)
                return redirect(_safe_next_url(request) or 'home_dashboard')

            # Login ไม่สำเร็จ
            logger.warning("Failed login attempt for username %r", username)
            messages.error(request, 'ชื่อผู้ใช้หรือรหัสผ่านไม่ถูกต้อง')

    return render(request, 'accounts/login.html', {
        'username': username,
        'next': _safe_next_url(request) or '',
    })


# ===================================
# Logout
# ===================================
@login_required
def logout_view(request):
    """ออกจากระบบ (GET = หน้ายืนยัน, POST = ออกจริง)"""

    if request.method == 'POST':
        username = request.user.username
        logout(request)
        logger.info("User %s logged out", username)
        messages.success(request, 'ออกจากระบบสำเร็จ')
        return redirect('login')

    return render(request, 'accounts/logout.html')


# ===================================
# Register
# ===================================
def register_view(request):
    """สมัครสมาชิกใหม่"""

    if request.user.is_authenticated:
        return redirect('home_dashboard')

    if request.method == 'POST':
        form = RegisterForm(request.POST)

        if form.is_valid():
            user = form.save()
            logger.info("Registered new user %s", user.username)

            # สมัครเสร็จ login ให้เลย
            login(request, user, backend='django.contrib.auth.backends.ModelBackend')
            messages.success(request, f'✅ สมัครสมาชิกเรียบร้อย ยินดีต้อนรับ {user.profile.name}')
            return redirect('home_dashboard')

        messages.error(request, 'กรุณาตรวจสอบข้อมูลอีกครั้ง')
    else:
        form = RegisterForm()

    return render(request, 'accounts/register.html', {'form': form})
