"""
Profile Views
หน้าแรก, แก้ไขโปรไฟล์ และเปลี่ยนรหัสผ่านของผู้ใช้ที่ login อยู่
"""

import logging

from django.shortcuts import render, redirect
from django.contrib.auth import update_session_auth_hash
from django.contrib.auth.decorators import login_required
from django.contrib.auth.forms import PasswordChangeForm
from django.contrib import messages
from accounts.forms import ProfileForm
from accounts.models import Profile

logger = logging.getLogger(__name__)


def _get_profile(user):
    # user ที่สร้างก่อนมีตาราง Profile อาจยังไม่มี
    profile, _ = Profile.objects.get_or_create(user=user)
    return profile


@login_required
def home_dashboard(request):
    """หน้าแรกหลัง login"""
    return render(request, 'accounts/home.html', {
        'profile': _get_profile(request.user),
    })


@login_required
def profile_view(request):
    """ดู/แก้ไขข้อมูลส่วนตัว"""

    profile = _get_profile(request.user)

    if request.method == 'POST':
        form = ProfileForm(request.POST, instance=profile)
        if form.is_valid():
            form.save()
            messages.success(request, "✅ บันทึกข้อมูลเรียบร้อย")
            return redirect('profile')
        messages.error(request, "❌ กรุณาตรวจสอบข้อมูลอีกครั้ง")
    else:
        form = ProfileForm(instance=profile)

    return render(request, 'accounts/profile.html', {
        'form': form,
        'profile': profile,
    })


@login_required
def password_change_view(request):
    """เปลี่ยนรหัสผ่าน (ยัง login อยู่หลังเปลี่ยน)"""

    if request.method == 'POST':
        form = PasswordChangeForm(request.user, request.POST)
        if form.is_valid():
            user = form.save()
            # ไม่งั้น session เดิมจะหลุด
            update_session_auth_hash(request, user)
            logger.info("User %s changed password", user.username)
            messages.success(request, "🔐 เปลี่ยนรหัสผ่านเรียบร้อย")
            return redirect('profile')
        messages.error(request, "❌ เปลี่ยนรหัสผ่านไม่สำเร็จ")
    else:
        form = PasswordChangeForm(request.user)

    return render(request, 'accounts/password_change.html', {'form': form})
