from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.contrib.auth.models import User
from .models import Profile


class ProfileInline(admin.StackedInline):
    model = Profile
    can_delete = False
    verbose_name_plural = 'โปรไฟล์'
    readonly_fields = ['created_at']


class UserAdmin(BaseUserAdmin):
    inlines = (ProfileInline,)
    list_display = ('username', 'email', 'get_display_name', 'is_active', 'is_staff')

    @admin.display(description='ชื่อที่แสดง')
    def get_display_name(self, obj):
        if hasattr(obj, 'profile'):
            return obj.profile.display_name
        return ''

    def get_inline_instances(self, request, obj=None):
        # ตอนเพิ่ม user ใหม่ Signal สร้าง Profile ให้แล้ว
        if obj is None:
            return []
        return super().get_inline_instances(request, obj)


admin.site.unregister(User)
admin.site.register(User, UserAdmin)
