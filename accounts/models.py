from django.db import models
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver


class Profile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    # ==============================
    # 👤 ข้อมูลส่วนตัว
    # ==============================
    display_name = models.CharField(max_length=50, blank=True, default="", verbose_name="ชื่อที่แสดง")
    phone = models.CharField(max_length=15, blank=True, verbose_name="เบอร์โทรศัพท์")
    bio = models.TextField(blank=True, verbose_name="แนะนำตัว")

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="สร้างเมื่อ")

    class Meta:
        verbose_name = "โปรไฟล์"
        verbose_name_plural = "โปรไฟล์"

    def __str__(self):
        return self.display_name or self.user.username

    @property
    def name(self):
        """ชื่อที่ใช้แสดงบนหน้าเว็บ (ถ้าไม่ได้ตั้งไว้ใช้ username)"""
        return self.display_name or self.user.get_full_name() or self.user.username


# ==============================
# ⚡ Signals
# ==============================
@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        Profile.objects.create(user=instance)


@receiver(post_save, sender=User)
def save_user_profile(sender, instance, **kwargs):
    try:
        instance.profile.save()
    except Profile.DoesNotExist:
        Profile.objects.create(user=instance)
