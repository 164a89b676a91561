import re

from django import forms
from django.contrib.auth.forms import UserCreationForm
from django.contrib.auth.models import User
from .models import Profile

PHONE_PATTERN = re.compile(r'^[0-9+\- ]+$')


class RegisterForm(UserCreationForm):
    # ช่องเพิ่มเติมจาก UserCreationForm (username, password1, password2)
    email = forms.EmailField(required=False, label="อีเมล")
    display_name = forms.CharField(max_length=50, label="ชื่อที่แสดง")

    class Meta(UserCreationForm.Meta):
        model = User
        fields = ('username', 'email')

    def clean_email(self):
        email = self.cleaned_data.get('email', '').strip()
        if email and User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("อีเมลนี้ถูกใช้แล้ว")
        return email

    def save(self, commit=True):
        user = super().save(commit=False)
        user.email = self.cleaned_data.get('email', '')

        if commit:
            # Signal จะสร้าง Profile ให้ตอน save user
            user.save()
            user.profile.display_name = self.cleaned_data['display_name'].strip()
            user.profile.save()
        return user


class ProfileForm(forms.ModelForm):

    class Meta:
        model = Profile
        fields = ['display_name', 'phone', 'bio']
        widgets = {
            'bio': forms.Textarea(attrs={'rows': 4}),
        }

    def clean_phone(self):
        phone = self.cleaned_data.get('phone', '').strip()
        if phone and not PHONE_PATTERN.match(phone):
            raise forms.ValidationError("เบอร์โทรศัพท์ใช้ได้เฉพาะตัวเลข, เว้นวรรค, + และ -")
        return phone
