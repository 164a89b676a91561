"""
Django Management Command สำหรับนำเข้าผู้ใช้จากไฟล์ Excel/CSV

วิธีใช้งาน:
    python manage.py import_users users.csv
    python manage.py import_users users.xlsx --dry-run

คอลัมน์ที่ต้องมี:
- username
- password

คอลัมน์ไม่บังคับ:
- email
- display_name
"""

import zipfile
from pathlib import Path

import pandas as pd
from django.contrib.auth.models import User
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from accounts.models import Profile

REQUIRED_COLUMNS = ['username', 'password']


def _cell(row, column, strip=True):
    """ดึงค่าจากแถวเป็น str (ช่องว่าง/ไม่มีคอลัมน์ = '')"""
    value = row.get(column)
    if value is None or pd.isna(value):
        return ''
    value = str(value)
    return value.strip() if strip else value


def _read_file(path):
    # dtype=str กัน password ที่เป็นตัวเลขล้วนถูกแปลงเป็น int
    suffix = path.suffix.lower()
    if suffix not in ('.csv', '.xlsx'):
        raise CommandError('รองรับเฉพาะไฟล์ .xlsx, .csv')

    try:
        if suffix == '.csv':
            return pd.read_csv(path, dtype=str, encoding='utf-8-sig')
        return pd.read_excel(path, dtype=str)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, ValueError, zipfile.BadZipFile) as exc:
        raise CommandError(f'อ่านไฟล์ไม่ได้: {exc}') from exc


class Command(BaseCommand):
    help = 'นำเข้าผู้ใช้จากไฟล์ .csv หรือ .xlsx'

    def add_arguments(self, parser):
        parser.add_argument('file', help='ไฟล์ที่จะนำเข้า')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='ตรวจสอบข้อมูลอย่างเดียว ไม่บันทึกลงฐานข้อมูล',
        )

    def handle(self, *args, **options):
        path = Path(options['file'])
        dry_run = options['dry_run']

        if not path.exists():
            raise CommandError(f'ไม่พบไฟล์: {path}')

        # ===== 1. อ่านไฟล์ =====
        df = _read_file(path)
        df.columns = [str(col).strip().lower() for col in df.columns]

        # ===== 2. Validate คอลัมน์ที่จำเป็น =====
        missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise CommandError(f'ไฟล์ขาดคอลัมน์: {", ".join(missing)}')

        display_name_max = Profile._meta.get_field('display_name').max_length
        created_count = 0
        skipped_count = 0
        error_count = 0
        seen = set()

        # ===== 3. สร้างผู้ใช้ =====
        with transaction.atomic():
            for idx, row in df.iterrows():
                line = idx + 2  # แถวที่ 1 คือหัวตาราง
                username = _cell(row, 'username')
                # password ใช้ตามที่กรอก ไม่ตัดช่องว่าง
                password = _cell(row, 'password', strip=False)

                # Skip แถวว่าง
                if not username and not password:
                    continue

                if not username or not password:
                    error_count += 1
                    self.stdout.write(self.style.ERROR(f'❌ แถว {line}: ต้องมีทั้ง username และ password'))
                    continue

                if username.lower() in seen or User.objects.filter(username__iexact=username).exists():
                    skipped_count += 1
                    self.stdout.write(self.style.WARNING(f'⚠️  แถว {line}: มีผู้ใช้ {username} อยู่แล้ว (ข้าม)'))
                    continue

                email = _cell(row, 'email')
                display_name = _cell(row, 'display_name')
                candidate = User(username=username, email=email)
                try:
                    # validator ชุดเดียวกับฟอร์มสมัครสมาชิก
                    candidate.full_clean(exclude=['password'])
                    if len(display_name) > display_name_max:
                        raise ValidationError(f'display_name ยาวเกิน {display_name_max} ตัวอักษร')
                    validate_password(password, user=candidate)
                except ValidationError as exc:
                    error_count += 1
                    self.stdout.write(self.style.ERROR(f'❌ แถว {line}: {" ".join(exc.messages)}'))
                    continue

                seen.add(username.lower())

                if not dry_run:
                    user = User.objects.create_user(username=username, email=email, password=password)
                    if display_name:
                        user.profile.display_name = display_name
                        user.profile.save()

                created_count += 1
                self.stdout.write(self.style.SUCCESS(f'✅ สร้าง: {username}'))

            if dry_run:
                transaction.set_rollback(True)

        # สรุปผล
        self.stdout.write('')
        if dry_run:
            self.stdout.write(self.style.WARNING('🔍 Dry run: ไม่มีการบันทึกข้อมูล'))
        self.stdout.write(self.style.SUCCESS(
            f'📊 สรุป: สร้างใหม่ {created_count} คน, ข้าม {skipped_count} คน, ผิดพลาด {error_count} แถว'
        ))
