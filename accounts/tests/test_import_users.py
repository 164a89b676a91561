import tempfile
from io import StringIO
from pathlib import Path

import pandas as pd
from django.contrib.auth.models import User
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

PASSWORD = 'Sup3r-Secret-Pass!'


class ImportUsersCommandTests(TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)

    def _write(self, name, content):
        path = Path(self.tmpdir.name) / name
        path.write_text(content, encoding='utf-8')
        return str(path)

    def _run(self, *args):
        out = StringIO()
        call_command('import_users', *args, stdout=out)
        return out.getvalue()

    def test_creates_users_from_csv(self):
        path = self._write('users.csv', (
            'username,password,email,display_name\n'
            f'malee,{PASSWORD},malee@example.com,Malee\n'
            f'somchai,{PASSWORD},,\n'
        ))
        output = self._run(path)

        malee = User.objects.get(username='malee')
        self.assertTrue(malee.check_password(PASSWORD))
        self.assertEqual(malee.email, 'malee@example.com')
        self.assertEqual(malee.profile.display_name, 'Malee')
        self.assertEqual(User.objects.get(username='somchai').profile.display_name, '')
        self.assertIn('2', output)

    def test_skips_existing_and_blank_rows(self):
        User.objects.create_user(username='malee', password=PASSWORD)
        path = self._write('users.csv', (
            'username,password\n'
            f'malee,{PASSWORD}\n'
            ',\n'
            f'somchai,{PASSWORD}\n'
        ))
        self._run(path)

        self.assertEqual(User.objects.filter(username='malee').count(), 1)
        self.assertTrue(User.objects.filter(username='somchai').exists())
        self.assertEqual(User.objects.count(), 2)

    def test_rows_with_weak_or_missing_password_are_errors(self):
        path = self._write('users.csv', (
            'username,password\n'
            'weak,123\n'
            'nopass,\n'
            f'ok,{PASSWORD}\n'
        ))
        self._run(path)

        self.assertFalse(User.objects.filter(username__in=['weak', 'nopass']).exists())
        self.assertTrue(User.objects.filter(username='ok').exists())

    def test_dry_run_writes_nothing(self):
        path = self._write('users.csv', f'username,password\nmalee,{PASSWORD}\n')
        self._run(path, '--dry-run')
        self.assertFalse(User.objects.filter(username='malee').exists())

    def test_missing_columns(self):
        path = self._write('users.csv', 'username,email\nmalee,malee@example.com\n')
        with self.assertRaises(CommandError):
            self._run(path)

    def test_unsupported_extension(self):
        path = self._write('users.txt', 'username,password\n')
        with self.assertRaises(CommandError):
            self._run(path)

    def test_missing_file(self):
        with self.assertRaises(CommandError):
            self._run(str(Path(self.tmpdir.name) / 'nope.csv'))

    def test_rows_failing_user_validators_are_errors(self):
        long_name = 'x' * 200
        path = self._write('users.csv', (
            'username,password,email,display_name\n'
            f'bad name!,{PASSWORD},,\n'
            f'{long_name},{PASSWORD},,\n'
            f'longdisplay,{PASSWORD},,{"d" * 80}\n'
            f'bademail,{PASSWORD},not-an-email,\n'
            f'ok,{PASSWORD},,\n'
        ))
        output = self._run(path)

        self.assertEqual(list(User.objects.values_list('username', flat=True)), ['ok'])
        self.assertIn('ผิดพลาด 4 แถว', output)

    def test_password_whitespace_is_kept(self):
        password = f'  {PASSWORD}  '
        path = self._write('users.csv', f'username,password\nmalee,"{password}"\n')
        self._run(path)

        user = User.objects.get(username='malee')
        self.assertTrue(user.check_password(password))
        self.assertFalse(user.check_password(PASSWORD))

    def test_empty_file(self):
        path = self._write('users.csv', '')
        with self.assertRaises(CommandError):
            self._run(path)

    def test_corrupt_xlsx(self):
        path = self._write('users.xlsx', 'this is not a workbook')
        with self.assertRaises(CommandError):
            self._run(path)

    def test_xls_not_accepted(self):
        path = self._write('users.xls', 'username,password\n')
        with self.assertRaises(CommandError):
            self._run(path)

    def test_creates_users_from_xlsx(self):
        path = str(Path(self.tmpdir.name) / 'users.xlsx')
        pd.DataFrame([
            {'username': 'malee', 'password': PASSWORD, 'display_name': 'Malee'},
        ]).to_excel(path, index=False)
        self._run(path)

        user = User.objects.get(username='malee')
        self.assertTrue(user.check_password(PASSWORD))
        self.assertEqual(user.profile.display_name, 'Malee')
