from django.contrib.auth.models import User
from django.test import TestCase

from accounts.models import Profile


class ProfileSignalTests(TestCase):

    def test_profile_created_with_user(self):
        user = User.objects.create_user(username='somchai', password='x')
        self.assertTrue(Profile.objects.filter(user=user).exists())

    def test_missing_profile_recreated_on_save(self):
        user = User.objects.create_user(username='somchai', password='x')
        Profile.objects.filter(user=user).delete()
        user = User.objects.get(pk=user.pk)

        user.first_name = 'Somchai'
        user.save()
        self.assertTrue(Profile.objects.filter(user=user).exists())

    def test_profile_deleted_with_user(self):
        user = User.objects.create_user(username='somchai', password='x')
        user.delete()
        self.assertFalse(Profile.objects.exists())

    def test_name_fallbacks(self):
        user = User.objects.create_user(username='somchai', password='x')
        self.assertEqual(user.profile.name, 'somchai')

        user.first_name = 'Somchai'
        user.last_name = 'Jaidee'
        user.save()
        self.assertEqual(user.profile.name, 'Somchai Jaidee')

        user.profile.display_name = 'Chai'
        self.assertEqual(user.profile.name, 'Chai')
        self.assertEqual(str(user.profile), 'Chai')
