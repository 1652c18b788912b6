"""
Admin edits must keep the same timestamp guarantees as the API.
"""
from django.contrib.auth import get_user_model
from django.test import TestCase, Client

from apps.tasks import services
from apps.tasks.models import Task


User = get_user_model()


class TaskAdminTest(TestCase):

    def setUp(self):
        self.client = Client()
        self.admin_user = User.objects.create_superuser(
            username='admin_test',
            email='admin@test.com',
            password='testpass123',
        )
        self.client.force_login(self.admin_user)

    def form_data(self, **overrides):
        data = {
            'title': 'Edited',
            'description': '',
            'status': 'completed',
            'priority': 'medium',
            'due_date': '',
        }
        data.update(overrides)
        return data

    def test_change_view_advances_updated_at(self):
        task = services.create_task({'title': 'Original'})
        before = task.updated_at

        response = self.client.post(f'/admin/tasks/task/{task.pk}/change/', self.form_data())
        self.assertEqual(response.status_code, 302)

        task.refresh_from_db()
        self.assertEqual(task.title, 'Edited')
        self.assertEqual(task.status, 'completed')
        self.assertGreater(task.updated_at, before)

    def test_add_view_sets_matching_timestamps(self):
        response = self.client.post('/admin/tasks/task/add/', self.form_data(title='From admin'))
        self.assertEqual(response.status_code, 302)

        task = Task.objects.get(title='From admin')
        self.assertEqual(task.created_at, task.updated_at)
