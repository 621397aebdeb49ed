import contextlib

from cuser.middleware import CuserMiddleware
from django.core.cache import cache
from django.db import transaction
from django.test import TestCase
from rest_framework import status as drf_status
from rest_framework.test import APITestCase

from hireboard.users.models import User


class BaseTestCase(TestCase):

    @classmethod
    def setUpTestData(cls):
        cache.clear()
        super().setUpTestData()

    def tearDown(self) -> None:
        CuserMiddleware.del_user()
        cache.clear()
        super().tearDown()

    @contextlib.contextmanager
    def atomicSubTest(self, **kwargs):
        """
        :keyword kwargs: kwargs to pass in subTest
        :return: A ContextManager which will rollback to initial save point upon exit

        Run all your cases inside a test case. Test execution will not be interrupted when single
        test fails, it will run all test cases and show result at last

        Usage
        ---
        .. code-block:: python

            for case in cases:
                with self.atomicSubTest():
                    run_test(case)
        """
        savepoint = transaction.savepoint()

        try:
            with self.subTest(**kwargs):
                yield savepoint
        finally:
            transaction.savepoint_rollback(savepoint)


class HireBoardAPITestCase(APITestCase, BaseTestCase):
    """
    Base Test Case for HireBoard

    It populates user model.

    set `users` to do so.

    users = [
            ('username1', 'password', True),
            ('username2', 'password', False)
        ]

    where the last item flags admin users.

    *Note*: Users will have `name` as title cased username and
    `<username>@example.com` as email
    *Note*: The first admin user is available as `self.admin`
    """
    users = None
    admin = None
    status = drf_status

    def create_users(self):
        self.created_users = list()
        self.admin = None
        for username, password, is_admin in self.users:
            user = User.objects.create_user(
                username,
                password,
                name=username.title(),
                email=f'{username}@example.com',
                is_admin=is_admin,
            )
            self.created_users.append(user)
            if is_admin and not self.admin:
                self.admin = user

    def setUp(self):
        assert self.users is not None, f"set `users` on {self.__class__.__name__}"
        self.create_users()
