# users/tests/test_password_reset.py

from datetime import timedelta

from django.core import mail
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from stores.tests.factories import make_user
from users.services.exceptions import InvalidResetTokenError, UnknownEmailError
from users.services.password_reset import (
    find_user_for_reset,
    issue_reset_token,
    reset_password,
)


class PasswordResetServiceTests(TestCase):
    """
    GUARANTEES:
    - A token is valid for one hour and mailed as a link
    - Unknown emails are reported, nothing is mailed
    - A used or expired token is rejected
    """

    def setUp(self):
        self.user = make_user("wes@example.com", password="old-pass-123!")

    def test_issue_sets_token_and_mails_link(self):
        now = timezone.now()

        user = issue_reset_token(email="WES@example.com ", host="testserver", now=now)

        self.assertEqual(len(user.reset_password_token), 40)
        self.assertEqual(user.reset_password_expires, now + timedelta(hours=1))
        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.subject, "Password Reset")
        self.assertEqual(message.to, ["wes@example.com"])
        reset_url = f"http://testserver/account/reset/{user.reset_password_token}"
        self.assertIn(reset_url, message.body)
        self.assertNotIn(f"{reset_url}/", message.body)
        html, _ = message.alternatives[0]
        self.assertIn(f'href="{reset_url}"', html)

    def test_unknown_email(self):
        with self.assertRaises(UnknownEmailError):
            issue_reset_token(email="nobody@example.com", host="testserver")

        self.assertEqual(mail.outbox, [])

    def test_expired_token_rejected(self):
        now = timezone.now()
        user = issue_reset_token(email="wes@example.com", host="testserver", now=now)

        with self.assertRaises(InvalidResetTokenError):
            find_user_for_reset(user.reset_password_token, now=now + timedelta(hours=2))

    def test_reset_changes_password_and_clears_token(self):
        user = issue_reset_token(email="wes@example.com", host="testserver")
        token = user.reset_password_token

        reset_password(token=token, password="new-pass-456!")

        user.refresh_from_db()
        self.assertTrue(user.check_password("new-pass-456!"))
        self.assertIsNone(user.reset_password_token)
        self.assertIsNone(user.reset_password_expires)
        with self.assertRaises(InvalidResetTokenError):
            reset_password(token=token, password="again-789!")


class PasswordResetViewTests(TestCase):
    def setUp(self):
        self.user = make_user("wes@example.com", password="old-pass-123!")

    def _flashes(self, response):
        return [str(m) for m in response.context["messages"]]

    def test_forgot_flow(self):
        response = self.client.post(
            reverse("users:forgot"), {"email": "wes@example.com"}, follow=True
        )

        self.assertRedirects(response, reverse("users:login"))
        self.assertIn("You have been emailed a password reset link.", self._flashes(response))
        self.assertEqual(len(mail.outbox), 1)

    def test_forgot_unknown_email(self):
        response = self.client.post(
            reverse("users:forgot"), {"email": "ghost@example.com"}, follow=True
        )

        self.assertIn("No account with that email exists.", self._flashes(response))

    def test_bad_token_redirects_to_login(self):
        response = self.client.get(reverse("users:reset", args=["nope"]), follow=True)

        self.assertRedirects(response, reverse("users:login"))
        self.assertIn("Password reset is invalid or has expired", self._flashes(response))

    def test_mismatched_passwords(self):
        user = issue_reset_token(email="wes@example.com", host="testserver")
        url = reverse("users:reset", args=[user.reset_password_token])

        response = self.client.post(
            url, {"password": "a-pass-1!", "password_confirm": "b-pass-2!"}, follow=True
        )

        self.assertRedirects(response, url)
        self.assertIn("Passwords do not match!", self._flashes(response))

    def test_successful_reset_logs_in(self):
        user = issue_reset_token(email="wes@example.com", host="testserver")
        url = reverse("users:reset", args=[user.reset_password_token])

        response = self.client.post(
            url, {"password": "new-pass-456!", "password_confirm": "new-pass-456!"}, follow=True
        )

        self.assertRedirects(response, reverse("stores:home"))
        self.assertTrue(response.context["user"].is_authenticated)
        self.assertIn(
            "Nice! Your password has been reset! You are now logged in!",
            self._flashes(response),
        )
        self.user.refresh_from_db()
        self.assertTrue(self.user.check_password("new-pass-456!"))

    def test_reset_link_without_trailing_slash(self):
        user = issue_reset_token(email="wes@example.com", host="testserver")

        response = self.client.get(f"/account/reset/{user.reset_password_token}")

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "users/reset.html")

    def test_reset_link_with_trailing_slash(self):
        user = issue_reset_token(email="wes@example.com", host="testserver")

        response = self.client.get(f"/account/reset/{user.reset_password_token}/")

        self.assertEqual(response.status_code, 200)
