# users/forms.py

"""
ACCOUNT FORMS

Validation failures re-render the originating page with field messages;
nothing is written until a form is valid.
"""

from __future__ import annotations

from django import forms
from django.contrib.auth import get_user_model

User = get_user_model()


class LoginForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(widget=forms.PasswordInput, strip=False)


class RegisterForm(forms.Form):
    name = forms.CharField(
        max_length=255,
        error_messages={"required": "You must supply a name!"},
    )
    email = forms.EmailField(
        error_messages={
            "required": "That Email is not valid!",
            "invalid": "That Email is not valid!",
        },
    )
    password = forms.CharField(
        widget=forms.PasswordInput,
        strip=False,
        error_messages={"required": "Password Cannot be Blank!"},
    )
    password_confirm = forms.CharField(
        label="Confirm Password",
        widget=forms.PasswordInput,
        strip=False,
        error_messages={"required": "Confirmed Password cannot be blank!"},
    )

    def clean_email(self):
        email = User.objects.normalize_email(self.cleaned_data["email"])
        if User.objects.filter(email=email).exists():
            raise forms.ValidationError(
                "A user with the given email is already registered"
            )
        return email

    def clean(self):
        cleaned = super().clean()
        password = cleaned.get("password")
        confirm = cleaned.get("password_confirm")

        if password and confirm and password != confirm:
            self.add_error("password_confirm", "Oops! Your passwords do not match")

        return cleaned

    def save(self):
        return User.objects.create_user(
            email=self.cleaned_data["email"],
            password=self.cleaned_data["password"],
            name=self.cleaned_data["name"],
        )


class AccountForm(forms.ModelForm):
    class Meta:
        model = User
        fields = ["name", "email"]

    def clean_email(self):
        return User.objects.normalize_email(self.cleaned_data["email"])


class ForgotPasswordForm(forms.Form):
    email = forms.EmailField()


class ResetPasswordForm(forms.Form):
    password = forms.CharField(widget=forms.PasswordInput, strip=False)
    password_confirm = forms.CharField(
        label="Confirm Password",
        widget=forms.PasswordInput,
        strip=False,
    )

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("password") != cleaned.get("password_confirm"):
            raise forms.ValidationError("Passwords do not match!", code="mismatch")
        return cleaned
