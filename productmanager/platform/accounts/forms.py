from django import forms


class LoginForm(forms.Form):
    username = forms.CharField(max_length=150, error_messages={"required": "Username is required"})
    password = forms.CharField(
        widget=forms.PasswordInput,
        strip=False,
        error_messages={"required": "Password is required"},
    )
