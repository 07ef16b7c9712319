"""Signup and login page UI components."""

from fasthtml.common import *


def _Field(label: str, name: str, type: str = "text", value: str = "", **kwargs):
    return Div(
        Label(label, fr=name),
        Input(type=type, name=name, id=name, value=value, **kwargs),
        cls="form-group",
    )


def _ErrorMessage(error_message: str):
    return Div(error_message, cls="error-message") if error_message else None


def AuthCard(heading: str, subtitle: str, form, footer):
    """Centered card holding an authentication form."""
    return Div(
        Div(
            H1(heading),
            P(subtitle, cls="login-subtitle"),
            cls="login-header",
        ),
        form,
        P(footer, cls="login-footer"),
        cls="login-card",
    )


def LoginPage(error_message: str = "", email: str = ""):
    """
    Render the login form.

    Args:
        error_message: Optional error message to display
        email: Email to pre-fill after a failed attempt
    """
    form = Form(
        _Field("Email", "email", type="email", value=email, required=True,
               autofocus=True, placeholder="you@example.com"),
        _Field("Password", "password", type="password", required=True,
               placeholder="Enter your password"),
        _ErrorMessage(error_message),
        Button("Log In", type="submit", cls="btn-primary btn-login"),
        action="/login",
        method="post",
        cls="login-form",
    )
    return AuthCard(
        "Log in",
        "Members only beyond this point",
        form,
        ("No account yet? ", A("Sign up", href="/signup")),
    )


def SignupPage(error_message: str = "", name: str = "", email: str = ""):
    """
    Render the signup form.

    Args:
        error_message: First validation message from the previous attempt
        name: Name to pre-fill
        email: Email to pre-fill
    """
    form = Form(
        _Field("Name", "name", value=name, required=True, autofocus=True,
               placeholder="Your name"),
        _Field("Email", "email", type="email", value=email, required=True,
               placeholder="you@example.com"),
        _Field("Password", "password", type="password", required=True,
               minlength="5", placeholder="At least 5 characters"),
        _ErrorMessage(error_message),
        Button("Sign Up", type="submit", cls="btn-primary btn-login"),
        action="/signup",
        method="post",
        cls="login-form",
    )
    return AuthCard(
        "Sign up",
        "Create an account to join the members area",
        form,
        ("Already registered? ", A("Log in", href="/login")),
    )
