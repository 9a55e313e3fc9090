"""
Sign-in and sign-up screen definitions.
"""

from ..constants import AuthFormTypes
from ..models.auth import AuthFormDefinition, FormField, FormLink
from ..settings import settings

LOGO = "/icons/logo.svg"

_CREDENTIAL_FIELDS = [
    FormField(name="email", label="Email", placeholder="Enter your email", type="email"),
    FormField(
        name="password", label="Password", placeholder="Enter your password", type="password"
    ),
]

_PERSONAL_FIELDS = [
    FormField(name="firstName", label="First Name", placeholder="Enter your first name"),
    FormField(name="lastName", label="Last Name", placeholder="Enter your last name"),
    FormField(name="address1", label="Address", placeholder="Enter your specific address"),
    FormField(name="city", label="City", placeholder="Enter your city"),
    FormField(name="state", label="State", placeholder="Example: NY"),
    FormField(name="postalCode", label="Postal Code", placeholder="Example: 11101"),
    FormField(name="dateOfBirth", label="Date of Birth", placeholder="YYYY-MM-DD"),
    FormField(name="ssn", label="SSN", placeholder="Example: 1234"),
]


def get_auth_form(form_type: str) -> AuthFormDefinition:
    """Form definition for ``sign-in`` or ``sign-up``."""
    auth_prefix = f"{settings.api_v1_prefix}/auth"

    if form_type == AuthFormTypes.SIGN_IN:
        return AuthFormDefinition(
            type=AuthFormTypes.SIGN_IN,
            title="Sign In",
            subtitle="Please enter your details",
            fields=list(_CREDENTIAL_FIELDS),
            submit_label="Sign In",
            submit_url=f"{auth_prefix}/sign-in",
            footer=FormLink(
                prompt="Don't have an account?", label="Sign Up", href="/sign-up"
            ),
            logo=LOGO,
        )

    if form_type == AuthFormTypes.SIGN_UP:
        return AuthFormDefinition(
            type=AuthFormTypes.SIGN_UP,
            title="Sign Up",
            subtitle="Please enter your details",
            fields=_PERSONAL_FIELDS + _CREDENTIAL_FIELDS,
            submit_label="Sign Up",
            submit_url=f"{auth_prefix}/sign-up",
            footer=FormLink(
                prompt="Already have an account?", label="Sign In", href="/sign-in"
            ),
            logo=LOGO,
        )

    raise ValueError(f"Unknown auth form type: {form_type}")
