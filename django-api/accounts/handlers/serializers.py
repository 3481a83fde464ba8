"""Serializers for session requests and responses."""

from rest_framework import serializers

from accounts.domain import Role

ROLE_CHOICES = [role.value for role in Role]


class CredentialsSerializer(serializers.Serializer):
    """Email is checked by the auth provider so its wording reaches the user."""

    email = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class SignUpSerializer(CredentialsSerializer):
    role = serializers.ChoiceField(choices=ROLE_CHOICES)


class FederatedSignInSerializer(serializers.Serializer):
    role = serializers.ChoiceField(
        choices=ROLE_CHOICES, required=False, allow_null=True
    )


class AssignRoleSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=ROLE_CHOICES)


class IdentitySerializer(serializers.Serializer):
    uid = serializers.CharField()
    email = serializers.CharField(allow_null=True)
    display_name = serializers.CharField(allow_null=True)


class SessionSerializer(serializers.Serializer):
    """Serializer for the SessionSnapshot domain model."""

    identity = IdentitySerializer(allow_null=True)
    role = serializers.SerializerMethodField()
    loading = serializers.BooleanField()
    state = serializers.SerializerMethodField()

    def get_role(self, snapshot) -> str | None:
        return snapshot.role.value if snapshot.role else None

    def get_state(self, snapshot) -> str:
        return snapshot.state.value
