"""
Serializers for the accounts app.

``AdminLoginSerializer`` signs an administrator in with e-mail and
password and returns SimpleJWT tokens together with a short admin
profile.
"""
from django.contrib.auth import get_user_model
from django.contrib.auth.models import update_last_login
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed, PermissionDenied
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer

User = get_user_model()

INVALID_CREDENTIALS = "Invalid admin credentials"


def admin_role(user) -> str:
    return "super-admin" if user.is_superuser else "admin"


class AdminProfileSerializer(serializers.ModelSerializer):
    name = serializers.SerializerMethodField()
    role = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ("id", "email", "name", "role", "last_login")

    def get_name(self, obj):
        return obj.get_full_name() or obj.get_username()

    def get_role(self, obj):
        return admin_role(obj)


class AdminLoginSerializer(TokenObtainPairSerializer):
    """
    POST body: {"email": "...", "password": "..."}
    """
    email = serializers.EmailField(write_only=True, error_messages={"required": "Email and password are required"})
    password = serializers.CharField(
        write_only=True, trim_whitespace=False, error_messages={"required": "Email and password are required"}
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields.pop(self.username_field, None)

    @classmethod
    def get_token(cls, user):
        token = super().get_token(user)
        token["email"] = user.email
        token["role"] = admin_role(user)
        return token

    def validate(self, attrs):
        email = attrs["email"].strip().lower()
        password = attrs["password"]

        user = User.objects.filter(email__iexact=email, is_active=True).order_by("pk").first()
        if user is None or not user.check_password(password):
            raise AuthenticationFailed(INVALID_CREDENTIALS)
        if not (user.is_staff or user.is_superuser):
            raise PermissionDenied("Access denied. Admin privileges required.")

        update_last_login(None, user)
        refresh = self.get_token(user)
        return {
            "success": True,
            "message": "Admin login successful",
            "token": str(refresh.access_token),
            "refresh": str(refresh),
            "admin": AdminProfileSerializer(user).data,
        }
