# users/services.py
from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import AccessToken
from logs.models import Activity
from utils.exceptions import AuthError, ConflictError, ValidationError
import logging

logger = logging.getLogger(__name__)
User = get_user_model()

INVALID_CREDENTIALS = "Incorrect email or password."


def create_token(user):
    """Signed, time-bound token carrying the user id in the ``_id`` claim."""
    return str(AccessToken.for_user(user))


def decode_token(token):
    try:
        return AccessToken(token)['_id']
    except (TokenError, KeyError):
        raise AuthError("Invalid or expired token.")


def register_user(email, password, full_name):
    if not email or not password or not full_name:
        raise ValidationError("Email, password, and full name are required.")

    email = User.objects.normalize_email(email)
    if User.objects.filter(email=email).exists():
        raise ConflictError("Email is already in use.")

    try:
        with transaction.atomic():
            user = User.objects.create_user(email=email, password=password, full_name=full_name)
    except IntegrityError:
        # lost a race with a concurrent registration of the same email
        raise ConflictError("Email is already in use.")
    logger.info(f"Registered user {user.id}")
    return create_token(user)


def login_user(email, password):
    if not email or not password:
        raise AuthError(INVALID_CREDENTIALS)

    user = User.objects.filter(email=User.objects.normalize_email(email)).first()
    if not user or not user.check_password(password):
        logger.warning("Rejected login attempt")
        raise AuthError(INVALID_CREDENTIALS)

    token = create_token(user)
    Activity.objects.log_login(user)
    logger.info(f"User {user.id} logged in")
    return token, user
