# logs/services.py
import uuid
from .models import Activity


def list_activities_for_user(user_id):
    """Activities of one user, newest first, with user and stock joined in.

    An id that is not a valid UUID cannot match anyone, so it yields no rows.
    """
    try:
        user_id = uuid.UUID(str(user_id))
    except ValueError:
        return Activity.objects.none()

    return (
        Activity.objects.filter(user_id=user_id)
        .select_related('user', 'stock')
        .newest_first()
    )


def list_all_activities():
    return Activity.objects.select_related('user').newest_first()
