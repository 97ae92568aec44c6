# logs/models.py
import uuid
from django.db import models
from django.conf import settings

LOGIN_ACTION = "Logged In"


class ActivityQuerySet(models.QuerySet):
    def newest_first(self):
        return self.order_by('-created_at')


class ActivityManager(models.Manager.from_queryset(ActivityQuerySet)):
    """Activities are append-only and come in two shapes.

    A login carries no stock reference; a count always carries one together
    with the counted amount. Create them only through ``log_login`` and
    ``log_count`` so the ``kind`` tag always matches the payload.
    """

    def log_login(self, user):
        return self.create(
            user=user,
            kind=Activity.Kind.LOGIN,
            action=LOGIN_ACTION,
        )

    def log_count(self, user, stock, counted_amount):
        return self.create(
            user=user,
            kind=Activity.Kind.COUNT,
            action=f"Counted {counted_amount} of {stock.item}",
            stock=stock,
            counted_amount=counted_amount,
        )


class Activity(models.Model):
    class Kind(models.TextChoices):
        LOGIN = 'login', 'Login'
        COUNT = 'count', 'Count'

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='activities'
    )
    kind = models.CharField(max_length=10, choices=Kind.choices)
    action = models.CharField(max_length=255)
    # Non-owning: deleting a stock item leaves the reference dangling.
    stock = models.ForeignKey(
        'inventory.Stock',
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name='activities',
    )
    counted_amount = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    objects = ActivityManager()

    class Meta:
        verbose_name_plural = 'activities'
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(kind='login', stock__isnull=True)
                    | models.Q(kind='count', stock__isnull=False)
                ),
                name='activity_stock_matches_kind',
            ),
        ]

    def __str__(self):
        return f"{self.user_id} - {self.action} - {self.created_at.strftime('%Y-%m-%d %H:%M')}"
