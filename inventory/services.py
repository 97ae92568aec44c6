# inventory/services.py
import uuid
from django.contrib.auth import get_user_model
from logs.models import Activity
from utils.exceptions import NotFoundError, ValidationError
from .models import Stock
import logging

logger = logging.getLogger(__name__)
User = get_user_model()


def _as_count(value, label):
    # bool is an int subclass but never a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer.")
    return value


def upsert_stocks(counts):
    """Set the expected count of every named item, creating missing ones.

    Entries are applied one by one; a failure part way leaves the earlier
    entries applied. ``detected_count`` is never touched here.
    """
    if not isinstance(counts, dict):
        raise ValidationError("Expected an object mapping item names to expected counts.")

    for item, expected in counts.items():
        Stock.objects.update_or_create(
            item=item,
            defaults={'expected_count': _as_count(expected, f"Expected count for '{item}'")},
        )
    logger.info(f"Upserted {len(counts)} stock item(s)")


def delete_stock(item):
    deleted, _ = Stock.objects.filter(item=item).delete()
    if deleted:
        logger.info(f"Deleted stock item '{item}'")


def list_stocks():
    return Stock.objects.all()


def count_objects(user_id, stock_item, counted_amount):
    """Log a count against a stock item and add it to the detected count.

    The activity is written before the stock update and the two writes are
    not wrapped in a transaction. The increment is a plain read-modify-write.
    """
    if not user_id or not stock_item or counted_amount is None:
        raise ValidationError("User ID, stock item, and count are required")
    counted_amount = _as_count(counted_amount, "Count")
    # detected_count never goes down
    if counted_amount < 0:
        raise ValidationError("Count cannot be negative")

    try:
        user_id = uuid.UUID(str(user_id))
    except ValueError:
        raise ValidationError(f"Invalid user ID '{user_id}'")

    stock = Stock.objects.filter(item=stock_item).first()
    if not stock:
        raise NotFoundError(f"Stock item '{stock_item}' not found")

    user = User.objects.filter(pk=user_id).first()
    if not user:
        raise NotFoundError(f"User '{user_id}' not found")

    Activity.objects.log_count(user, stock, counted_amount)

    stock.detected_count += counted_amount
    stock.save(update_fields=['detected_count'])
    logger.info(f"User {user.id} counted {counted_amount} of '{stock.item}'")
    return stock
