"""Django signals that announce document changes to snapshot streams."""

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events.models import Document
from events.stores.django_store import document_changes


@receiver([post_save, post_delete], sender=Document)
def announce_document_change(sender, instance, **kwargs):
    """Notify open streams of the collection once the change is committed."""
    collection = instance.collection
    transaction.on_commit(lambda: document_changes.publish(collection))
