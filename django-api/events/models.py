"""Django ORM models (persistence layer).

The database plays the remote document store. Domain logic lives in
events/domain and events/services.
"""

from django.db import models


class Document(models.Model):
    """One JSON document of a named collection."""

    collection = models.CharField(max_length=100)
    doc_id = models.CharField(max_length=255)
    data = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["collection", "doc_id"], name="unique_doc_per_collection"
            ),
        ]
        indexes = [
            models.Index(fields=["collection", "id"], name="document_collection_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.collection}/{self.doc_id}"

    def as_record(self) -> dict:
        return {"id": self.doc_id, **self.data}
