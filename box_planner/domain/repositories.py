"""Firestore-backed note and settings stores."""

from __future__ import annotations

from typing import Optional
from urllib.parse import quote

from google.api_core import exceptions as gcp_exceptions
from google.cloud import firestore

from box_planner.exceptions import StoreError
from box_planner.io.persistence import NoteStore, SettingsStore

from .models import AppSettings


class FirestoreNoteStore(NoteStore):
    """Notes stored as documents notes/<employee_id> with a single 'notes' field."""

    COLLECTION = "notes"

    def __init__(self, client: firestore.Client, collection: Optional[str] = None):
        self.client = client
        self.collection = collection or FirestoreNoteStore.COLLECTION

    def _doc(self, employee_id: str):
        # Percent-quote so "/" in an id cannot split the document path
        try:
            return self.client.collection(self.collection).document(quote(employee_id, safe=""))
        except ValueError as e:
            raise StoreError(f"Invalid note id {employee_id!r}: {e}", key=employee_id) from e

    def put(self, employee_id: str, text: str) -> None:
        try:
            self._doc(employee_id).set({"notes": text})
        except gcp_exceptions.GoogleAPIError as e:
            raise StoreError(f"Failed to save note for {employee_id}: {e}", key=employee_id) from e

    def get(self, employee_id: str) -> Optional[str]:
        try:
            doc = self._doc(employee_id).get()
        except gcp_exceptions.GoogleAPIError as e:
            raise StoreError(f"Failed to load note for {employee_id}: {e}", key=employee_id) from e
        if not doc.exists:
            return None
        notes = (doc.to_dict() or {}).get("notes")
        if not isinstance(notes, str):
            raise StoreError(f"Note document for {employee_id} has no 'notes' string", key=employee_id)
        return notes


class FirestoreSettingsStore(SettingsStore):
    """Settings stored as a single document settings/<document>."""

    COLLECTION = "settings"
    DOCUMENT = "app"

    def __init__(
        self,
        client: firestore.Client,
        collection: Optional[str] = None,
        document: Optional[str] = None,
    ):
        self.client = client
        self.collection = collection or FirestoreSettingsStore.COLLECTION
        self.document = document or FirestoreSettingsStore.DOCUMENT

    def _doc(self):
        return self.client.collection(self.collection).document(self.document)

    def put(self, settings: AppSettings) -> None:
        try:
            self._doc().set(settings.to_dict())
        except gcp_exceptions.GoogleAPIError as e:
            raise StoreError(f"Failed to save settings: {e}", key=self.document) from e

    def get(self) -> AppSettings:
        try:
            doc = self._doc().get()
        except gcp_exceptions.GoogleAPIError as e:
            raise StoreError(f"Failed to load settings: {e}", key=self.document) from e
        if not doc.exists:
            return AppSettings()
        try:
            return AppSettings.from_dict(doc.to_dict() or {})
        except (TypeError, ValueError, AttributeError) as e:
            raise StoreError(f"Invalid settings document: {e}", key=self.document) from e
