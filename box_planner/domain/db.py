"""Firestore client for the note and settings stores."""

from __future__ import annotations

import json
import os
from typing import Optional

from google.cloud import firestore
from google.oauth2 import service_account

PROJECT_ENV_VARS = (
    "BOX_PLANNER_FIRESTORE_PROJECT",
    "GOOGLE_CLOUD_PROJECT",
    "GCLOUD_PROJECT",
    "FIREBASE_PROJECT_ID",
)


def _project_from_env() -> Optional[str]:
    for name in PROJECT_ENV_VARS:
        value = os.environ.get(name)
        if value:
            return value
    return None


class FirestoreClient:
    """Process-wide Firestore client, created on first use."""

    _instance: Optional[firestore.Client] = None

    @classmethod
    def get_client(cls) -> firestore.Client:
        """
        Get or create the Firestore client.

        A project named in the environment uses Application Default
        Credentials. Without one, FIREBASE_SERVICE_ACCOUNT_JSON supplies both
        the project and the credentials.
        """
        if cls._instance is None:
            project = _project_from_env()
            svc_json = os.environ.get("FIREBASE_SERVICE_ACCOUNT_JSON")

            if svc_json and not project:
                info = json.loads(svc_json)
                creds = service_account.Credentials.from_service_account_info(info)
                cls._instance = firestore.Client(project=info["project_id"], credentials=creds)
            else:
                cls._instance = firestore.Client(project=project)
            print(f"[INFO] Firestore client initialized for project: {cls._instance.project}")

        return cls._instance

    @classmethod
    def reset_client(cls) -> None:
        """Drop the cached client (used by tests)."""
        cls._instance = None


def get_firestore() -> firestore.Client:
    return FirestoreClient.get_client()
