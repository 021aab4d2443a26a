"""Tests for Firestore client selection."""

import json
from unittest.mock import MagicMock

import pytest

from box_planner.domain import db


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in db.PROJECT_ENV_VARS + ("FIREBASE_SERVICE_ACCOUNT_JSON",):
        monkeypatch.delenv(name, raising=False)
    db.FirestoreClient.reset_client()
    yield
    db.FirestoreClient.reset_client()


def test_project_from_env(monkeypatch):
    client_cls = MagicMock()
    monkeypatch.setattr(db.firestore, "Client", client_cls)
    monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "gcp-project")
    monkeypatch.setenv("BOX_PLANNER_FIRESTORE_PROJECT", "planner-project")

    client = db.get_firestore()

    client_cls.assert_called_once_with(project="planner-project")
    assert db.get_firestore() is client


def test_service_account_json(monkeypatch):
    client_cls = MagicMock()
    creds = MagicMock()
    from_info = MagicMock(return_value=creds)
    monkeypatch.setattr(db.firestore, "Client", client_cls)
    monkeypatch.setattr(db.service_account.Credentials, "from_service_account_info", from_info)
    monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_JSON", json.dumps({"project_id": "svc-project"}))

    db.get_firestore()

    from_info.assert_called_once_with({"project_id": "svc-project"})
    client_cls.assert_called_once_with(project="svc-project", credentials=creds)
