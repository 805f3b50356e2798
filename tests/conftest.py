# tests/conftest.py
"""
Fixtures communes : faux client Supabase en mémoire et client HTTP de test.
Exécuter: pytest -v
"""
import os

os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import copy
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from main import app
from proptrack.db import get_supabase

ALICE_TOKEN = "token-alice"
BOB_TOKEN = "token-bob"
ALICE_ID = "11111111-1111-4111-8111-111111111111"
BOB_ID = "22222222-2222-4222-8222-222222222222"

# Tables enfants supprimées avec leur propriété
CASCADES = {
    "properties": ["property_locations", "tenants", "property_images", "property_documents"],
}
TIMESTAMPED_TABLES = {"properties", "tenants"}


class FakeResult:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Reproduit la chaîne table().select().eq()...execute() de supabase-py"""

    def __init__(self, db, table):
        self.db = db
        self.table = table
        self.operation = "select"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.max_rows = None

    def select(self, *columns):
        self.operation = "select"
        return self

    def insert(self, data):
        self.operation = "insert"
        self.payload = data
        return self

    def update(self, data):
        self.operation = "update"
        self.payload = data
        return self

    def delete(self):
        self.operation = "delete"
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        values = list(values)
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.max_rows = count
        return self

    def execute(self):
        self.db.calls.append((self.table, self.operation))
        return FakeResult(self.db.run(self))


class FakeRpc:
    """Reproduit db.rpc(name, params).execute()"""

    def __init__(self, db, name, params):
        self.db = db
        self.name = name
        self.params = params

    def execute(self):
        self.db.calls.append((self.name, "rpc"))
        return FakeResult(self.db.call_function(self.name, self.params))


class FakeAuth:
    def __init__(self, users):
        self.users = users

    def get_user(self, token):
        if token not in self.users:
            raise Exception("invalid JWT")
        user_id = self.users[token]
        return SimpleNamespace(user=SimpleNamespace(id=user_id, email=f"{token}@gmail.com"))


class FakeSupabase:
    """Base en mémoire ; fail_on_insert simule une contrainte violée sur une table"""

    def __init__(self, users=None):
        self.tables = {}
        self.fail_on_insert = set()
        self.calls = []
        self.auth = FakeAuth(users or {})

    def table(self, name):
        return FakeQuery(self, name)

    def rows(self, name):
        return self.tables.setdefault(name, [])

    def rpc(self, name, params):
        return FakeRpc(self, name, params)

    def call_function(self, name, params):
        """create_property_aggregate : tout est annulé si une insertion échoue"""
        if name != "create_property_aggregate":
            raise Exception(f"function {name} does not exist")

        snapshot = copy.deepcopy(self.tables)
        try:
            parent = self.table("properties")\
                .insert({**params["p_property"], "owner_id": params["p_owner_id"]})\
                .execute().data[0]
            children = (
                ("property_locations", [params["p_location"]] if params.get("p_location") else []),
                ("tenants", params.get("p_tenants") or []),
                ("property_images", params.get("p_images") or []),
                ("property_documents", params.get("p_documents") or []),
            )
            for table, rows in children:
                if rows:
                    self.table(table)\
                        .insert([{**row, "property_id": parent["id"]} for row in rows])\
                        .execute()
        except Exception:
            self.tables = snapshot
            raise
        return [parent]

    def run(self, query):
        rows = self.rows(query.table)
        matching = [row for row in rows if all(check(row) for check in query.filters)]

        if query.operation == "insert":
            if query.table in self.fail_on_insert:
                raise Exception(f"violates check constraint on {query.table}")
            items = query.payload if isinstance(query.payload, list) else [query.payload]
            inserted = []
            for item in items:
                row = copy.deepcopy(item)
                row.setdefault("id", str(uuid.uuid4()))
                if query.table in TIMESTAMPED_TABLES:
                    now = datetime.now(timezone.utc).isoformat()
                    row.setdefault("created_at", now)
                    row.setdefault("updated_at", now)
                rows.append(row)
                inserted.append(copy.deepcopy(row))
            return inserted

        if query.operation == "update":
            for row in matching:
                row.update(copy.deepcopy(query.payload))
            return copy.deepcopy(matching)

        if query.operation == "delete":
            for row in matching:
                rows.remove(row)
                for child_table in CASCADES.get(query.table, []):
                    children = self.rows(child_table)
                    children[:] = [c for c in children if c.get("property_id") != row["id"]]
            return copy.deepcopy(matching)

        if query.order_by:
            column, desc = query.order_by
            matching = sorted(matching, key=lambda row: row.get(column) or "", reverse=desc)
        if query.max_rows is not None:
            matching = matching[:query.max_rows]
        return copy.deepcopy(matching)


@pytest.fixture
def fake_db():
    return FakeSupabase(users={ALICE_TOKEN: ALICE_ID, BOB_TOKEN: BOB_ID})


@pytest.fixture
def client(fake_db):
    app.dependency_overrides[get_supabase] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def alice_headers():
    return {"Authorization": f"Bearer {ALICE_TOKEN}"}


@pytest.fixture
def bob_headers():
    return {"Authorization": f"Bearer {BOB_TOKEN}"}


@pytest.fixture
def cozy_house_payload():
    """Corps POST d'une maison avec adresse"""
    return {
        "name": "Cozy House",
        "type": "HOUSE",
        "currency": "USD",
        "propertyLocation": {
            "create": {
                "address": "12 Oak Rd, Springfield, 55555",
                "city": "Springfield",
                "country": "USA",
                "postalCode": "55555",
            }
        },
    }
