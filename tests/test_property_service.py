# tests/test_property_service.py
"""
Tests du service d'agrégat et du contrôle d'appartenance
Exécuter: pytest tests/test_property_service.py -v
"""
import uuid
from datetime import date

import pytest

from conftest import ALICE_ID, BOB_ID
from proptrack.core.exceptions import NOT_FOUND_MESSAGE, PersistenceError, PropertyNotFoundError
from proptrack.crud import OwnershipGate, PropertyAggregateService
from proptrack.models import PropertyCreate, PropertyUpdate


@pytest.fixture
def service(fake_db):
    return PropertyAggregateService(fake_db)


@pytest.fixture
def full_payload(cozy_house_payload):
    data = dict(cozy_house_payload)
    data["notes"] = "Jardin clos"
    data["value"] = 250000
    data["tenants"] = {"create": [
        {"name": "Jane Doe", "email": "jane.doe@gmail.com", "monthlyRent": 1200},
        {"name": "John Roe", "email": "john.roe@gmail.com", "phone": "555-0100"},
    ]}
    data["images"] = {"create": [
        {"sourceReference": "s3://props/front.jpg", "displayName": "front.jpg", "mediaType": "image/jpeg"},
    ]}
    data["documents"] = {"create": [
        {"sourceReference": "s3://props/deed.pdf", "displayName": "deed.pdf",
         "mediaType": "application/pdf", "category": "PROPERTY_REGISTRATION"},
    ]}
    return PropertyCreate.model_validate(data)


# ==================== OWNERSHIP GATE ====================

def test_gate_returns_owned_row(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)
    row = OwnershipGate(fake_db).authorize(ALICE_ID, created.id)
    assert row["id"] == created.id


def test_gate_hides_other_owner(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)
    gate = OwnershipGate(fake_db)

    with pytest.raises(PropertyNotFoundError) as foreign:
        gate.authorize(BOB_ID, created.id)
    with pytest.raises(PropertyNotFoundError) as missing:
        gate.authorize(BOB_ID, str(uuid.uuid4()))

    assert str(foreign.value) == str(missing.value) == NOT_FOUND_MESSAGE


def test_gate_malformed_id_is_not_found(fake_db):
    with pytest.raises(PropertyNotFoundError):
        OwnershipGate(fake_db).authorize(ALICE_ID, "not-a-uuid")
    assert fake_db.calls == []


# ==================== CREATE / GET / LIST ====================

def test_create_forces_owner_and_writes_children(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)

    assert created.owner_id == ALICE_ID
    assert fake_db.rows("property_locations")[0]["property_id"] == created.id
    assert {t["property_id"] for t in fake_db.rows("tenants")} == {created.id}
    assert len(fake_db.rows("property_images")) == 1
    assert fake_db.rows("property_documents")[0]["category"] == "PROPERTY_REGISTRATION"


def test_parent_written_before_children(service, fake_db, full_payload):
    service.create(ALICE_ID, full_payload)
    inserts = [table for table, operation in fake_db.calls if operation == "insert"]
    assert inserts[0] == "properties"


def test_create_then_get_round_trip(service, full_payload):
    created = service.create(ALICE_ID, full_payload)
    aggregate = service.get(created.id, ALICE_ID)

    assert aggregate.name == "Cozy House"
    assert aggregate.type.value == "HOUSE"
    assert aggregate.currency.value == "USD"
    assert aggregate.value == 250000
    assert aggregate.notes == "Jardin clos"
    assert aggregate.property_location.city == "Springfield"
    assert [t.name for t in aggregate.tenants] == ["Jane Doe", "John Roe"]
    assert aggregate.tenants[0].phone == ""
    assert aggregate.documents[0].category.value == "PROPERTY_REGISTRATION"


def test_create_is_one_transactional_call(service, fake_db, full_payload):
    service.create(ALICE_ID, full_payload)
    assert [call for call in fake_db.calls if call[1] == "rpc"] == [("create_property_aggregate", "rpc")]


@pytest.mark.parametrize("table", ["property_locations", "tenants", "property_images", "property_documents"])
def test_failed_child_leaves_no_orphan(service, fake_db, full_payload, table):
    """Un enfant refusé annule toute la création, sans suppression compensatoire"""
    fake_db.fail_on_insert.add(table)

    with pytest.raises(PersistenceError):
        service.create(ALICE_ID, full_payload)

    assert fake_db.rows("properties") == []
    assert fake_db.rows("property_locations") == []
    assert fake_db.rows("tenants") == []
    assert not [call for call in fake_db.calls if call[1] == "delete"]
    assert service.list(ALICE_ID) == []


def test_failed_parent_is_persistence_error(service, fake_db, full_payload):
    fake_db.fail_on_insert.add("properties")
    with pytest.raises(PersistenceError):
        service.create(ALICE_ID, full_payload)
    assert fake_db.rows("properties") == []


def test_lease_dates_round_trip(service, cozy_house_payload):
    data = dict(cozy_house_payload)
    data["tenants"] = [{"name": "Jane Doe", "email": "jane.doe@gmail.com", "leaseStartDate": "2025-01-31"}]
    created = service.create(ALICE_ID, PropertyCreate.model_validate(data))

    tenant = service.get(created.id, ALICE_ID).tenants[0]
    assert tenant.lease_start_date == date(2025, 1, 31)
    assert tenant.lease_end_date is None


def test_list_is_scoped_to_owner(service, full_payload, cozy_house_payload):
    service.create(ALICE_ID, full_payload)
    service.create(BOB_ID, PropertyCreate.model_validate(cozy_house_payload))

    alice = service.list(ALICE_ID)
    assert len(alice) == 1
    assert alice[0].owner_id == ALICE_ID
    assert len(alice[0].tenants) == 2


def test_list_requires_owner(service):
    with pytest.raises(ValueError):
        service.list("")


# ==================== UPDATE ====================

def test_update_changes_scalars_only(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)

    updated = service.update(created.id, ALICE_ID, PropertyUpdate(name="New Name"))
    aggregate = service.get(created.id, ALICE_ID)

    assert updated.name == "New Name"
    assert aggregate.property_location.address == "12 Oak Rd, Springfield, 55555"
    assert len(aggregate.tenants) == 2
    assert len(fake_db.rows("tenants")) == 2


def test_update_other_owner_is_not_found(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)

    with pytest.raises(PropertyNotFoundError):
        service.update(created.id, BOB_ID, PropertyUpdate(name="Hijacked"))
    assert fake_db.rows("properties")[0]["name"] == "Cozy House"


def test_update_empty_payload(service, full_payload):
    created = service.create(ALICE_ID, full_payload)
    with pytest.raises(ValueError):
        service.update(created.id, ALICE_ID, PropertyUpdate())


def test_update_can_clear_notes(service, full_payload):
    created = service.create(ALICE_ID, full_payload)
    updated = service.update(created.id, ALICE_ID, PropertyUpdate(notes=None))
    assert updated.notes is None


def test_update_can_clear_value(service, full_payload):
    created = service.create(ALICE_ID, full_payload)
    updated = service.update(created.id, ALICE_ID, PropertyUpdate.model_validate({"value": None}))
    assert updated.value is None
    assert service.get(created.id, ALICE_ID).value is None


# ==================== DELETE ====================

def test_delete_cascades_and_second_delete_is_not_found(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)

    service.delete(created.id, ALICE_ID)

    assert fake_db.rows("properties") == []
    assert fake_db.rows("tenants") == []
    with pytest.raises(PropertyNotFoundError):
        service.delete(created.id, ALICE_ID)


def test_delete_other_owner_is_not_found(service, fake_db, full_payload):
    created = service.create(ALICE_ID, full_payload)
    with pytest.raises(PropertyNotFoundError):
        service.delete(created.id, BOB_ID)
    assert len(fake_db.rows("properties")) == 1
