"""Tests for the untyped entity service and list options."""

import pytest

from backstage_client import (
    ORDER_ASCENDING,
    ORDER_DESCENDING,
    InvalidArgumentError,
    ListEntityOptions,
    ListEntityOrder,
)
from backstage_client.models import Entity

from .conftest import load_testdata

ENTITIES_PATH = "/api/catalog/entities"


@pytest.mark.parametrize("direction", [ORDER_ASCENDING, ORDER_DESCENDING])
@pytest.mark.parametrize("field", ["metadata.name", "kind", "spec.owner"])
def test_order_to_query(direction, field):
    assert ListEntityOrder(direction, field).to_query() == f"{direction}:{field}"


@pytest.mark.parametrize("direction", ["", "ASC", "ascending", "up", "desc "])
def test_order_to_query_invalid_direction(direction):
    with pytest.raises(InvalidArgumentError, match="invalid order direction"):
        ListEntityOrder(direction, "metadata.name").to_query()


def test_options_to_params():
    options = ListEntityOptions(
        filters=["kind=User", "metadata.namespace"],
        fields=["metadata.name", "metadata.uid"],
        order=[
            ListEntityOrder(ORDER_ASCENDING, "kind"),
            ListEntityOrder(ORDER_DESCENDING, "metadata.name"),
        ],
    )

    assert options.to_params() == [
        ("filter", "kind=User"),
        ("filter", "metadata.namespace"),
        ("fields", "metadata.name,metadata.uid"),
        ("order", "asc:kind"),
        ("order", "desc:metadata.name"),
    ]


def test_options_empty():
    assert ListEntityOptions().to_params() == []


def test_list(client, catalog_server):
    catalog_server.reply_file("GET", ENTITIES_PATH, "entities.json")

    entities, response = client.catalog.entities.list()

    assert response.status_code == 200
    assert len(entities) == 2
    user, template = entities
    assert user.kind == "User"
    assert user.metadata.name == "guest"
    assert user.relations[0].target.name == "guests"
    # Unknown kinds keep their free-form spec
    assert template.kind == "Template"
    assert template.spec["steps"][0]["action"] == "fetch:template"
    assert template.status.items[0].error.name == "InputError"
    assert str(catalog_server.requests[0].url) == f"https://foo:1234{ENTITIES_PATH}"


def test_list_encodes_options(client, catalog_server):
    catalog_server.reply("GET", ENTITIES_PATH, json_body=[])

    entities, _ = client.catalog.entities.list(
        ListEntityOptions(
            filters=["kind=User"],
            fields=["metadata.name"],
            order=[ListEntityOrder(ORDER_DESCENDING, "metadata.name")],
        )
    )

    assert entities == []
    url = catalog_server.requests[0].url
    assert "filter=kind%3DUser" in str(url)
    assert "fields=metadata.name" in str(url)
    assert url.params.get_list("order") == ["desc:metadata.name"]


def test_list_repeats_filters(client, catalog_server):
    catalog_server.reply("GET", ENTITIES_PATH, json_body=[])

    client.catalog.entities.list(
        ListEntityOptions(filters=["kind=component", "spec.type=service"])
    )

    url = catalog_server.requests[0].url
    assert url.params.get_list("filter") == ["kind=component", "spec.type=service"]


def test_list_invalid_order_sends_nothing(client, catalog_server):
    options = ListEntityOptions(order=[ListEntityOrder("sideways", "metadata.name")])

    with pytest.raises(InvalidArgumentError):
        client.catalog.entities.list(options)

    assert catalog_server.requests == []


def test_get(client, catalog_server):
    uid = "9c8b7a6d-5e4f-3a2b-1c0d-9e8f7a6b5c4d"
    catalog_server.reply(
        "GET", f"{ENTITIES_PATH}/by-uid/{uid}", json_body=load_testdata("entities.json")[0]
    )

    entity, response = client.catalog.entities.get(uid)

    assert response.status_code == 200
    assert isinstance(entity, Entity)
    assert entity.metadata.uid == uid
    assert entity.metadata.etag == "a1b2c3"


def test_get_not_found(client, catalog_server):
    entity, response = client.catalog.entities.get("missing")

    assert entity is None
    assert response.status_code == 404


def test_delete(client, catalog_server):
    catalog_server.reply("DELETE", f"{ENTITIES_PATH}/by-uid/uid", 204)

    response = client.catalog.entities.delete("uid")

    assert response.status_code == 204
    assert catalog_server.requests[0].method == "DELETE"


@pytest.mark.parametrize("operation", ["get", "delete"])
def test_empty_uid_sends_nothing(client, catalog_server, operation):
    with pytest.raises(InvalidArgumentError, match="uid cannot be empty"):
        getattr(client.catalog.entities, operation)("")

    assert catalog_server.requests == []


def test_list_projected_fields(client, catalog_server):
    catalog_server.reply(
        "GET", ENTITIES_PATH, json_body=[{"metadata": {"name": "guest"}}]
    )

    entities, response = client.catalog.entities.list(
        ListEntityOptions(fields=["metadata.name"])
    )

    assert response.status_code == 200
    assert entities[0].metadata.name == "guest"
    assert entities[0].kind == ""
    assert entities[0].spec == {}
    assert catalog_server.requests[0].url.params["fields"] == "metadata.name"


def test_list_projected_without_metadata(client, catalog_server):
    catalog_server.reply(
        "GET",
        ENTITIES_PATH,
        json_body=[{"kind": "Component", "spec": {"type": "service"}}],
    )

    entities, _ = client.catalog.entities.list(ListEntityOptions(fields=["kind", "spec"]))

    assert entities[0].kind == "Component"
    assert entities[0].spec == {"type": "service"}
    assert entities[0].metadata.name == ""
