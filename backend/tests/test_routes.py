from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from micropost_backend.api import RouteEntry, route_table

if TYPE_CHECKING:
    from fastapi import FastAPI
    from fastapi.testclient import TestClient


EXPECTED_ROUTES = [
    RouteEntry("GET", "/microposts", "microposts#index"),
    RouteEntry("POST", "/microposts", "microposts#create"),
    RouteEntry("GET", "/microposts/{micropost_id}", "microposts#show"),
    RouteEntry("PATCH", "/microposts/{micropost_id}", "microposts#update"),
    RouteEntry("PUT", "/microposts/{micropost_id}", "microposts#update"),
    RouteEntry("DELETE", "/microposts/{micropost_id}", "microposts#destroy"),
    RouteEntry("GET", "/users", "users#index"),
    RouteEntry("POST", "/users", "users#create"),
    RouteEntry("DELETE", "/users/destroy_all", "users#destroy_all"),
    RouteEntry("GET", "/users/{user_id}", "users#show"),
    RouteEntry("PATCH", "/users/{user_id}", "users#update"),
    RouteEntry("PUT", "/users/{user_id}", "users#update"),
    RouteEntry("DELETE", "/users/{user_id}", "users#destroy"),
    RouteEntry("GET", "/", "root"),
]


def test_route_table_lists_resources_in_order(app: FastAPI) -> None:
    assert route_table(app) == EXPECTED_ROUTES


def test_destroy_all_is_registered_before_member_delete(app: FastAPI) -> None:
    table = route_table(app)
    collection = table.index(RouteEntry("DELETE", "/users/destroy_all", "users#destroy_all"))
    member = table.index(RouteEntry("DELETE", "/users/{user_id}", "users#destroy"))

    assert collection < member


def test_root_renders_users_index(client: TestClient, make_user) -> None:
    make_user(name="Alice")
    make_user(name="Bob")

    root = client.get("/")
    index = client.get("/users")

    assert root.status_code == 200
    assert root.json() == index.json()
    assert [user["name"] for user in root.json()] == ["Alice", "Bob"]


def test_destroy_all_is_not_treated_as_member_id(client: TestClient, make_user) -> None:
    make_user()

    response = client.delete("/users/destroy_all")

    assert response.status_code == 204
    assert client.get("/users").json() == []


@pytest.mark.parametrize("user_id", [uuid4(), uuid4()])
def test_member_delete_still_resolves_by_id(client: TestClient, user_id) -> None:
    response = client.delete(f"/users/{user_id}")

    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


def test_unknown_verb_on_collection_route_is_rejected(client: TestClient) -> None:
    response = client.post("/users/destroy_all")

    assert response.status_code == 405


def test_route_table_matches_included_routers(app: FastAPI) -> None:
    actions = {entry.action for entry in route_table(app)}

    assert "users#destroy_all" in actions
    assert "microposts#index" in actions
    assert len(route_table(app)) == len(EXPECTED_ROUTES)


def test_print_routes_lists_every_route(capsys: pytest.CaptureFixture[str]) -> None:
    from micropost_backend.main import print_routes

    print_routes()

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(EXPECTED_ROUTES)
    assert lines[8].split() == ["DELETE", "/users/destroy_all", "users#destroy_all"]
    assert lines[-1].split() == ["GET", "/", "root"]
