"""Integration tests for category and keyword rule endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

from fintrack.models.category import Category
from fintrack.models.keyword_rule import KeywordRule
from fintrack.repositories.category import CategoryRepository
from fintrack.repositories.keyword_rule import KeywordRuleRepository


class TestCategories:
    @pytest.mark.asyncio
    async def test_create_and_list(self, client: AsyncClient, auth_headers: dict, db_session, test_user):
        await CategoryRepository(db_session).create(Category(name="Groceries"))

        created = await client.post(
            "/api/v1/categories", headers=auth_headers, json={"name": "Hobbies", "description": "Fun"}
        )
        assert created.status_code == 201
        assert created.json()["user_id"] == str(test_user.id)
        assert created.json()["is_default"] is False

        listed = await client.get("/api/v1/categories", headers=auth_headers)
        assert [(c["name"], c["is_default"]) for c in listed.json()] == [
            ("Groceries", True),
            ("Hobbies", False),
        ]

    @pytest.mark.asyncio
    async def test_other_users_categories_hidden(self, client: AsyncClient, auth_headers: dict, db_session, other_user):
        await CategoryRepository(db_session).create(Category(user_id=other_user.id, name="Private"))

        listed = await client.get("/api/v1/categories", headers=auth_headers)

        assert listed.json() == []

    @pytest.mark.asyncio
    async def test_name_required(self, client: AsyncClient, auth_headers: dict):
        response = await client.post("/api/v1/categories", headers=auth_headers, json={"name": ""})

        assert response.status_code == 400


class TestKeywordRules:
    @pytest.mark.asyncio
    async def test_rules_listed_in_creation_order(self, client: AsyncClient, auth_headers: dict, db_session):
        category = await CategoryRepository(db_session).create(Category(name="Utilities"))
        category_id = str(category.id)

        for keyword in ("Electric", "Electricity", "Water"):
            response = await client.post(
                "/api/v1/keyword-rules",
                headers=auth_headers,
                json={"keyword": keyword, "category_id": category_id},
            )
            assert response.status_code == 201

        listed = (await client.get("/api/v1/keyword-rules", headers=auth_headers)).json()
        assert [r["keyword"] for r in listed] == ["Electric", "Electricity", "Water"]
        assert [r["position"] for r in listed] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_unknown_category(self, client: AsyncClient, auth_headers: dict):
        response = await client.post(
            "/api/v1/keyword-rules",
            headers=auth_headers,
            json={"keyword": "Uber", "category_id": str(uuid4())},
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "NF_003"

    @pytest.mark.asyncio
    async def test_keyword_required(self, client: AsyncClient, auth_headers: dict, db_session):
        category = await CategoryRepository(db_session).create(Category(name="Travel"))

        response = await client.post(
            "/api/v1/keyword-rules",
            headers=auth_headers,
            json={"keyword": "", "category_id": str(category.id)},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_other_users_private_category_rejected(
        self, client: AsyncClient, auth_headers: dict, db_session, other_user
    ):
        foreign = await CategoryRepository(db_session).create(
            Category(user_id=other_user.id, name="Private")
        )

        response = await client.post(
            "/api/v1/keyword-rules",
            headers=auth_headers,
            json={"keyword": "coffee", "category_id": str(foreign.id)},
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "NF_003"

    @pytest.mark.asyncio
    async def test_own_private_category_accepted(
        self, client: AsyncClient, auth_headers: dict, db_session, test_user
    ):
        own = await CategoryRepository(db_session).create(
            Category(user_id=test_user.id, name="Climbing")
        )

        response = await client.post(
            "/api/v1/keyword-rules",
            headers=auth_headers,
            json={"keyword": "bouldering", "category_id": str(own.id)},
        )

        assert response.status_code == 201
        assert response.json()["category_id"] == str(own.id)

    @pytest.mark.asyncio
    async def test_rules_on_hidden_categories_not_listed(
        self, client: AsyncClient, auth_headers: dict, db_session, other_user
    ):
        categories = CategoryRepository(db_session)
        shared = await categories.create(Category(name="Coffee"))
        foreign = await categories.create(Category(user_id=other_user.id, name="Private"))
        rules = KeywordRuleRepository(db_session)
        await rules.append(KeywordRule(keyword="secret", category_id=foreign.id))
        await rules.append(KeywordRule(keyword="Starbucks", category_id=shared.id))

        listed = (await client.get("/api/v1/keyword-rules", headers=auth_headers)).json()

        assert [r["keyword"] for r in listed] == ["Starbucks"]
