"""Tests for the user endpoints."""

import pytest


async def create_user(client, index, role="user"):
    response = await client.post(
        "/users",
        json={"name": f"User {index}", "email": f"user{index}@example.com", "role": role}
    )
    assert response.status_code == 201
    return response.json()["data"]


class TestUserCrudEndpoints:
    """Tests for POST/GET/PUT /users."""
    
    @pytest.mark.asyncio
    async def test_create_user(self, async_client):
        response = await async_client.post(
            "/users",
            json={"name": "Ann", "email": "Ann@Example.com", "role": "admin"}
        )
        
        assert response.status_code == 201
        body = response.json()
        user = body["data"]
        assert body["status"] == "created"
        assert user["email"] == "ann@example.com"
        assert user["status"] == "active"
        assert "deletedAt" not in user
        assert response.headers["location"] == f"http://test/users/{user['id']}"
        assert body["_links"]["self"]["href"] == response.headers["location"]
    
    @pytest.mark.asyncio
    async def test_duplicate_email_is_409(self, async_client):
        await create_user(async_client, 1)
        
        response = await async_client.post(
            "/users",
            json={"name": "Other", "email": "user1@example.com", "role": "user"}
        )
        
        assert response.status_code == 409
        assert response.json()["error"] == {
            "message": "Email is already in use",
            "details": "Please use a different email address",
        }
    
    @pytest.mark.asyncio
    async def test_invalid_body_is_400(self, async_client):
        response = await async_client.post("/users", json={"name": "Ann", "email": "nope", "role": "user"})
        
        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Invalid request"
    
    @pytest.mark.asyncio
    async def test_get_user(self, async_client):
        user = await create_user(async_client, 1)
        
        response = await async_client.get(f"/users/{user['id']}")
        
        assert response.status_code == 200
        assert response.json()["data"] == user
    
    @pytest.mark.asyncio
    async def test_get_missing_user_is_404(self, async_client):
        response = await async_client.get("/users/missing")
        
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "User not found"
    
    @pytest.mark.asyncio
    async def test_update_user(self, async_client):
        user = await create_user(async_client, 1)
        
        response = await async_client.put(f"/users/{user['id']}", json={"name": "Renamed"})
        
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "updated"
        assert body["data"]["name"] == "Renamed"
        assert body["data"]["email"] == user["email"]
    
    @pytest.mark.asyncio
    async def test_update_missing_user_is_404(self, async_client):
        response = await async_client.put("/users/missing", json={"name": "x"})
        
        assert response.status_code == 404
    
    @pytest.mark.asyncio
    async def test_update_to_taken_email_is_409(self, async_client):
        await create_user(async_client, 1)
        other = await create_user(async_client, 2)
        
        response = await async_client.put(f"/users/{other['id']}", json={"email": "user1@example.com"})
        
        assert response.status_code == 409


class TestUserPagination:
    """Tests for GET /users pagination."""
    
    @pytest.mark.asyncio
    async def test_second_page_of_25(self, async_client):
        created = [await create_user(async_client, i) for i in range(25)]
        
        response = await async_client.get("/users", params={"page": 2, "pageSize": 10})
        
        assert response.status_code == 200
        body = response.json()
        assert [user["id"] for user in body["data"]["items"]] == [user["id"] for user in created[10:20]]
        assert body["data"]["count"] == 10
        assert body["pagination"] == {
            "currentPage": 2,
            "pageSize": 10,
            "totalItems": 25,
            "totalPages": 3,
        }
        assert body["_links"]["prev"]["href"] == "http://test/users?page=1&pageSize=10"
        assert body["_links"]["next"]["href"] == "http://test/users?page=3&pageSize=10"
    
    @pytest.mark.asyncio
    async def test_third_page_has_no_next(self, async_client):
        for i in range(25):
            await create_user(async_client, i)
        
        body = (await async_client.get("/users", params={"page": 3, "pageSize": 10})).json()
        
        assert body["data"]["count"] == 5
        assert "next" not in body["_links"]
        assert "prev" in body["_links"]
    
    @pytest.mark.asyncio
    async def test_defaults(self, async_client):
        for i in range(12):
            await create_user(async_client, i)
        
        body = (await async_client.get("/users")).json()
        
        assert body["pagination"]["currentPage"] == 1
        assert body["pagination"]["pageSize"] == 10
        assert body["data"]["count"] == 10
    
    @pytest.mark.asyncio
    async def test_page_size_above_maximum_is_400(self, async_client):
        response = await async_client.get("/users", params={"pageSize": 500})
        
        assert response.status_code == 400
        body = response.json()
        assert body["error"]["message"] == "Invalid request"
        assert "pageSize" in body["error"]["details"]
    
    @pytest.mark.asyncio
    async def test_page_size_at_maximum_is_accepted(self, async_client):
        body = (await async_client.get("/users", params={"pageSize": 100})).json()
        
        assert body["pagination"]["pageSize"] == 100
    
    @pytest.mark.asyncio
    async def test_invalid_page_is_400(self, async_client):
        response = await async_client.get("/users", params={"page": 0})
        
        assert response.status_code == 400


class TestUserDeactivation:
    """Tests for DELETE /users/{id}."""
    
    @pytest.mark.asyncio
    async def test_soft_delete_hides_user_from_listing(self, async_client):
        keep = await create_user(async_client, 1)
        gone = await create_user(async_client, 2)
        
        response = await async_client.delete(f"/users/{gone['id']}")
        
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "deactivated"
        assert body["data"]["message"] == "User deactivated successfully"
        assert body["data"]["user"]["status"] == "inactive"
        assert "deletedAt" in body["data"]["user"]
        
        listing = (await async_client.get("/users")).json()
        assert [user["id"] for user in listing["data"]["items"]] == [keep["id"]]
        assert listing["pagination"]["totalItems"] == 1
        
        direct = await async_client.get(f"/users/{gone['id']}")
        assert direct.status_code == 200
        assert direct.json()["data"]["status"] == "inactive"
    
    @pytest.mark.asyncio
    async def test_delete_missing_user_is_404(self, async_client):
        response = await async_client.delete("/users/missing")
        
        assert response.status_code == 404
        assert response.json()["error"]["message"] == "User not found"
