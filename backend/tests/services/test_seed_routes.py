"""Seed & Health Routes — verifies demo data loading and the probes.

Invariants:
    - Seeding an empty database creates 5 accounts, 9 categories, 10 tags, 5 articles
    - Seeding twice is a 409 and changes nothing
"""


async def test_seed_populates_empty_database(client):
    res = await client.post("/api/v1/system/seed")
    assert res.status_code == 201
    assert res.json() == {
        "message": "Database seeded successfully",
        "accounts": 5, "categories": 9, "tags": 10, "news_articles": 5,
    }

    res = await client.get("/api/v1/categories", params={"include_subcategories": "false"})
    assert [c["name"] for c in res.json()["items"]] == [
        "Academic", "Student Life", "Research", "Sports", "Technology",
    ]
    academic = res.json()["items"][0]
    assert academic["sub_categories_count"] == 2
    assert academic["news_articles_count"] == 2

    res = await client.get("/api/v1/tags", params={"search": "announcement"})
    assert res.json()["items"][0]["news_articles_count"] == 3


async def test_seeded_admin_can_log_in(client):
    await client.post("/api/v1/system/seed")
    res = await client.post("/api/v1/auth/login", json={
        "email": "admin@funews.edu.vn", "password": "Admin123!",
    })
    assert res.status_code == 200
    assert res.json()["account"]["role"] == 1


async def test_seed_twice_conflicts(client):
    assert (await client.post("/api/v1/system/seed")).status_code == 201
    res = await client.post("/api/v1/system/seed")
    assert res.status_code == 409
    res = await client.get("/api/v1/accounts")
    assert res.json()["total"] == 5


async def test_health_probes(client):
    res = await client.get("/api/v1/health/")
    assert res.json()["status"] == "healthy"
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
