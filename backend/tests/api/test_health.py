"""Health Probe — tests for liveness and fault configuration reporting."""


async def test_health_reports_enabled_issues(make_client):
    async with make_client("payload_extra_keys", "invalid_payload") as c:
        res = await c.get("/api/v1/health/")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["enabled_issues"] == ["invalid_payload", "payload_extra_keys"]


async def test_health_lists_resources(client):
    await client.post(
        "/charges", json={"amount": 1, "currency": "usd", "credit_card_id": 1},
    )
    (charge,) = (await client.get("/api/v1/health/")).json()["resources"]
    assert charge["name"] == "charge"
    assert charge["path"] == "/charges"
    assert charge["records"] == 1
    assert charge["fields"]["amount"]["type"] == "number"
