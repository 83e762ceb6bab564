"""Health probes, the dashboard page, CORS and the application factory."""

import uvicorn

from digiwallet import main


async def test_health(client):
    res = await client.get("/api/health")

    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_ready(client):
    res = await client.get("/api/health/ready")

    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_not_ready_when_database_down(client, container, monkeypatch):
    async def unavailable():
        return False

    monkeypatch.setattr(container.database, "health_check", unavailable)

    res = await client.get("/api/health/ready")

    assert res.status_code == 503


async def test_dashboard_page(client):
    res = await client.get("/")

    assert res.status_code == 200
    assert "DigiWallet" in res.text
    assert "/static/js/app.js" in res.text


async def test_static_assets_served(client):
    res = await client.get("/static/js/api.js")

    assert res.status_code == 200


async def test_cors_preflight_for_frontend_origin(client):
    res = await client.options(
        "/api/users",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "POST"},
    )

    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"


async def test_create_app_uses_injected_container(settings, container):
    app = main.create_app(settings=settings, container=container)

    assert app.state.container is container


def test_run_serves_the_app_factory(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    main.run()

    target, kwargs = calls[0]
    assert target == "digiwallet.main:create_app"
    assert kwargs["factory"] is True
    # importing the module builds no application or engine
    assert not hasattr(main, "app")
