from projectfoam.app.factory import create_app


def test_health():
    app = create_app()
    with app.test_client() as c:
        r = c.get("/health")
        assert r.status_code == 200
        assert r.json["status"] == "ok"


def test_home_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.mimetype == "text/html"
    assert b"Project Foam placeholder logo" in r.data


def test_request_id_is_generated(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")


def test_request_id_is_echoed(client):
    r = client.get("/", headers={"X-Request-ID": "abc-123"})
    assert r.headers["X-Request-ID"] == "abc-123"


def test_unknown_route_renders_error_page(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert b"Back to home" in r.data


def test_invalid_log_level_falls_back_to_info():
    from projectfoam.app.config import Config
    from projectfoam.app.factory import resolve_log_level

    class VerboseConfig(Config):
        LOG_LEVEL = "verbose"

    app = create_app(VerboseConfig)
    assert app.config["LOG_LEVEL"] == "INFO"
    assert resolve_log_level(" debug ") == "DEBUG"
    assert resolve_log_level(None) == "INFO"


def test_home_logo_follows_image_base_url():
    from projectfoam.app.config import Config

    class CdnConfig(Config):
        IMAGE_BASE_URL = "https://img.example.com"

    with create_app(CdnConfig).test_client() as c:
        r = c.get("/")
    assert b'src="https://img.example.com/project-foam.png"' in r.data


def test_home_logo_defaults_to_static_route(client):
    r = client.get("/")
    assert b'src="/static/project-foam.png"' in r.data
