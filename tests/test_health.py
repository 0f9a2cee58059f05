from tests.conftest import FakeResponder, make_client, make_settings


def test_root_returns_service_descriptor(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {
        "status": "running",
        "service": "ARKY Backend API",
        "endpoints": ["/api/chat", "/api/contact"],
    }


def test_root_works_without_any_secrets():
    client = make_client(make_settings(gemini_api_key="", smtp_user="", smtp_pass=""))
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["endpoints"] == ["/api/chat", "/api/contact"]


def test_unknown_path_is_404(client):
    assert client.get("/api/unknown").status_code == 404


def test_chat_is_post_only(client):
    assert client.get("/api/chat").status_code == 405


class TestCORS:
    def test_allowed_origin_gets_credentials_headers(self, client):
        resp = client.get("/", headers={"Origin": "https://gkedgemedia.com"})
        assert resp.headers["access-control-allow-origin"] == "https://gkedgemedia.com"
        assert resp.headers["access-control-allow-credentials"] == "true"

    def test_preflight_for_allowed_origin(self, client):
        resp = client.options(
            "/api/chat",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        assert resp.status_code == 200
        assert resp.headers["access-control-allow-origin"] == "http://localhost:3000"

    def test_unknown_origin_gets_no_allow_header(self, client):
        resp = client.get("/", headers={"Origin": "https://evil.example.com"})
        assert "access-control-allow-origin" not in resp.headers


class TestDocs:
    def test_docs_disabled_outside_development(self, client):
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404

    def test_docs_enabled_in_development(self):
        client = make_client(make_settings(environment="development"))
        assert client.get("/openapi.json").status_code == 200


class TestLifespan:
    def test_startup_logs_and_shutdown_closes_responder(self, caplog):
        class ClosingResponder(FakeResponder):
            closed = False

            async def aclose(self):
                self.closed = True

        responder = ClosingResponder()
        caplog.set_level("INFO", logger="arky_api.main")
        with make_client(ai_responder=responder) as client:
            assert client.get("/").status_code == 200
            assert responder.closed is False

        assert responder.closed is True
        assert "Gemini AI initialized: YES" in caplog.text

    def test_startup_without_key_reports_missing(self, caplog):
        caplog.set_level("INFO", logger="arky_api.main")
        with make_client(make_settings(gemini_api_key="")) as client:
            assert client.post("/api/chat", json={"message": "hi"}).status_code == 500

        assert "NO (missing API key)" in caplog.text
