from balance_hook.core.config import Settings, _parse_cors_origins


def test_legacy_env_names(monkeypatch):
    monkeypatch.delenv("MONGODB_URI", raising=False)
    monkeypatch.delenv("RAZORPAY_WEBHOOK_SECRET", raising=False)
    monkeypatch.setenv("MONGODB_URL", "mongodb://db:27017")
    monkeypatch.setenv("RAZORPAY_SECRET", "legacy")
    monkeypatch.setenv("PORT", "8080")
    s = Settings(_env_file=None)
    assert s.mongodb_uri == "mongodb://db:27017"
    assert s.razorpay_webhook_secret == "legacy"
    assert s.port == 8080


def test_cors_origins_parsing():
    assert _parse_cors_origins("https://a.test, https://b.test") == ["https://a.test", "https://b.test"]
    assert _parse_cors_origins('["https://a.test"]') == ["https://a.test"]
    assert _parse_cors_origins("") == ["http://localhost:3000", "http://localhost:5173"]
