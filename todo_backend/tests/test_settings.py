from todo_app.settings import get_settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PERSISTENCE_BACKEND", "SQLITE_DB_PATH", "CORS_ALLOW_ORIGINS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        s = get_settings()
        assert s.persistence_backend == "memory"
        assert s.sqlite_db_path == "./data/storage.db"
        assert s.cors_allow_origins == ["*"]
        assert s.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", " SQLite ")
        monkeypatch.setenv("SQLITE_DB_PATH", "/tmp/x.db")
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test,")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = get_settings()
        assert s.persistence_backend == "sqlite"
        assert s.sqlite_db_path == "/tmp/x.db"
        assert s.cors_allow_origins == ["http://a.test", "http://b.test"]
        assert s.log_level == "DEBUG"

    def test_unknown_values_fall_back(self, monkeypatch):
        monkeypatch.setenv("PERSISTENCE_BACKEND", "postgres")
        monkeypatch.setenv("LOG_LEVEL", "loud")
        s = get_settings()
        assert s.persistence_backend == "memory"
        assert s.log_level == "INFO"
