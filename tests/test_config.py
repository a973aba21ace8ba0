"""
Tests for utils/config.py — Config and AppConfig.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.config import AppConfig, Config


class TestConfig:
    def test_to_dict_skips_private(self):
        c = Config()
        c._private = "hidden"
        c.public = "visible"
        assert c.to_dict() == {"public": "visible"}

    def test_from_dict(self):
        c = Config.from_dict({"name": "x", "value": 1})
        assert c.name == "x"
        assert c.value == 1

    def test_json_round_trip(self, tmp_path):
        c = Config.from_dict({"symbol": "₦", "port": 8000})
        path = tmp_path / "sub" / "config.json"
        c.save_json(path)
        loaded = Config.load_json(path)
        assert loaded.to_dict() == {"symbol": "₦", "port": 8000}


class TestAppConfig:
    def test_defaults(self, monkeypatch):
        for var in ("APP_HOST", "APP_PORT", "APP_LOG_FORMAT", "APP_CORS_ORIGINS",
                    "APP_ITEMS_PATH", "APP_CURRENCY_SYMBOL"):
            monkeypatch.delenv(var, raising=False)
        cfg = AppConfig.from_env()
        assert cfg.api_host == "127.0.0.1"
        assert cfg.api_port == 8000
        assert cfg.log_format == "text"
        assert cfg.cors_origins == ["*"]
        assert cfg.items_path is None
        assert cfg.currency_symbol == "₦"

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("APP_PORT", "9100")
        monkeypatch.setenv("APP_LOG_FORMAT", "json")
        monkeypatch.setenv("APP_CORS_ORIGINS", "https://a.example, https://b.example,")
        monkeypatch.setenv("APP_ITEMS_PATH", "/data/items.json")
        cfg = AppConfig.from_env()
        assert cfg.api_port == 9100
        assert cfg.log_format == "json"
        assert cfg.cors_origins == ["https://a.example", "https://b.example"]
        assert cfg.items_path == Path("/data/items.json")

    def test_blank_items_path_ignored(self, monkeypatch):
        monkeypatch.setenv("APP_ITEMS_PATH", "   ")
        assert AppConfig.from_env().items_path is None
