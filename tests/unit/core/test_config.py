import pytest
from pydantic import ValidationError

from average_calculator.core.config import DEFAULT_UPSTREAM_ENDPOINTS, Settings, settings
from average_calculator.domain.categories import Category


class TestSettings:
    """Test configuration settings."""

    def test_default_values(self):
        config = Settings()

        assert config.window_size == 10
        assert config.fetch_timeout_ms == 500
        assert config.response_budget_ms == 500
        assert config.budget_warning_ratio == 0.9
        assert config.port == 9876
        assert config.otel_service_name == "average-calculator"
        assert set(config.upstream_endpoints) == {"p", "f", "e", "r"}
        assert config.upstream_endpoints["f"].endswith("/fibo")
        assert config.upstream_auth_token is None
        assert config.app_log_level == "INFO"

    def test_settings_singleton(self):
        assert isinstance(settings, Settings)

    def test_derived_budget_values(self):
        config = Settings(fetch_timeout_ms=250, response_budget_ms=400)
        assert config.fetch_timeout_seconds == 0.25
        assert config.budget_warning_ms == pytest.approx(360)

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("WINDOW_SIZE", "25")
        monkeypatch.setenv(
            "UPSTREAM_ENDPOINTS", '{"p": "http://localhost:9000/primes"}'
        )
        config = Settings()
        assert config.window_size == 25
        assert config.upstream_endpoints == {
            **DEFAULT_UPSTREAM_ENDPOINTS,
            "p": "http://localhost:9000/primes",
        }

    def test_partial_endpoint_override_keeps_every_category(self, monkeypatch):
        monkeypatch.setenv("UPSTREAM_ENDPOINTS", '{"e": "http://localhost:9000/even"}')
        config = Settings()
        for category in Category:
            assert config.upstream_endpoints[category.value]
        assert config.upstream_endpoints["e"] == "http://localhost:9000/even"

    def test_unknown_category_endpoint_rejected(self):
        with pytest.raises(ValidationError, match="Unknown category ids"):
            Settings(upstream_endpoints={"x": "http://localhost:9000/x"})

    @pytest.mark.parametrize("field", ["window_size", "fetch_timeout_ms"])
    def test_rejects_non_positive(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})
