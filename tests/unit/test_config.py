"""Tests for application and domain configuration."""

from datetime import date

import pytest

from protectron.config import Settings
from protectron.domains.assessment.config import AssessmentConfig
from protectron.domains.assessment.models import AutomationLevel, DecisionImpact
from protectron.domains.certification.config import CertificationConfig, TierThresholdConfig


class TestSettings:
    def test_default_settings(self):
        settings = Settings()
        assert settings.app_name == "protectron-scoring"
        assert settings.app_version == "0.1.0"
        assert settings.port == 8000

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "test-app")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_FORMAT", "json")
        settings = Settings()
        assert settings.app_name == "test-app"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_format == "json"


class TestAssessmentConfig:
    def test_defaults(self):
        config = AssessmentConfig()
        assert config.starting_score == 100
        assert config.high_risk.points_per_trigger == 8
        assert config.limited_risk.points_per_trigger == 3
        assert config.prohibited.points_deducted == 30
        assert config.high_risk_deadline == date(2026, 8, 2)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("ASSESSMENT_HIGH_RISK_POINTS", "12")
        monkeypatch.setenv("ASSESSMENT_HIGH_RISK_USE_CASES", "hiring, credit-scoring,")
        monkeypatch.setenv("ASSESSMENT_HIGH_RISK_DEADLINE", "2027-08-02")
        config = AssessmentConfig.from_env()
        assert config.high_risk.points_per_trigger == 12
        assert config.high_risk.use_cases == ["hiring", "credit-scoring"]
        assert config.high_risk_deadline == date(2027, 8, 2)

    def test_instances_do_not_share_lists(self):
        first = AssessmentConfig()
        first.high_risk.use_cases.append("insurance")
        assert "insurance" not in AssessmentConfig().high_risk.use_cases

    def test_defaults_use_answer_enums(self):
        config = AssessmentConfig()
        assert config.high_risk.high_impact_decisions == [
            DecisionImpact.HIGH,
            DecisionImpact.CRITICAL,
        ]
        assert config.automation.unsupervised_levels == [
            AutomationLevel.FULLY_AUTOMATED,
            AutomationLevel.AUTOMATED_OVERRIDE,
        ]
        assert AutomationLevel.ADVISORY_ONLY in config.automation.supervised_levels
        assert "human-in-loop" in config.automation.supervised_levels


class TestCertificationConfig:
    def test_defaults(self):
        config = CertificationConfig()
        assert (config.tiers.gold, config.tiers.silver, config.tiers.bronze) == (95, 85, 70)
        assert config.bonus.logging_window_days == 30
        assert config.issuance.validity_years == 1
        assert config.issuance.reverification_days == 90

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CERTIFICATION_BRONZE_THRESHOLD", "60")
        monkeypatch.setenv("CERTIFICATION_VERIFY_BASE_URL", "https://verify.example.eu/")
        config = CertificationConfig.from_env()
        assert config.tiers.bronze == 60
        assert config.issuance.verify_base_url == "https://verify.example.eu"

    def test_unordered_thresholds_rejected(self):
        with pytest.raises(ValueError, match="gold >= silver >= bronze"):
            CertificationConfig(tiers=TierThresholdConfig(gold=80, silver=85, bronze=70))

    def test_unordered_thresholds_from_env(self, monkeypatch):
        monkeypatch.setenv("CERTIFICATION_BRONZE_THRESHOLD", "99")
        with pytest.raises(ValueError):
            CertificationConfig.from_env()
