"""Certification grading configuration.

The compliance score is requirement completion (0-100) plus operational
oversight bonuses, capped at 100. A connected SDK is a hard gate: without
live telemetry no tier is awarded regardless of score.
"""

import os
from dataclasses import dataclass, field


@dataclass
class OversightBonusConfig:
    """Bonus points for operational oversight signals (max 15 by default)."""

    hitl_rules_active: int = 5  # at least one active human-in-the-loop rule
    no_open_incidents: int = 5
    logging_active: int = 5  # audit events within the logging window

    min_active_hitl_rules: int = 1
    logging_window_days: int = 30


@dataclass
class TierThresholdConfig:
    """Minimum final score per certification tier (inclusive)."""

    gold: float = 95.0
    silver: float = 85.0
    bronze: float = 70.0


@dataclass
class IssuanceConfig:
    """Certificate issuance and verification settings."""

    validity_years: int = 1
    reverification_days: int = 90
    cert_id_prefix: str = "CERT"
    cert_id_random_length: int = 6
    verify_base_url: str = "https://protectron.ai/verify"


@dataclass
class CertificationConfig:
    """Top-level certification configuration."""

    max_score: float = 100.0
    bonus: OversightBonusConfig = field(default_factory=OversightBonusConfig)
    tiers: TierThresholdConfig = field(default_factory=TierThresholdConfig)
    issuance: IssuanceConfig = field(default_factory=IssuanceConfig)

    def __post_init__(self) -> None:
        if not (self.tiers.gold >= self.tiers.silver >= self.tiers.bronze):
            raise ValueError(
                f"Tier thresholds must be ordered gold >= silver >= bronze, got "
                f"gold={self.tiers.gold}, silver={self.tiers.silver}, "
                f"bronze={self.tiers.bronze}"
            )

    @classmethod
    def from_env(cls) -> "CertificationConfig":
        """Load config with env var overrides (CERTIFICATION_ prefix)."""
        config = cls()

        if v := os.getenv("CERTIFICATION_GOLD_THRESHOLD"):
            config.tiers.gold = float(v)
        if v := os.getenv("CERTIFICATION_SILVER_THRESHOLD"):
            config.tiers.silver = float(v)
        if v := os.getenv("CERTIFICATION_BRONZE_THRESHOLD"):
            config.tiers.bronze = float(v)
        if v := os.getenv("CERTIFICATION_LOGGING_WINDOW_DAYS"):
            config.bonus.logging_window_days = int(v)
        if v := os.getenv("CERTIFICATION_VALIDITY_YEARS"):
            config.issuance.validity_years = int(v)
        if v := os.getenv("CERTIFICATION_REVERIFICATION_DAYS"):
            config.issuance.reverification_days = int(v)
        if v := os.getenv("CERTIFICATION_VERIFY_BASE_URL"):
            config.issuance.verify_base_url = v.rstrip("/")

        # Re-validate after overrides
        config.__post_init__()
        return config


default_config = CertificationConfig()
