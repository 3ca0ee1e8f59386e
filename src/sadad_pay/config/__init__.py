"""
Configuration module
"""

from sadad_pay.config.sadad_config import (
    SadadConfig,
    SadadEnvironment,
    GatewayEndpoints,
    SADAD_API_URLS,
    SADAD_PAY_URLS,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from sadad_pay.config.config_loader import ConfigLoader
from sadad_pay.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "SadadConfig",
    "SadadEnvironment",
    "GatewayEndpoints",
    "SADAD_API_URLS",
    "SADAD_PAY_URLS",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
