"""
Configuration Validator
Validates SadadPay configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Checks a raw configuration dictionary before it is resolved
    into a SadadConfig, so every problem is reported at once
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_credentials(config)
        self._validate_sandbox_mode(config)
        self._validate_ranges(config)
        self._validate_log_path(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            ConfigurationError: If configuration is invalid
        """
        from sadad_pay.exceptions import ConfigurationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ConfigurationError(
                f"Configuration validation failed: {error_messages}",
                field=result.errors[0].field,
                details={"errors": [e.field for e in result.errors]},
            )

    def _validate_credentials(self, config: Dict[str, Any]) -> None:
        """Validate credentials are present, strings, and non-empty once trimmed"""
        for field_name in ("client_id", "client_secret"):
            value = config.get(field_name)
            if value is None:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} is required"
                ))
            elif not isinstance(value, str):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be a string",
                    value=type(value).__name__
                ))
            elif value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                ))

    def _validate_sandbox_mode(self, config: Dict[str, Any]) -> None:
        """sandbox_mode has no default and must be a real boolean"""
        if "sandbox_mode" not in config or config["sandbox_mode"] is None:
            self._errors.append(ValidationErrorDetail(
                field="sandbox_mode",
                message="sandbox_mode is required"
            ))
        elif not isinstance(config["sandbox_mode"], bool):
            self._errors.append(ValidationErrorDetail(
                field="sandbox_mode",
                message="sandbox_mode must be boolean",
                value=config["sandbox_mode"]
            ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        timeout = config.get("timeout")
        if timeout is not None:
            if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout must be a positive integer (milliseconds)",
                    value=timeout
                ))
            elif timeout < 1000:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout should be at least 1000ms for reliable operation",
                    value=timeout
                ))
            elif timeout > 300000:
                self._errors.append(ValidationErrorDetail(
                    field="timeout",
                    message="timeout should not exceed 300000ms (5 minutes)",
                    value=timeout
                ))

    def _validate_log_path(self, config: Dict[str, Any]) -> None:
        log_path = config.get("log_path")
        if log_path is not None and log_path != "" and not isinstance(log_path, str):
            self._errors.append(ValidationErrorDetail(
                field="log_path",
                message="log_path must be a string",
                value=log_path
            ))
