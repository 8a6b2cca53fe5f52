"""Configuration module for the ETag middleware.

This module provides the ETagConfig class. The middleware has a single
construction-time choice: whether tags it computes are marked strong or
weak. The choice has no effect on tags already set by a handler, nor on how
tags are compared.

Example:
    Basic usage with defaults:

        >>> config = ETagConfig()
        >>> config.strength
        <Strength.STRONG: 'strong'>

    Weak tags:

        >>> config = ETagConfig(strength="weak")
        >>> config.strength
        <Strength.WEAK: 'weak'>

    Loading from environment:

        >>> import os
        >>> os.environ['ETAG_STRENGTH'] = 'weak'
        >>> config = ETagConfig.from_env()

    Loading from dictionary:

        >>> config = ETagConfig.from_dict({'strength': 'weak'})
"""

import os
from typing import Any

from pydantic import BaseModel, Field, field_validator

from etag_middleware.models import Strength


class ETagConfig(BaseModel):
    """Configuration for the ETag middleware.

    Attributes:
        strength: Marker applied to tags the middleware computes itself.
            "strong" emits ``"<hex>"``, "weak" emits ``W/"<hex>"``.
            Default is "strong".

    Note:
        This class is immutable (frozen=True). Create a new instance if you
        need different settings.
    """

    strength: Strength = Field(
        default=Strength.STRONG,
        description="Strength marker for computed entity tags: 'strong' or 'weak'",
    )

    model_config = {"frozen": True}

    @field_validator("strength", mode="before")
    @classmethod
    def validate_strength(cls, v: Any) -> Any:
        """Normalize the strength name.

        Accepts the enum or its name in any case, with surrounding
        whitespace. Unknown names are left for the enum validation to reject.

        Args:
            v: Strength enum or string.

        Returns:
            Normalized value.

        Example:
            >>> ETagConfig(strength=" WEAK ").strength
            <Strength.WEAK: 'weak'>
        """
        if isinstance(v, str) and not isinstance(v, Strength):
            return v.strip().lower()
        return v

    @classmethod
    def from_env(cls, prefix: str = "ETAG_") -> "ETagConfig":
        """Create configuration from environment variables.

        Variable names are uppercase field names with the prefix.

        Args:
            prefix: Prefix for environment variable names. Default is "ETAG_".

        Returns:
            ETagConfig instance populated from environment variables.

        Example:
            >>> import os
            >>> os.environ['ETAG_STRENGTH'] = 'weak'
            >>> ETagConfig.from_env().strength
            <Strength.WEAK: 'weak'>

        Note:
            Missing variables use the default values defined in the model.
        """
        config_dict: dict[str, Any] = {}

        for field_name in cls.model_fields:
            env_value = os.environ.get(f"{prefix}{field_name.upper()}")
            if env_value is not None:
                config_dict[field_name] = env_value

        return cls(**config_dict)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ETagConfig":
        """Create configuration from a dictionary.

        Args:
            config_dict: Dictionary with configuration values.

        Returns:
            ETagConfig instance populated from the dictionary.

        Raises:
            ValidationError: If the dictionary contains invalid values.
        """
        return cls(**config_dict)
