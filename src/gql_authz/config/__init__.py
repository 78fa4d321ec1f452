"""Configuration module for gql-authz."""

from __future__ import annotations

from gql_authz.config._config import CompilerConfig, configure, get_global_config

__all__ = ["CompilerConfig", "configure", "get_global_config"]
