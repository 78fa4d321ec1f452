"""Import fixtures from gql_authz.testing for test discovery."""

from gql_authz.testing._fixtures import authz_config, isolated_authz_config

__all__ = ["authz_config", "isolated_authz_config"]
