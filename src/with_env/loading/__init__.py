"""Loading - parse env files and merge them under the cascade policy."""

from .loader import EnvFileLoader, parse_overrides

__all__ = ["EnvFileLoader", "parse_overrides"]
