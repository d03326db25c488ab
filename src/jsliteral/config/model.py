# topmark:header:start
#
#   project      : JsLiteral
#   file         : model.py
#   file_relpath : src/jsliteral/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable JsLiteral configuration.

`JsliteralConfig` is built from runtime defaults, then from a TOML table, then
from CLI overrides (in that order). It is the only place that turns
configuration into a `Serializer`; the core never reads configuration itself.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from jsliteral.config.keys import Toml
from jsliteral.config.loaders import ConfigError, discover_config_file, load_config_table
from jsliteral.config.logging import get_logger
from jsliteral.core.policy import NamedFunctionPolicy
from jsliteral.core.serializer import Serializer

if TYPE_CHECKING:
    from pathlib import Path

    from jsliteral.config.loaders import TomlTable
    from jsliteral.config.logging import JsliteralLogger

logger: JsliteralLogger = get_logger(__name__)


@dataclass(frozen=True)
class JsliteralConfig:
    """Effective JsLiteral configuration.

    Attributes:
        named_function_policy (NamedFunctionPolicy): Serializer named-function policy.
        detect_cycles (bool): Whether the serializer fails fast on cyclic input.
        source (Path | None): The file the configuration was read from, if any.
    """

    named_function_policy: NamedFunctionPolicy = NamedFunctionPolicy.ACCEPT
    detect_cycles: bool = True
    source: Path | None = None

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, source: Path | None = None) -> JsliteralConfig:
        """Build a configuration from a JsLiteral TOML table.

        Missing keys keep their defaults. Unknown keys are logged and ignored.

        Args:
            table (TomlTable): The JsLiteral table (``jsliteral.toml`` document or
                ``[tool.jsliteral]``).
            source (Path | None): Where the table came from, for messages.

        Returns:
            JsliteralConfig: The resulting configuration.

        Raises:
            ConfigError: If a known key has an invalid type or value.
        """
        where: str = str(source) if source is not None else "<config>"
        section: Any = table.get(Toml.SECTION_SERIALIZER, {})
        if not isinstance(section, dict):
            raise ConfigError(f"{where}: [{Toml.SECTION_SERIALIZER}] must be a table")

        for unknown in sorted(set(table) - {Toml.SECTION_SERIALIZER}):
            logger.warning("%s: ignoring unknown section %r", where, unknown)
        known_keys: set[str] = {Toml.KEY_NAMED_FUNCTION_POLICY, Toml.KEY_DETECT_CYCLES}
        for unknown in sorted(set(section) - known_keys):
            logger.warning(
                "%s: ignoring unknown key %s.%s", where, Toml.SECTION_SERIALIZER, unknown
            )

        config = cls(source=source)

        raw_policy: Any = section.get(Toml.KEY_NAMED_FUNCTION_POLICY)
        if raw_policy is not None:
            try:
                policy = NamedFunctionPolicy(raw_policy)
            except ValueError:
                allowed: str = ", ".join(p.value for p in NamedFunctionPolicy)
                raise ConfigError(
                    f"{where}: invalid {Toml.SECTION_SERIALIZER}.{Toml.KEY_NAMED_FUNCTION_POLICY}"
                    f" {raw_policy!r} (allowed: {allowed})"
                ) from None
            config = replace(config, named_function_policy=policy)

        raw_cycles: Any = section.get(Toml.KEY_DETECT_CYCLES)
        if raw_cycles is not None:
            if not isinstance(raw_cycles, bool):
                raise ConfigError(
                    f"{where}: {Toml.SECTION_SERIALIZER}.{Toml.KEY_DETECT_CYCLES}"
                    f" must be a boolean, got {type(raw_cycles).__name__}"
                )
            config = replace(config, detect_cycles=raw_cycles)

        return config

    @classmethod
    def load(cls, path: Path) -> JsliteralConfig:
        """Load the configuration from ``path``.

        Raises:
            ConfigError: If the file cannot be loaded or is invalid.
        """
        return cls.from_toml_dict(load_config_table(path), source=path)

    @classmethod
    def discover(cls, start: Path) -> JsliteralConfig:
        """Load the nearest configuration at or above ``start``, or the defaults."""
        path: Path | None = discover_config_file(start)
        if path is None:
            return cls()
        return cls.load(path)

    def with_overrides(
        self,
        *,
        named_function_policy: NamedFunctionPolicy | None = None,
        detect_cycles: bool | None = None,
    ) -> JsliteralConfig:
        """Return a copy with the given (non-None) values overridden."""
        config: JsliteralConfig = self
        if named_function_policy is not None:
            config = replace(config, named_function_policy=named_function_policy)
        if detect_cycles is not None:
            config = replace(config, detect_cycles=detect_cycles)
        return config

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a ``jsliteral.toml`` table."""
        return {
            Toml.SECTION_SERIALIZER: {
                Toml.KEY_NAMED_FUNCTION_POLICY: self.named_function_policy.value,
                Toml.KEY_DETECT_CYCLES: self.detect_cycles,
            },
        }

    def build_serializer(self) -> Serializer:
        """Return a `Serializer` configured with these settings."""
        return Serializer(
            named_function_policy=self.named_function_policy,
            detect_cycles=self.detect_cycles,
        )
