"""Catalog of session properties accepted when opening a new session."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterator, Sequence, Tuple

from .errors import CatalogError
from .models import PropertyDefinition, ValueKind
from .validators import is_valid_application_name

LOG = logging.getLogger(__name__)

TEXT = ValueKind.TEXT
BOOLEAN = ValueKind.BOOLEAN
INTEGER = ValueKind.INTEGER
OPAQUE = ValueKind.OPAQUE


class PropertyCatalog:
    """Immutable, case-insensitive index over property definitions.

    The catalog is never mutated after construction, so instances can be shared
    between threads without locking.
    """

    __slots__ = ("_definitions", "_by_key", "_by_alias", "_required")

    def __init__(self, definitions: Sequence[PropertyDefinition]) -> None:
        self._definitions: Tuple[PropertyDefinition, ...] = tuple(definitions)
        by_key: dict[str, PropertyDefinition] = {}
        by_alias: dict[str, PropertyDefinition] = {}
        owners: dict[str, str] = {}
        for definition in self._definitions:
            for position, name in enumerate(definition.names()):
                folded = name.lower()
                owner = owners.get(folded)
                if owner is not None:
                    raise CatalogError(
                        f"Property name '{name}' of '{definition.key}' collides with '{owner}'",
                        property_key=definition.key,
                    )
                owners[folded] = definition.key
                if position == 0:
                    by_key[folded] = definition
                else:
                    by_alias[folded] = definition
        self._by_key = MappingProxyType(by_key)
        self._by_alias = MappingProxyType(by_alias)
        self._required = frozenset(d.key for d in self._definitions if d.required)
        LOG.debug(
            "Built property catalog",
            extra={"properties": len(by_key), "aliases": len(by_alias)},
        )

    @classmethod
    def default(cls) -> "PropertyCatalog":
        """Return the process-wide catalog of built-in session properties."""

        return SESSION_PROPERTIES

    def lookup(self, name: str) -> PropertyDefinition | None:
        """Resolve a key or alias, ignoring case; None when unrecognized."""

        folded = name.lower()
        definition = self._by_key.get(folded)
        if definition is None:
            definition = self._by_alias.get(folded)
        return definition

    def required_keys(self) -> frozenset[str]:
        """Canonical keys that must be supplied before a session can open."""

        return self._required

    def keys(self) -> tuple[str, ...]:
        """Canonical keys in catalog order."""

        return tuple(d.key for d in self._definitions)

    def __getitem__(self, name: str) -> PropertyDefinition:
        definition = self.lookup(name)
        if definition is None:
            raise KeyError(name)
        return definition

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[PropertyDefinition]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"PropertyCatalog({len(self._definitions)} properties)"


_DEFAULT_DEFINITIONS: Tuple[PropertyDefinition, ...] = (
    PropertyDefinition("serverURL", True, TEXT, description="Account endpoint URL"),
    PropertyDefinition("user", False, TEXT, description="Login name"),
    PropertyDefinition("password", False, TEXT, sensitive=True, description="Login password"),
    PropertyDefinition("account", True, TEXT, description="Account identifier"),
    PropertyDefinition("database", False, TEXT, ("db",), description="Default database"),
    PropertyDefinition("schema", False, TEXT, description="Default schema"),
    PropertyDefinition("passcodeInPassword", False, BOOLEAN, description="MFA passcode is appended to the password"),
    PropertyDefinition("passcode", False, TEXT, sensitive=True, description="MFA passcode"),
    PropertyDefinition("token", False, TEXT, sensitive=True, description="OAuth or session token"),
    PropertyDefinition("id_token_password", False, TEXT, sensitive=True, description="Cached ID token"),
    PropertyDefinition("role", False, TEXT, description="Default role"),
    PropertyDefinition("authenticator", False, TEXT, description="Authenticator type or IdP URL"),
    PropertyDefinition("oktausername", False, TEXT, description="Okta login name"),
    PropertyDefinition("privateKey", False, OPAQUE, sensitive=True, description="Key-pair authentication key object"),
    PropertyDefinition("warehouse", False, TEXT, description="Default virtual warehouse"),
    PropertyDefinition("loginTimeout", False, INTEGER, description="Login timeout in seconds"),
    PropertyDefinition("networkTimeout", False, INTEGER, description="Network timeout in milliseconds"),
    PropertyDefinition("injectSocketTimeout", False, INTEGER, description="Test hook: injected socket timeout"),
    PropertyDefinition("injectClientPause", False, INTEGER, description="Test hook: injected client pause"),
    PropertyDefinition("appId", False, TEXT, description="Client application id"),
    PropertyDefinition("appVersion", False, TEXT, description="Client application version"),
    PropertyDefinition("ocspFailOpen", False, BOOLEAN, description="Allow connections when OCSP is unreachable"),
    PropertyDefinition("insecureMode", False, BOOLEAN, description="Skip certificate revocation checks"),
    PropertyDefinition("queryTimeout", False, INTEGER, description="Query timeout in seconds"),
    PropertyDefinition("stringsQuotedForColumnDef", False, BOOLEAN, description="Quote strings in column definitions"),
    PropertyDefinition(
        "application",
        False,
        TEXT,
        special_validator=is_valid_application_name,
        description="Partner application name",
    ),
    PropertyDefinition("tracing", False, TEXT, description="Client log level"),
    PropertyDefinition("disableSocksProxy", False, BOOLEAN, description="Ignore SOCKS proxy settings"),
    # connection proxy
    PropertyDefinition("useProxy", False, BOOLEAN, description="Route traffic through an HTTP proxy"),
    PropertyDefinition("proxyHost", False, TEXT, description="Proxy host"),
    PropertyDefinition("proxyPort", False, TEXT, description="Proxy port"),
    PropertyDefinition("proxyUser", False, TEXT, description="Proxy user"),
    PropertyDefinition("proxyCrtFile", False, TEXT, description="Proxy CA certificate file"),
    PropertyDefinition("proxyPassword", False, TEXT, sensitive=True, description="Proxy password"),
    PropertyDefinition("nonProxyHosts", False, TEXT, description="Hosts that bypass the proxy"),
    PropertyDefinition("proxyProtocol", False, TEXT, description="Proxy protocol"),
    PropertyDefinition("validateDefaultParameters", False, BOOLEAN, description="Verify database, schema and warehouse exist"),
    PropertyDefinition("inject_wait_in_put", False, INTEGER, description="Test hook: injected wait during PUT"),
    PropertyDefinition("private_key_file", False, TEXT, description="Path to a private key file"),
    PropertyDefinition("private_key_file_pwd", False, TEXT, sensitive=True, description="Private key file passphrase"),
    PropertyDefinition("snowflakeClientInfo", False, TEXT, description="Client info JSON"),
    PropertyDefinition("allowUnderscoresInHost", False, BOOLEAN, description="Keep underscores in host names"),
    # suffix for the user agent header of outgoing HTTP requests
    PropertyDefinition("user_agent_suffix", False, TEXT, description="User agent suffix"),
    PropertyDefinition("additional_http_headers", False, TEXT, description="Extra HTTP headers"),
    PropertyDefinition(
        "CLIENT_OUT_OF_BAND_TELEMETRY_ENABLED",
        False,
        BOOLEAN,
        description="Send out-of-band telemetry",
    ),
    PropertyDefinition("gzipDisabled", False, BOOLEAN, description="Disable request compression"),
    PropertyDefinition("disableQueryContextCache", False, BOOLEAN, description="Disable the query context cache"),
    PropertyDefinition("htapOOBTelemetryEnabled", False, BOOLEAN, description="Send HTAP out-of-band telemetry"),
    PropertyDefinition("client_config_file", False, TEXT, description="Client configuration file path"),
    PropertyDefinition("maxHttpRetries", False, INTEGER, description="HTTP retry limit"),
    PropertyDefinition("enablePutGet", False, BOOLEAN, description="Allow PUT and GET commands"),
    PropertyDefinition("disableConsoleLogin", False, BOOLEAN, description="Disable console login for SSO"),
    PropertyDefinition("putGetMaxRetries", False, INTEGER, description="PUT/GET retry limit"),
    PropertyDefinition("retryTimeout", False, INTEGER, description="Overall retry timeout in seconds"),
    PropertyDefinition("ENABLE_DIAGNOSTICS", False, BOOLEAN, description="Run connectivity diagnostics"),
    PropertyDefinition("DIAGNOSTICS_ALLOWLIST_FILE", False, TEXT, description="Diagnostics allowlist file"),
    PropertyDefinition("enablePatternSearch", False, BOOLEAN, description="Allow wildcards in metadata searches"),
    PropertyDefinition("disableGcsDefaultCredentials", False, BOOLEAN, description="Ignore GCS default credentials"),
    PropertyDefinition("JDBC_ARROW_TREAT_DECIMAL_AS_INT", False, BOOLEAN, description="Read scale-0 decimals as integers"),
    PropertyDefinition("disableSamlURLCheck", False, BOOLEAN, description="Skip the SAML destination URL check"),
)

SESSION_PROPERTIES = PropertyCatalog(_DEFAULT_DEFINITIONS)


def lookup(name: str) -> PropertyDefinition | None:
    """Resolve ``name`` against the built-in catalog."""

    return SESSION_PROPERTIES.lookup(name)


def required_keys() -> frozenset[str]:
    """Required keys of the built-in catalog."""

    return SESSION_PROPERTIES.required_keys()


__all__ = ["PropertyCatalog", "SESSION_PROPERTIES", "lookup", "required_keys"]
