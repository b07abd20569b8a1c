"""Form field validators for VM-like entities.

Every validator returns ``None`` for valid input and a ``ValidationResult``
describing the first violated rule otherwise. Validators never raise on
empty or ``None`` input.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from pydantic import ValidationError

from kubevirt_validations.models import ValidationResult, ValidationType, VmLikeEntity
from kubevirt_validations.strings import (
    BMC_PORT_ERROR,
    BMC_PROTOCOL_ERROR,
    BMC_PROTOCOLS,
    CONTAINER_INVALID_ERROR,
    DNS1123_END_ERROR,
    DNS1123_START_ERROR,
    DNS1123_TOO_LONG_ERROR,
    DNS1123_UNDERSCORE_ERROR,
    DNS1123_UPPERCASE_ERROR,
    EMPTY_ERROR,
    END_WHITESPACE_ERROR,
    MAC_INVALID_ERROR,
    POSITIVE_NUMBER_ERROR,
    START_WHITESPACE_ERROR,
    URL_INVALID_ERROR,
    VIRTUAL_MACHINE_EXISTS,
    VIRTUAL_MACHINE_TEMPLATE_EXISTS,
)

logger = logging.getLogger(__name__)

DNS1123_SUBDOMAIN_MAX_LENGTH = 253

# Accepted group counts per MAC notation (EUI-48, EUI-64, InfiniBand)
MAC_OCTET_GROUP_COUNTS = (6, 8, 20)
MAC_QUARTET_GROUP_COUNTS = (3, 4, 10)

MAX_PORT = 65535

PROTOCOL_DELIMITER = "://"

_POSITIVE_INTEGER = re.compile(r"[1-9][0-9]*")
_ALPHANUMERIC = re.compile(r"[a-zA-Z0-9]")
_DNS1123_CHAR = re.compile(r"[a-z0-9-]")
_IPV4_LIKE = re.compile(r"[0-9]+(\.[0-9]+){3}")

# RFC 1123 hostname: dot separated labels of 1-63 chars, alphanumeric at both ends
_HOSTNAME = re.compile(
    r"[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

_URL = re.compile(
    r"(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*)://"
    r"(?:[^\s:@/]+(?::[^\s@/]*)?@)?"
    r"(?P<host>\[[0-9a-fA-F:.]+\]|[^\s:/?#\[\]@]+)"
    r"(?::(?P<port>[0-9]+))?"
    r"(?P<rest>[/?#]\S*)?"
)

# Image reference grammar used by container registries:
# [registry[:port]/]component[/component...][:tag][@digest]
_PATH_COMPONENT = r"[a-z0-9]+(?:(?:[._]|__|-+)[a-z0-9]+)*"
_DOMAIN_COMPONENT = r"(?:[a-zA-Z0-9]|[a-zA-Z0-9][a-zA-Z0-9-]*[a-zA-Z0-9])"
_CONTAINER_IMAGE = re.compile(
    rf"(?:{_DOMAIN_COMPONENT}(?:\.{_DOMAIN_COMPONENT})*(?::[0-9]+)?/)?"
    rf"{_PATH_COMPONENT}(?:/{_PATH_COMPONENT})*"
    r"(?::[\w][\w.-]{0,127})?"
    r"(?:@[A-Za-z][A-Za-z0-9]*(?:[-_+.][A-Za-z][A-Za-z0-9]*)*:[0-9a-fA-F]{32,})?",
    re.ASCII,
)


def _mac_pattern(group: str, separator: str, counts: tuple[int, ...]) -> re.Pattern[str]:
    alternatives = "|".join(
        f"{group}(?:{re.escape(separator)}{group}){{{count - 1}}}" for count in counts
    )
    return re.compile(f"(?:{alternatives})")


_MAC_PATTERNS = (
    _mac_pattern("[0-9A-Fa-f]{2}", ":", MAC_OCTET_GROUP_COUNTS),
    _mac_pattern("[0-9A-Fa-f]{2}", "-", MAC_OCTET_GROUP_COUNTS),
    _mac_pattern("[0-9A-Fa-f]{4}", ".", MAC_QUARTET_GROUP_COUNTS),
)


def get_validation_object(
    message: str, type: ValidationType = ValidationType.ERROR
) -> ValidationResult:
    """Wrap a message into the uniform validation result shape."""
    return ValidationResult(message=message, type=type)


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _validate_whitespace(value: str) -> ValidationResult | None:
    if value[0].isspace():
        return get_validation_object(START_WHITESPACE_ERROR)
    if value[-1].isspace():
        return get_validation_object(END_WHITESPACE_ERROR)
    return None


def _is_valid_port(port: str) -> bool:
    return is_positive_number(port) and int(port) <= MAX_PORT


def _is_valid_host(host: str) -> bool:
    """Check for an IPv4 address, an IPv6 address or an RFC 1123 hostname."""
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
        if ":" not in host:
            return False
    if ":" in host:
        try:
            IPv6Address(host)
        except ValueError:
            return False
        return True
    if _IPV4_LIKE.fullmatch(host):
        try:
            IPv4Address(host)
        except ValueError:
            return False
        return True
    return len(host) <= DNS1123_SUBDOMAIN_MAX_LENGTH and _HOSTNAME.fullmatch(host) is not None


def _split_host_port(authority: str) -> tuple[str, str | None]:
    """Split ``host[:port]`` keeping bracketed and bare IPv6 addresses whole."""
    if authority.startswith("["):
        end = authority.find("]")
        if end != -1 and authority[end + 1 : end + 2] == ":":
            return authority[: end + 1], authority[end + 2 :]
        return authority, None
    if authority.count(":") == 1:
        host, port = authority.split(":")
        return host, port
    return authority, None


def is_positive_number(value: Any = None) -> bool:
    """Check that ``value`` represents a strictly positive integer.

    Signs, decimal points and digit group separators are rejected.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    return isinstance(value, str) and _POSITIVE_INTEGER.fullmatch(value) is not None


def validate_positive_number(value: Any) -> ValidationResult | None:
    """Result-returning counterpart of ``is_positive_number``."""
    if _is_empty(value):
        return get_validation_object(EMPTY_ERROR)
    if not is_positive_number(value):
        return get_validation_object(POSITIVE_NUMBER_ERROR)
    return None


def _not_allowed(char: str) -> str:
    if "A" <= char <= "Z":
        return DNS1123_UPPERCASE_ERROR
    if char == "_":
        return DNS1123_UNDERSCORE_ERROR
    return f"'{char}' characters are not allowed"


def _edge_error(prefix: str, char: str) -> ValidationResult:
    # '-' is fine inside the value, so only the edge rule is reported for it
    if char == "-":
        return get_validation_object(f"{prefix}.")
    return get_validation_object(f"{prefix}. {_not_allowed(char)}.")


def validate_dns1123_subdomain_value(value: str | None) -> ValidationResult | None:
    """Validate a Kubernetes object name.

    Rules are checked in order and the first violation is returned:
    non-empty, at most 253 characters, alphanumeric first and last
    character, and only lowercase alphanumerics or ``-`` in between.
    """
    if _is_empty(value):
        return get_validation_object(f"{EMPTY_ERROR}.")
    if len(value) > DNS1123_SUBDOMAIN_MAX_LENGTH:
        return get_validation_object(f"{DNS1123_TOO_LONG_ERROR}.")

    if not _ALPHANUMERIC.fullmatch(value[0]):
        return _edge_error(DNS1123_START_ERROR, value[0])
    if not _ALPHANUMERIC.fullmatch(value[-1]):
        return _edge_error(DNS1123_END_ERROR, value[-1])

    for char in value:
        if not _DNS1123_CHAR.fullmatch(char):
            return get_validation_object(f"{_not_allowed(char)}.")

    return None


def validate_url(value: str | None) -> ValidationResult | None:
    """Validate an absolute URL such as an ISO or disk image location."""
    if _is_empty(value):
        return get_validation_object(EMPTY_ERROR)

    whitespace = _validate_whitespace(value)
    if whitespace:
        return whitespace

    match = _URL.fullmatch(value)
    if not match or not _is_valid_host(match.group("host")):
        return get_validation_object(URL_INVALID_ERROR)
    port = match.group("port")
    if port is not None and not _is_valid_port(port):
        return get_validation_object(URL_INVALID_ERROR)

    return None


def validate_vmware_url(value: str | None) -> ValidationResult | None:
    """Validate a vCenter address: a bare host[:port] or an http(s) URL."""
    if _is_empty(value):
        return get_validation_object(EMPTY_ERROR)

    whitespace = _validate_whitespace(value)
    if whitespace:
        return whitespace

    if PROTOCOL_DELIMITER in value:
        scheme = value.split(PROTOCOL_DELIMITER, 1)[0].lower()
        if scheme not in ("http", "https"):
            return get_validation_object(URL_INVALID_ERROR)
        return validate_url(value)

    host, port = _split_host_port(value)
    if port is not None and not _is_valid_port(port):
        return get_validation_object(URL_INVALID_ERROR)
    if not _is_valid_host(host):
        return get_validation_object(URL_INVALID_ERROR)
    return None


def validate_container(value: str | None) -> ValidationResult | None:
    """Validate a container image reference for a container disk."""
    if _is_empty(value):
        return get_validation_object(EMPTY_ERROR)

    whitespace = _validate_whitespace(value)
    if whitespace:
        return whitespace

    if not _CONTAINER_IMAGE.fullmatch(value):
        return get_validation_object(CONTAINER_INVALID_ERROR)
    return None


def validate_bmc_url(value: str | None) -> ValidationResult | None:
    """Validate a BMC address such as ``ipmi://10.0.0.5:623``.

    The protocol prefix and the port are optional. Redfish style addresses
    may carry a system path after the host.
    """
    if _is_empty(value):
        return get_validation_object(EMPTY_ERROR)

    whitespace = _validate_whitespace(value)
    if whitespace:
        return whitespace

    address = value
    if PROTOCOL_DELIMITER in value:
        protocol, address = value.split(PROTOCOL_DELIMITER, 1)
        if protocol not in BMC_PROTOCOLS:
            logger.debug("Rejected BMC protocol %r", protocol)
            return get_validation_object(BMC_PROTOCOL_ERROR)

    authority = address.split("/", 1)[0]
    host, port = _split_host_port(authority)
    if port is not None and not _is_valid_port(port):
        return get_validation_object(BMC_PORT_ERROR)
    if not _is_valid_host(host):
        return get_validation_object(URL_INVALID_ERROR)

    return None


def is_valid_mac(value: str | None) -> bool:
    """Check MAC address syntax.

    Accepted notations are colon or dash separated octets (6, 8 or 20
    groups) and period separated quartets (3, 4 or 10 groups). Separators
    may not be mixed.
    """
    if not value or not isinstance(value, str):
        return False
    return any(pattern.fullmatch(value) for pattern in _MAC_PATTERNS)


def validate_mac(value: str | None, allow_empty: bool = False) -> ValidationResult | None:
    """Result-returning counterpart of ``is_valid_mac``.

    Args:
        value: MAC address to validate
        allow_empty: Treat an empty value as valid (for optional NIC fields)
    """
    if _is_empty(value):
        return None if allow_empty else get_validation_object(EMPTY_ERROR)
    if not is_valid_mac(value):
        return get_validation_object(MAC_INVALID_ERROR)
    return None


def _iter_entities(entities: Iterable[VmLikeEntity | Mapping[str, Any]]) -> Iterable[VmLikeEntity]:
    for item in entities:
        if isinstance(item, VmLikeEntity):
            yield item
            continue
        try:
            yield VmLikeEntity.model_validate(item)
        except ValidationError as e:
            logger.warning("Ignoring malformed entity in name check: %s", e)


def validate_vm_like_entity_name(
    value: str | None,
    namespace: str | None,
    entities: Iterable[VmLikeEntity | Mapping[str, Any]] | None,
    exists_error_message: str = VIRTUAL_MACHINE_EXISTS,
) -> ValidationResult | None:
    """Validate the name of a new VM-like entity.

    The name has to be a valid DNS-1123 value and must not be used by any
    of ``entities`` in ``namespace``.

    Args:
        value: Proposed name
        namespace: Namespace the entity will be created in
        entities: Existing entities, as models or raw Kubernetes objects
        exists_error_message: Message returned for a duplicate name

    Returns:
        None when the name is usable, otherwise the first violation
    """
    result = validate_dns1123_subdomain_value(value)
    if result is not None:
        return result

    for entity in _iter_entities(entities or ()):
        if entity.is_named(value, namespace):
            logger.debug("Name %r already taken in namespace %r", value, namespace)
            return get_validation_object(exists_error_message)

    return None


def validate_vm_name(
    value: str | None,
    namespace: str | None,
    virtual_machines: Iterable[VmLikeEntity | Mapping[str, Any]] | None,
) -> ValidationResult | None:
    """Validate the name of a new virtual machine."""
    return validate_vm_like_entity_name(value, namespace, virtual_machines)


def validate_template_name(
    value: str | None,
    namespace: str | None,
    templates: Iterable[VmLikeEntity | Mapping[str, Any]] | None,
) -> ValidationResult | None:
    """Validate the name of a new VM template."""
    return validate_vm_like_entity_name(
        value, namespace, templates, exists_error_message=VIRTUAL_MACHINE_TEMPLATE_EXISTS
    )
