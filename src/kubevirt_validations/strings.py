"""User-facing validation messages."""

EMPTY_ERROR = "Value is required"
URL_INVALID_ERROR = "URL has to consist of valid domain and valid path."
START_WHITESPACE_ERROR = "Can not start with whitespace character"
END_WHITESPACE_ERROR = "Can not end with whitespace character"

# DNS-1123 messages are composed, so they carry no trailing period
DNS1123_START_ERROR = "has to start with alphanumeric character"
DNS1123_END_ERROR = "has to end with alphanumeric character"
DNS1123_TOO_LONG_ERROR = "cannot contain more than 253 characters"
DNS1123_UPPERCASE_ERROR = "Uppercase characters are not allowed"
DNS1123_UNDERSCORE_ERROR = "Underscore characters are not allowed"

CONTAINER_INVALID_ERROR = "Container image has to be a valid image reference."

# Listed in the protocol error, in the order shown to the user
BMC_PROTOCOLS = (
    "ipmi",
    "idrac",
    "idrac+http",
    "idrac+https",
    "idrac-redfish",
    "idrac-virtualmedia",
    "irmc",
    "redfish",
    "redfish+http",
    "redfish+https",
    "redfish-virtualmedia",
    "ilo4",
    "ilo5-redfish",
    "ilo5-virtualmedia",
    "ibmc",
    "libvirt",
)
BMC_PROTOCOL_ERROR = f"Invalid protocol. Valid protocols are: {', '.join(BMC_PROTOCOLS)}"
BMC_PORT_ERROR = "Invalid port, valid port is a number"

MAC_INVALID_ERROR = "Invalid MAC address format"
POSITIVE_NUMBER_ERROR = "Value has to be a positive number"

VIRTUAL_MACHINE_EXISTS = "Name is already used by another virtual machine in this namespace"
VIRTUAL_MACHINE_TEMPLATE_EXISTS = "Name is already used by another template in this namespace"
