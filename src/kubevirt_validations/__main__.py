"""Command line entry point for checking single values.

Usage:
    python -m kubevirt_validations <kind> <value> [options]

Arguments:
    kind: Validator to run (dns1123, url, vmware-url, container, bmc-url,
          mac, positive-number, name)
    value: Value to validate

Values starting with "-" have to follow "--":
    python -m kubevirt_validations dns1123 -- -abc
"""

import argparse
import logging
import sys
from collections.abc import Callable

from kubevirt_validations.errors import ValidationCollector
from kubevirt_validations.loader import load_entities
from kubevirt_validations.models import ValidationResult, VmLikeEntity
from kubevirt_validations.validations import (
    validate_bmc_url,
    validate_container,
    validate_dns1123_subdomain_value,
    validate_mac,
    validate_positive_number,
    validate_template_name,
    validate_url,
    validate_vm_name,
    validate_vmware_url,
)

logger = logging.getLogger(__name__)

# Exit codes
EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_INPUT_ERROR = 2

DEFAULT_NAMESPACE = "default"

VALIDATORS: dict[str, Callable[[str], ValidationResult | None]] = {
    "dns1123": validate_dns1123_subdomain_value,
    "url": validate_url,
    "vmware-url": validate_vmware_url,
    "container": validate_container,
    "bmc-url": validate_bmc_url,
    "mac": validate_mac,
    "positive-number": validate_positive_number,
}

NAME_KIND = "name"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application.

    Args:
        verbose: If True, use DEBUG level. Otherwise, use WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run_validation(
    kind: str,
    value: str,
    namespace: str = DEFAULT_NAMESPACE,
    existing_path: str | None = None,
    template: bool = False,
) -> int:
    """Validate a single value and print the outcome.

    Args:
        kind: Validator name (see VALIDATORS, plus "name")
        value: Value to validate
        namespace: Namespace for name uniqueness checks
        existing_path: JSON/YAML file with existing entities for name checks
        template: Check against templates instead of virtual machines

    Returns:
        Exit code (0 when valid, 1 when invalid, 2 on input errors).
    """
    collector = ValidationCollector()

    if kind == NAME_KIND:
        entities: list[VmLikeEntity] = []
        if existing_path:
            try:
                entities = load_entities(existing_path, error_collector=collector)
            except (FileNotFoundError, ValueError) as e:
                logger.error("Failed to load existing entities: %s", e)
                return EXIT_INPUT_ERROR
        name_validator = validate_template_name if template else validate_vm_name
        result = name_validator(value, namespace, entities)
    elif kind in VALIDATORS:
        result = VALIDATORS[kind](value)
    else:
        logger.error("Unknown validator: %s", kind)
        return EXIT_INPUT_ERROR

    if collector.has_warnings():
        collector.log_summary()

    if result is None:
        print("valid")
        return EXIT_VALID

    print(result.message)
    return EXIT_INVALID


def main() -> int:
    """Main entry point for the validator CLI.

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Validate VM form field values",
        prog="python -m kubevirt_validations",
        epilog='Use "--" before values starting with "-", e.g. "dns1123 -- -abc".',
    )
    parser.add_argument(
        "kind",
        choices=[*VALIDATORS, NAME_KIND],
        help="Validator to run",
    )
    parser.add_argument("value", help="Value to validate (prefix with -- if it starts with -)")
    parser.add_argument(
        "--namespace",
        default=DEFAULT_NAMESPACE,
        help=f"Namespace for name uniqueness checks (default: {DEFAULT_NAMESPACE})",
    )
    parser.add_argument(
        "--existing",
        default=None,
        help="JSON or YAML file with existing entities for name uniqueness checks",
    )
    parser.add_argument(
        "--template",
        action="store_true",
        help="Check the name against VM templates instead of virtual machines",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging",
    )

    args = parser.parse_args()

    setup_logging(verbose=args.verbose)

    return run_validation(
        kind=args.kind,
        value=args.value,
        namespace=args.namespace,
        existing_path=args.existing,
        template=args.template,
    )


if __name__ == "__main__":
    sys.exit(main())
