import os
import sys

from loguru import logger

from authz.errors import AuthorizationCheckError, InvalidConfigError
from authz.factory import authorizer_from_file


def main(argv=None) -> int:
    argv = sys.argv if argv is None else argv
    if len(argv) < 4:
        logger.error("Usage: python main.py <config.json> <role> <resource>")
        return 2

    config_path, role, resource = argv[1], argv[2], argv[3]

    if not os.path.exists(config_path):
        logger.error(f"Config file {config_path} does not exist")
        return 2

    try:
        authorizer = authorizer_from_file(config_path)
    except InvalidConfigError as e:
        logger.error(f"Invalid RBAC configuration: {e}")
        return 2

    try:
        granted = authorizer.is_granted(role, resource)
    except AuthorizationCheckError as e:
        logger.error(f"{e}: {e.__cause__}")
        return 2

    if granted:
        logger.success(f"GRANTED: role '{role}' may access '{resource}'")
        return 0

    logger.warning(f"DENIED: role '{role}' may not access '{resource}'")
    return 1


if __name__ == "__main__":
    sys.exit(main())
