"""
Map a saved identity-service payload to user records and print them as JSON. Run from project root:

  python -m usermap.cli payload.json          # object -> one user, array -> many users
  python -m usermap.cli self.json --self      # object -> the authenticated user
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from usermap.core.config import get_settings
from usermap.services.assets import AssetService
from usermap.services.user_mapper import UserMapper

logger = logging.getLogger("usermap.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Map identity-service user payloads to user records.")
    parser.add_argument("payload", help="Path to a JSON file holding a user object or an array of users")
    parser.add_argument("--self", dest="is_self", action="store_true", help="Map the object as the authenticated user")
    args = parser.parse_args(argv)

    load_dotenv()
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )

    try:
        with open(args.payload, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read payload: {e}", file=sys.stderr)
        return 1

    mapper = UserMapper(AssetService.from_settings(settings))
    try:
        if isinstance(data, list):
            if args.is_self:
                print("--self expects a single user object, got an array.", file=sys.stderr)
                return 1
            users = mapper.map_users_from_object(data)
            output = [u.model_dump(mode="json") for u in users]
        elif isinstance(data, dict) or data is None:
            user = mapper.map_self_user_from_object(data) if args.is_self else mapper.map_user_from_object(data)
            output = user.model_dump(mode="json") if user is not None else None
        else:
            print("Payload must be a JSON object or array.", file=sys.stderr)
            return 1
    except ValidationError as e:
        logger.error("Invalid user payload: %s", e)
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
