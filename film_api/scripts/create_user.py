"""
Create a user (e.g. first admin) without going through the HTTP API. Run from project root:
  python -m film_api.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m film_api.scripts.create_user admin your-secure-password admin
"""
import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from dotenv import load_dotenv
from sqlalchemy.orm import Session

from film_api.core.config import get_settings
from film_api.core.database import build_engine, build_session_factory
from film_api.core.logging_config import configure_logging
from film_api.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, USERNAME_MAX_LEN, hash_password
from film_api.repositories import DuplicateUsernameError, UserRepository
from film_api.schemas.auth import Role

logger = logging.getLogger(__name__)


def _default_session_factory() -> Session:
    settings = get_settings()
    return build_session_factory(build_engine(settings))()


def main(
    argv: Sequence[str] | None = None,
    session_factory: Callable[[], Session] | None = None,
) -> int:
    parser = argparse.ArgumentParser(description="Create a film-api user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars, stored lowercase)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=Role.USER.value, choices=[r.value for r in Role])
    args = parser.parse_args(argv)

    username = args.username.strip().lower()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = (session_factory or _default_session_factory)()
    try:
        user = UserRepository(db).create(username, hash_password(args.password), Role(args.role))
    except DuplicateUsernameError:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user", extra={"user_id": user.id, "role": user.role.value})
    print(f"Created user '{user.username}' with role '{user.role.value}'.")
    return 0


if __name__ == "__main__":
    load_dotenv()
    configure_logging()
    sys.exit(main())
