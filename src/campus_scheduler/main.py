"""Administrative command line.

Commands run directly against the database with elevated privilege, the
way migrations and the signup trigger do: row-level policies do not apply.

    campus-scheduler init-db
    campus-scheduler seed
    campus-scheduler set-role someone@example.edu admin
    campus-scheduler delete-identity someone@example.edu
    campus-scheduler serve
"""

import argparse
import logging
import sys
from typing import List, Optional

from campus_scheduler.config import API_HOST, API_PORT
from campus_scheduler.core.database import SessionLocal, init_db
from campus_scheduler.core.exceptions import SchedulerError
from campus_scheduler.core.logging_config import setup_logging
from campus_scheduler.models import ProfileModel, UserRole
from campus_scheduler.utils import seed
from campus_scheduler.utils.identity_manager import IdentityManager
from campus_scheduler.utils.profile_manager import ProfileManager

logger = logging.getLogger(__name__)


def cmd_init_db(args: argparse.Namespace) -> int:
    init_db()
    return 0


def cmd_seed(args: argparse.Namespace) -> int:
    init_db()
    db = SessionLocal()
    try:
        inserted = seed.run(db)
    finally:
        db.close()
    print("Seed data inserted." if inserted else "Database already seeded.")
    return 0


def cmd_set_role(args: argparse.Namespace) -> int:
    """Assign a role to the profile of the identity with the given email."""
    db = SessionLocal()
    try:
        identity = IdentityManager(db).get_identity_by_email(args.email)
        if identity is None:
            print(f"No identity with email {args.email}", file=sys.stderr)
            return 1
        profile = db.query(ProfileModel).filter(ProfileModel.user_id == identity.id).first()
        if profile is None:
            print(f"Identity {args.email} has no profile", file=sys.stderr)
            return 1
        ProfileManager(db).assign_role(profile.id, UserRole(args.role))
    finally:
        db.close()
    print(f"{args.email} is now {args.role}")
    return 0


def cmd_delete_identity(args: argparse.Namespace) -> int:
    db = SessionLocal()
    try:
        manager = IdentityManager(db)
        identity = manager.get_identity_by_email(args.email)
        if identity is None:
            print(f"No identity with email {args.email}", file=sys.stderr)
            return 1
        manager.delete_identity(identity.id)
    finally:
        db.close()
    print(f"Deleted {args.email} and everything that referenced it")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("campus_scheduler.app:app", host=args.host, port=args.port, reload=args.reload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="campus-scheduler", description="Campus scheduler administration"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("init-db", help="create all tables").set_defaults(func=cmd_init_db)
    sub.add_parser("seed", help="insert demo classrooms and courses").set_defaults(func=cmd_seed)

    set_role = sub.add_parser("set-role", help="assign a role to a user's profile")
    set_role.add_argument("email")
    set_role.add_argument("role", choices=[role.value for role in UserRole])
    set_role.set_defaults(func=cmd_set_role)

    delete = sub.add_parser("delete-identity", help="delete a user and cascade")
    delete.add_argument("email")
    delete.set_defaults(func=cmd_delete_identity)

    serve = sub.add_parser("serve", help="run the API server")
    serve.add_argument("--host", default=API_HOST)
    serve.add_argument("--port", type=int, default=API_PORT)
    serve.add_argument("--reload", action="store_true")
    serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except SchedulerError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
