"""Create an admin account, or promote an existing user to admin.

Usage:
  python scripts/create_admin.py admin@example.com "Jane Organizer" --password s3cret-pass
  python scripts/create_admin.py existing@example.com --promote
"""

import argparse
import getpass
import os
import sys

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from conference import create_app
from conference.extensions import db
from conference.models.user import User


def create_or_promote(email, name=None, password=None, promote=False):
    email = email.lower()
    user = User.query.filter_by(email=email).first()
    if user:
        if not promote:
            raise SystemExit(f"{email} already exists; pass --promote to make it an admin")
        user.role = "admin"
    else:
        if promote:
            raise SystemExit(f"{email} not found")
        if not password:
            raise SystemExit("a password is required for a new account")
        user = User(email=email, name=name or email.split("@")[0], role="admin")
        user.set_password(password)
        db.session.add(user)
    db.session.commit()
    return user


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("email")
    parser.add_argument("name", nargs="?")
    parser.add_argument("--password")
    parser.add_argument("--promote", action="store_true")
    args = parser.parse_args(argv)

    password = args.password
    if not args.promote and not password:
        password = getpass.getpass("Password: ")

    app = create_app()
    with app.app_context():
        user = create_or_promote(args.email, args.name, password, args.promote)
        print(f"admin ready: id={user.id} email={user.email}")


if __name__ == '__main__':
    main()
