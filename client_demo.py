"""Walk a running User Management API through a full CRUD cycle.

Creates a user, fetches it, lists all users, updates it and deletes
it, printing the outcome of each step.  The target URL comes from
``USER_API_BASE_URL`` or the ``--base-url`` option.

Usage:
    python client_demo.py [--base-url http://localhost:8000/api/users]
"""
import argparse
import logging
import sys

from user_management_api.client import ClientConfig, UserRestClient


def fail(step: str, error: dict) -> int:
    print(f"{step} failed ({error.get('status_code')}): {error.get('message')}")
    return 1


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--base-url", help="URL of the users collection")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    config = ClientConfig.from_settings()
    if args.base_url:
        config.base_url = args.base_url
    if args.timeout:
        config.timeout = args.timeout
    client = UserRestClient(config)

    new_user = {
        "firstName": "Emma",
        "lastName": "Watson",
        "email": "emma.watson@example.com",
        "dateOfBirth": "1990-04-15",
    }
    created, error = client.create_user(new_user)
    if error:
        return fail("Create", error)
    print(f"Created User: {created['id']} - {created['firstName']} {created['lastName']}")

    fetched, error = client.get_user_by_id(created["id"])
    if error:
        return fail("Fetch", error)
    print(f"Fetched User: {fetched['id']} - {fetched['firstName']} {fetched['lastName']}")

    users, error = client.get_all_users()
    if error:
        return fail("List", error)
    print(f"All Users: {len(users)}")

    created["lastName"] = "Granger"
    created["email"] = "emma.granger@example.com"
    updated, error = client.update_user(created["id"], created)
    if error:
        return fail("Update", error)
    print(f"Updated User: {updated['id']} - {updated['firstName']} {updated['lastName']}")

    _, error = client.delete_user(created["id"])
    if error:
        return fail("Delete", error)
    print("User deleted successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
