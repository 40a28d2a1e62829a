"""
Basic Example - signup, login and a protected call with in-memory storage.
"""

from tokengate import AuthClient, SigningContext
from tokengate.adapters import JWTTokenAdapter, MemoryCredentialStore
from tokengate.errors import InvalidCredentialsError


def main():
    # One signing context for the whole process
    tokens = JWTTokenAdapter(SigningContext.generate())
    client = AuthClient(store=MemoryCredentialStore(), tokens=tokens, bcrypt_cost=10)

    credential = client.signup({
        "email": "user@test.io",
        "password": "longenough1",
        "confirm_password": "longenough1",
        "role": "guest",
    })
    print(f"Registered: {credential.identifier} ({credential.role.value})")

    try:
        client.login({"email": "user@test.io", "password": "wrongpass1"})
    except InvalidCredentialsError as e:
        print(f"\nWrong password rejected: {e.message}")

    result = client.login({"email": "user@test.io", "password": "longenough1"})
    print(f"\nLogin successful!")
    print(f"Token: {result.token[:50]}...")
    print(f"Expires at: {result.expires_at.isoformat()}")
    print(f"Redirect: {result.redirect}")

    identity = client.authorize(f"Bearer {result.token}")
    print(f"\nToken verified: {identity.identifier} ({identity.role.value})")


if __name__ == "__main__":
    main()
