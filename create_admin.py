import asyncio
import sys

from app.core.config import Settings
from app.core.enums import UserRole
from app.core.errors import AppError
from app.db.session import build_engine, build_session_factory, init_db
from app.services.auth import create_user


async def create_admin_user(settings: Settings, email: str, password: str, name: str) -> bool:
    engine = build_engine(settings.DATABASE_URL)
    try:
        await init_db(engine)
        async with build_session_factory(engine)() as session:
            user = await create_user(session, email, password, name, UserRole.ADMIN)
    except AppError as e:
        print(f"Error creating admin user: {e.message}")
        return False
    finally:
        await engine.dispose()

    print(f"Admin user '{email}' created successfully")
    print(f"User ID: {user.id}")
    print("Role: admin")
    return True


def main():
    if len(sys.argv) < 3:
        print("Usage: python create_admin.py <email> <password> [name]")
        sys.exit(1)

    email = sys.argv[1]
    password = sys.argv[2]
    name = sys.argv[3] if len(sys.argv) > 3 else "Admin User"

    if not email or not password:
        print("Error: email and password cannot be empty")
        sys.exit(1)

    success = asyncio.run(create_admin_user(Settings(), email, password, name))
    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
