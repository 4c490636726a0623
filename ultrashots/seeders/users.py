"""Seeds the super admin and the team accounts."""

from ultrashots.core.database.base import utc_now
from ultrashots.core.database.entities import User
from ultrashots.core.database.repositories import UserRepository
from ultrashots.core.security import hash_password

from .base import Seeder
from .data import SUPER_ADMIN_ROLE, USERS


class UserSeeder(Seeder):
    """Creates users and assigns their roles.

    Roles must already exist, so this seeder runs after
    ``RoleAndPermissionSeeder``.
    """

    async def run(self) -> None:
        seed = self.settings.seed
        accounts = [
            {"name": "Super Admin", "email": seed.admin_email, "roles": (SUPER_ADMIN_ROLE,), "password": seed.admin_password}
        ]
        accounts += [{**user, "password": seed.default_password} for user in USERS]

        users = UserRepository(self.session)
        for account in accounts:
            user = await users.get_by_email(account["email"])
            if user is None:
                user = await users.create(
                    User(
                        email=account["email"].lower(),
                        name=account["name"],
                        password_hash=hash_password(account["password"]),
                        email_verified_at=utc_now(),
                    )
                )
            await users.assign_roles(user, account["roles"])

        self.console.info(f"  {len(accounts)} users")
