"""Demo tenants and users for local development and the smoke scenario."""

from sqlalchemy.ext.asyncio import AsyncSession

from .core.logging import get_logger
from .core.models.tenant import TenantPlan
from .core.models.user import UserRole
from .core.repositories.tenant_repository import TenantRepository
from .core.repositories.user_repository import UserRepository
from .security import hash_password

logger = get_logger("seed")

DEMO_PASSWORD = "password"

DEMO_TENANTS = [
    {"name": "Acme Corp", "slug": "acme"},
    {"name": "Globex Corp", "slug": "globex"},
]


async def seed_demo_data(session: AsyncSession) -> bool:
    """Create acme/globex with an admin and a member each.

    Returns False without touching anything when ``acme`` already exists.
    """
    tenant_repo = TenantRepository(session)
    user_repo = UserRepository(session)

    if await tenant_repo.get_by_slug("acme"):
        logger.info("Seed: tenants/users already present (skipping)")
        return False

    password_hash = hash_password(DEMO_PASSWORD)
    for spec in DEMO_TENANTS:
        tenant = await tenant_repo.create_tenant({**spec, "plan": TenantPlan.FREE.value})
        for local_part, role in (("admin", UserRole.ADMIN), ("user", UserRole.MEMBER)):
            await user_repo.create_user(
                {
                    "email": f"{local_part}@{tenant.slug}.test",
                    "password_hash": password_hash,
                    "role": role.value,
                    "tenant_id": tenant.id,
                }
            )

    logger.info("Seed complete: created tenants + test users")
    return True
