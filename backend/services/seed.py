"""
Initial data: the first admin account and, outside production, sample articles.
"""

import logging

from core.domain.article import Article
from core.exceptions import ValidationError
from core.interfaces.repositories import AdminUserRepository, ArticleRepository
from infrastructure.config.settings import Settings
from services.auth_service import AuthService

logger = logging.getLogger(__name__)

SAMPLE_ARTICLES = [
    {
        "title": "Welcome to Nature Console",
        "content": (
            "This is your first article in Nature Console. "
            "You can edit or delete this article from the admin panel."
        ),
        "published": True,
    },
    {
        "title": "Getting Started Guide",
        "content": "Learn how to use Nature Console to manage your blog content effectively.",
        "published": False,
    },
    {
        "title": "Nature Photography Tips",
        "content": "Discover the best techniques for capturing stunning nature photographs.",
        "published": True,
    },
]


def should_run_seeds(settings: Settings) -> bool:
    """An explicit RUN_SEEDS wins; otherwise seed in development only."""
    if settings.run_seeds is not None:
        return settings.run_seeds
    return settings.is_development


def is_production_seed_mode(settings: Settings) -> bool:
    return settings.is_production or settings.seed_mode.lower() in ("production", "prod")


async def seed_admin_users(
    admin_users: AdminUserRepository,
    auth_service: AuthService,
    settings: Settings,
) -> bool:
    """Create the configured admin unless one already exists. Returns True if created."""
    if await admin_users.count() > 0:
        logger.info("Admin users already seeded")
        return False

    if not settings.admin_email:
        raise ValidationError("admin email is not configured")
    if not settings.admin_password:
        raise ValidationError("admin password is not configured")

    user = await auth_service.create_admin(
        email=settings.admin_email,
        password=settings.admin_password,
        name=settings.admin_name,
    )
    logger.info("Admin user created: %s", user.email)
    return True


async def seed_articles(articles: ArticleRepository, author: str) -> int:
    """Insert the sample articles into an empty table. Returns how many were created."""
    if await articles.count() > 0:
        logger.info("Articles already seeded")
        return 0

    for sample in SAMPLE_ARTICLES:
        article = await articles.create(Article(author=author, **sample))
        logger.info("Sample article created: %s", article.title)
    return len(SAMPLE_ARTICLES)


async def run_seeds(
    admin_users: AdminUserRepository,
    articles: ArticleRepository,
    auth_service: AuthService,
    settings: Settings,
) -> None:
    """Seed admin users and sample articles."""
    logger.info("Running development seeds (admin users + sample data)...")
    await seed_admin_users(admin_users, auth_service, settings)
    await seed_articles(articles, author=settings.admin_name)
    logger.info("Database seeding completed")


async def run_production_seeds(
    admin_users: AdminUserRepository,
    auth_service: AuthService,
    settings: Settings,
) -> None:
    """Seed admin users only."""
    logger.info("Running production seeds (admin users only)...")
    await seed_admin_users(admin_users, auth_service, settings)
    logger.info("Production database seeding completed")
