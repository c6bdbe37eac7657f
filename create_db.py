import argparse
import asyncio
from src.common.logger import setup_logging, log_info, TypeMsg
from src.infra.database import init_db, close_db, get_db
from src.services.products_service.repository import ProductRepository
from src.services.users_service.repository import UserRepository
from src.shared.models.product_dto import CreateProductRequest
from src.shared.models.user_dto import CreateUserRequest

DEMO_PRODUCTS = [
    CreateProductRequest(name="Laptop", price=999.0, stock=5),
    CreateProductRequest(name="Mouse", price=25.5, stock=40),
    CreateProductRequest(name="Keyboard", price=49.9, stock=20),
]

DEMO_USERS = [
    CreateUserRequest(name="Alice", email="alice@example.com"),
    CreateUserRequest(name="Bob", email="bob@example.com"),
]


async def seed() -> None:
    db = get_db()
    products = ProductRepository(db)
    users = UserRepository(db)

    # Seed only empty collections so the script can be re-run
    if await products.collection.count() == 0:
        for product in DEMO_PRODUCTS:
            await products.create_product(product)
        await log_info(f"Seeded {len(DEMO_PRODUCTS)} products", type_msg=TypeMsg.INFO)

    if await users.collection.count() == 0:
        for user in DEMO_USERS:
            await users.create_user(user)
        await log_info(f"Seeded {len(DEMO_USERS)} users", type_msg=TypeMsg.INFO)


async def create_db(with_seed: bool) -> None:
    setup_logging()
    # init_db applies migrations/init.sql
    await init_db()
    try:
        if with_seed:
            await seed()
    finally:
        await close_db()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create document collections in PostgreSQL")
    parser.add_argument("--seed", action="store_true", help="insert demo products and users")
    args = parser.parse_args()
    asyncio.run(create_db(args.seed))
