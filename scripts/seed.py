"""Database seeder for local development of the Book API."""
import asyncio
import argparse
import time
from book_api.config import settings
from book_api.database import Database
from book_api.migrations import apply_migrations
from book_api.models import Book

TITLES = ["Dune", "Dune Messiah", "Children of Dune", "Hyperion", "Foundation",
          "Neuromancer", "Solaris", "The Left Hand of Darkness", "Ubik", "Kindred"]

async def seed(count: int):
    print(f"Seeding {count} books into {settings.DATABASE_URL.rsplit('@', 1)[-1]}")
    start = time.perf_counter()

    db = Database(settings.DATABASE_URL, ssl=settings.DATABASE_SSL)
    try:
        await apply_migrations(db)
        async with db.sessionmaker() as session:
            for i in range(count):
                title = TITLES[i % len(TITLES)]
                if i >= len(TITLES):
                    title = f"{title} (vol. {i // len(TITLES) + 1})"
                session.add(Book(name=title))
            await session.commit()
    finally:
        await db.dispose()

    print(f"Done in {time.perf_counter() - start:.2f}s")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the books table")
    parser.add_argument("--count", type=int, default=len(TITLES), help="Number of books to insert")
    args = parser.parse_args()
    asyncio.run(seed(args.count))
